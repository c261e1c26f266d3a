"""
Documentation comment formatting shared by all generators.
"""

import textwrap
from enum import Enum
from typing import Dict, Optional


class CommentStyle(Enum):
    """Comment styles a generator can request."""

    DOC_COMMENT = "doc"  # attached to a symbol, visible to tooling
    PLAIN_COMMENT = "plain"  # free-standing section banner


DEFAULT_MARKERS: Dict[CommentStyle, str] = {
    CommentStyle.DOC_COMMENT: "///",
    CommentStyle.PLAIN_COMMENT: "//",
}


def format_docstring(
    doc: Optional[str],
    style: CommentStyle,
    indent: int = 0,
    markers: Optional[Dict[CommentStyle, str]] = None,
) -> Optional[str]:
    """
    Turn a documentation string into comment lines.

    Args:
        doc: Documentation text, possibly multi-line
        style: Comment style to use
        indent: Number of spaces before each comment marker
        markers: Comment marker per style (defaults to ``///`` and ``//``)

    Returns:
        Comment block without a trailing newline, or None when there
        is no documentation
    """
    if doc is None or not doc.strip():
        return None

    if indent < 0:
        raise ValueError(f"Indentation must be non-negative, got {indent}")

    marker = (markers or DEFAULT_MARKERS)[style]
    prefix = " " * indent

    lines = textwrap.dedent(doc).strip("\n").split("\n")

    formatted = []
    for line in lines:
        line = line.rstrip()
        if line:
            formatted.append(f"{prefix}{marker} {line}")
        else:
            formatted.append(f"{prefix}{marker}")

    return "\n".join(formatted)
