"""
Import statement collection for a single rendering pass.
"""

from typing import Iterator, List, Set


class ImportCollector:
    """
    Deduplicated set of import statements required by rendered code.

    A new collector is created for every rendering pass and handed
    explicitly to each rendering call that may need an import.
    """

    def __init__(self):
        self._statements: Set[str] = set()

    def register(self, statement: str) -> None:
        """Register an import statement. Registering twice is a no-op."""
        self._statements.add(statement)

    def flush(self) -> List[str]:
        """Return all registered statements in lexicographic order."""
        return sorted(self._statements)

    def __contains__(self, statement: str) -> bool:
        return statement in self._statements

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[str]:
        return iter(self.flush())
