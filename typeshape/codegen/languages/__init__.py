"""Language backends."""

from .rust import RustGenerator

__all__ = ["RustGenerator"]
