"""A red-black tree of integers with ordered traversal strings, in redblack.tree."""

__version__ = "0.1.0"
__all__ = ["tree"]