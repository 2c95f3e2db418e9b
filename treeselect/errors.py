"""Exception types raised by the tree selector."""

from __future__ import annotations


class TreeSelectorError(Exception):
    """Base class for tree selector failures."""


class PromptAbortedError(TreeSelectorError):
    """Raised when the prompt is interrupted before reaching a result."""


class InvalidTreeError(TreeSelectorError, ValueError):
    """Raised when plain data cannot be converted into tree items."""


__all__ = [
    "TreeSelectorError",
    "PromptAbortedError",
    "InvalidTreeError",
]
