"""Ancestry stack for walking down and back up the item tree."""

from __future__ import annotations

from dataclasses import dataclass

from .item import Item


@dataclass(frozen=True)
class TreeNavigator:
    """Immutable ancestry stack; ``stack[0]`` is the root, ``stack[-1]`` is current.

    Rejected moves return the same navigator so callers can detect no-ops by
    identity.
    """

    stack: tuple[Item, ...]

    @classmethod
    def from_root(cls, root: Item) -> TreeNavigator:
        return cls(stack=(root,))

    @property
    def current(self) -> Item:
        return self.stack[-1]

    @property
    def parent(self) -> Item | None:
        """Node below the current one on the stack, ``None`` at the root."""
        if len(self.stack) < 2:
            return None
        return self.stack[-2]

    @property
    def depth(self) -> int:
        return len(self.stack)

    def descend_into(self, item: Item | None) -> TreeNavigator:
        """Push ``item`` when it has children; otherwise return ``self``."""
        if item is None or item.children is None:
            return self
        return TreeNavigator(stack=(*self.stack, item))

    def ascend(self) -> TreeNavigator:
        """Pop the current node unless it is the root."""
        if len(self.stack) <= 1:
            return self
        return TreeNavigator(stack=self.stack[:-1])


__all__ = ["TreeNavigator"]
