"""Composite prompt state shared by the key reducer and the session.

Every field is immutable; transitions build a new ``SelectorState`` with
``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .item import Item
from .navigator import TreeNavigator
from .selection import SelectionState


class Status(str, Enum):
    """Prompt lifecycle status. ``DONE`` and ``CANCELED`` are terminal."""

    IDLE = "idle"
    DONE = "done"
    CANCELED = "canceled"


@dataclass(frozen=True)
class ChildrenPending:
    """Children of the current node are still resolving."""


@dataclass(frozen=True)
class ChildrenLoaded:
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class ChildrenFailed:
    """The current node's resolver raised ``error``."""

    error: BaseException


ChildrenState = ChildrenPending | ChildrenLoaded | ChildrenFailed

CHILDREN_PENDING = ChildrenPending()


@dataclass(frozen=True)
class SelectorState:
    """Everything needed to decide the next state and render the prompt."""

    navigator: TreeNavigator
    selection: SelectionState = field(default_factory=SelectionState)
    children: ChildrenState = CHILDREN_PENDING
    load_generation: int = 0
    active: int = 0
    status: Status = Status.IDLE
    result: str | list[str] | None = None

    @classmethod
    def initial(cls, tree: Item, selection: SelectionState | None = None) -> SelectorState:
        return cls(
            navigator=TreeNavigator.from_root(tree),
            selection=selection if selection is not None else SelectionState(),
        )

    @property
    def is_finished(self) -> bool:
        return self.status is not Status.IDLE

    @property
    def loaded_items(self) -> tuple[Item, ...]:
        """Loaded children, or an empty tuple while pending or failed."""
        if isinstance(self.children, ChildrenLoaded):
            return self.children.items
        return ()

    @property
    def active_item(self) -> Item | None:
        items = self.loaded_items
        if 0 <= self.active < len(items):
            return items[self.active]
        return None

    def with_navigator(self, navigator: TreeNavigator) -> SelectorState:
        """Switch to a new current node and request a fresh load.

        Returns ``self`` when the navigator did not change.
        """
        if navigator is self.navigator:
            return self
        return replace(
            self,
            navigator=navigator,
            children=CHILDREN_PENDING,
            load_generation=self.load_generation + 1,
            active=0,
        )

    def with_children(self, generation: int, node: Item, children: ChildrenState) -> SelectorState:
        """Apply a load result if its token still matches the current node.

        Stale results (older generation or a node that is no longer current)
        leave the state untouched and return ``self``.
        """
        if self.is_finished:
            return self
        if generation != self.load_generation or node is not self.navigator.current:
            return self
        active = self.active
        if isinstance(children, ChildrenLoaded):
            active = max(0, min(active, len(children.items) - 1))
        else:
            active = 0
        return replace(self, children=children, active=active)

    def finish(self, result: str | list[str]) -> SelectorState:
        return replace(self, status=Status.DONE, result=result)

    def cancel(self) -> SelectorState:
        return replace(self, status=Status.CANCELED, result=None)


__all__ = [
    "Status",
    "ChildrenPending",
    "ChildrenLoaded",
    "ChildrenFailed",
    "ChildrenState",
    "CHILDREN_PENDING",
    "SelectorState",
]
