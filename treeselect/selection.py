"""Selected-value bookkeeping for multiple-selection mode."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionState:
    """Ordered, duplicate-free tuple of selected values."""

    values: tuple[str, ...] = ()

    @classmethod
    def from_initial(cls, initial: str | Iterable[str] | None) -> SelectionState:
        """Seed from a scalar, a sequence, or nothing.

        Duplicates keep their first position.
        """
        if initial is None:
            return cls()
        if isinstance(initial, str):
            return cls(values=(initial,))
        seen: dict[str, None] = {}
        for value in initial:
            seen.setdefault(value, None)
        return cls(values=tuple(seen))

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __len__(self) -> int:
        return len(self.values)

    def toggle(self, value: str) -> SelectionState:
        """Remove ``value`` if present, otherwise append it."""
        if value in self.values:
            return SelectionState(values=tuple(v for v in self.values if v != value))
        return SelectionState(values=(*self.values, value))

    def summary(self) -> str:
        count = len(self.values)
        noun = "item" if count == 1 else "items"
        return f"{count} {noun} selected"


__all__ = ["SelectionState"]
