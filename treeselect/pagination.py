"""Windowing of the current children into at most ``page_size`` rendered rows."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


def page_indices(count: int, active: int, page_size: int, loop: bool) -> list[int]:
    """Return the item indices visible for ``active``.

    Short lists are shown whole. Longer lists keep ``active`` near the middle
    of the page; in loop mode the window wraps around the list ends, otherwise
    it is clamped to them.
    """
    if count <= 0:
        return []
    page_size = max(1, page_size)
    if count <= page_size:
        return list(range(count))
    pointer = page_size // 2
    if loop:
        start = active - pointer
        return [(start + offset) % count for offset in range(page_size)]
    start = max(0, min(active - pointer, count - page_size))
    return list(range(start, start + page_size))


def paginate(
    items: Sequence[T],
    active: int,
    page_size: int,
    loop: bool,
    render_row: Callable[[T, int, bool], str],
) -> list[str]:
    """Render the visible window via ``render_row(item, index, is_active)``."""
    return [
        render_row(items[index], index, index == active)
        for index in page_indices(len(items), active, page_size, loop)
    ]


__all__ = ["page_indices", "paginate"]
