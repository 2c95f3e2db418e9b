"""Tree item datatypes and child providers.

Children are a tagged variant: a static tuple of items or a deferred resolver.
Resolution always goes through ``resolve_children`` so callers never inspect
callables themselves.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from .errors import InvalidTreeError


@dataclass(frozen=True, eq=False)
class StaticChildren:
    """Children known up front."""

    items: tuple["Item", ...] = ()


@dataclass(frozen=True, eq=False)
class DeferredChildren:
    """Children produced on demand by ``resolver(parent)``.

    The resolver may return a sequence directly or an awaitable of one;
    ``None`` is treated as no children.
    """

    resolver: ChildResolver


ChildProvider = StaticChildren | DeferredChildren


@dataclass(frozen=True, eq=False)
class Item:
    """One tree node.

    ``value`` makes the node selectable, ``children`` makes it navigable.
    Items compare by identity, which is what the loader uses to detect that
    the current node changed.
    """

    name: str
    value: str | None = None
    children: ChildProvider | None = field(default=None)

    @property
    def is_selectable(self) -> bool:
        return self.value is not None

    @property
    def is_group(self) -> bool:
        return self.children is not None

    @classmethod
    def from_data(cls, data: object) -> Item:
        """Build an item tree from plain data.

        Accepts a string (leaf whose name and value are the string), a mapping
        with ``name``/``value``/``children`` keys, or a list of those, which is
        wrapped in an unnamed root. ``children`` may be a list or a callable.
        """
        if isinstance(data, list):
            return cls(name="", children=StaticChildren(tuple(cls.from_data(child) for child in data)))
        if isinstance(data, str):
            return cls(name=data, value=data)
        if not isinstance(data, Mapping):
            raise InvalidTreeError(f"cannot build tree item from {type(data).__name__}")

        name = data.get("name")
        if not isinstance(name, str):
            raise InvalidTreeError(f"tree item name must be a string, got {name!r}")
        value = data.get("value")
        if value is not None and not isinstance(value, str):
            raise InvalidTreeError(f"value of {name!r} must be a string, got {value!r}")

        raw_children = data.get("children")
        children: ChildProvider | None
        if raw_children is None:
            children = None
        elif isinstance(raw_children, (StaticChildren, DeferredChildren)):
            children = raw_children
        elif callable(raw_children):
            children = DeferredChildren(raw_children)
        elif isinstance(raw_children, list):
            children = StaticChildren(tuple(cls.from_data(child) for child in raw_children))
        else:
            raise InvalidTreeError(f"children of {name!r} must be a list or a callable")
        return cls(name=name, value=value, children=children)


ChildResolver = Callable[
    [Item | None],
    Sequence[Item] | None | Awaitable[Sequence[Item] | None],
]


def static_children(items: Iterable[Item]) -> StaticChildren:
    """Return a static provider for ``items``."""
    return StaticChildren(tuple(items))


def deferred_children(resolver: ChildResolver) -> DeferredChildren:
    """Return a deferred provider calling ``resolver(parent)`` on demand."""
    return DeferredChildren(resolver)


async def resolve_children(item: Item, parent: Item | None) -> tuple[Item, ...]:
    """Resolve ``item``'s children, dispatching on the provider tag.

    Leaves resolve to an empty tuple. Resolver errors propagate.
    """
    provider = item.children
    if provider is None:
        return ()
    if isinstance(provider, StaticChildren):
        return provider.items

    resolved = provider.resolver(parent)
    if inspect.isawaitable(resolved):
        resolved = await resolved
    if resolved is None:
        return ()
    return tuple(resolved)


__all__ = [
    "Item",
    "ChildProvider",
    "ChildResolver",
    "StaticChildren",
    "DeferredChildren",
    "static_children",
    "deferred_children",
    "resolve_children",
]
