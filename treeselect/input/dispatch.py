"""Pure key reducer for the tree selector.

``dispatch_key(state, key, config)`` returns the next ``SelectorState`` and
never performs I/O. Invalid moves (right on a leaf, left at the root,
confirming a valueless node in single mode, disallowed cancel) and unbound
keys return the state unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from ..config import PromptConfig
from ..state import SelectorState
from .actions import Action
from .key_registry import KeyComboRegistry
from .keys import DEFAULT_KEYMAP


def move_active(active: int, delta: int, count: int, loop: bool) -> int:
    """Return the active index after moving by ``delta`` among ``count`` rows.

    Without looping the index is clamped to ``[0, count - 1]``; with looping it
    wraps modulo ``count``. An empty list always yields 0.
    """
    if count <= 0:
        return 0
    raw = active + delta
    if loop:
        return ((raw % count) + count) % count
    return max(0, min(raw, count - 1))


def _move(state: SelectorState, delta: int, config: PromptConfig) -> SelectorState:
    active = move_active(state.active, delta, len(state.loaded_items), config.loop)
    if active == state.active:
        return state
    return replace(state, active=active)


def _descend(state: SelectorState, config: PromptConfig) -> SelectorState:
    return state.with_navigator(state.navigator.descend_into(state.active_item))


def _ascend(state: SelectorState, config: PromptConfig) -> SelectorState:
    return state.with_navigator(state.navigator.ascend())


def _select_active(state: SelectorState) -> SelectorState:
    item = state.active_item
    if item is None or item.value is None:
        return state
    return state.finish(item.value)


def _confirm(state: SelectorState, config: PromptConfig) -> SelectorState:
    if config.multiple:
        return state.finish(list(state.selection.values))
    return _select_active(state)


def _toggle(state: SelectorState, config: PromptConfig) -> SelectorState:
    if not config.multiple:
        return _select_active(state)
    item = state.active_item
    if item is None or item.value is None:
        return state
    return replace(state, selection=state.selection.toggle(item.value))


def _cancel(state: SelectorState, config: PromptConfig) -> SelectorState:
    if not config.allow_cancel:
        return state
    return state.cancel()


_REDUCERS: dict[Action, Callable[[SelectorState, PromptConfig], SelectorState]] = {
    Action.MOVE_UP: lambda state, config: _move(state, -1, config),
    Action.MOVE_DOWN: lambda state, config: _move(state, 1, config),
    Action.PAGE_UP: lambda state, config: _move(state, -config.page_size, config),
    Action.PAGE_DOWN: lambda state, config: _move(state, config.page_size, config),
    Action.DESCEND: _descend,
    Action.ASCEND: _ascend,
    Action.CONFIRM: _confirm,
    Action.TOGGLE: _toggle,
    Action.CANCEL: _cancel,
}


def reduce_action(state: SelectorState, action: Action, config: PromptConfig) -> SelectorState:
    """Apply one resolved action; terminal states are returned unchanged."""
    if state.is_finished:
        return state
    return _REDUCERS[action](state, config)


def dispatch_key(
    state: SelectorState,
    key: str,
    config: PromptConfig,
    keymap: KeyComboRegistry = DEFAULT_KEYMAP,
) -> SelectorState:
    """Resolve ``key`` through ``keymap`` and apply the bound action."""
    if state.is_finished:
        return state
    action = keymap.resolve(key)
    if action is None:
        return state
    return reduce_action(state, action, config)


__all__ = ["move_active", "reduce_action", "dispatch_key"]
