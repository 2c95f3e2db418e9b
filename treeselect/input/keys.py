"""Key names and the default prompt keymap.

Terminal tokens from ``reader.read_key`` (``UP``, ``ENTER_CR``, ``ESC``...)
and symbolic names (``up``, ``enter``, ``escape``...) normalize to the same
symbolic name before lookup.
"""

from __future__ import annotations

from .actions import Action
from .key_registry import KeyComboBinding, KeyComboRegistry

KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_PAGE_UP = "pageup"
KEY_PAGE_DOWN = "pagedown"
KEY_ENTER = "enter"
KEY_SPACE = "space"
KEY_ESCAPE = "escape"
KEY_QUIT = "q"
KEY_CTRL_C = "ctrl_c"

_KEY_ALIASES: dict[str, str] = {
    "UP": KEY_UP,
    "DOWN": KEY_DOWN,
    "LEFT": KEY_LEFT,
    "RIGHT": KEY_RIGHT,
    "PAGE_UP": KEY_PAGE_UP,
    "PAGE_DOWN": KEY_PAGE_DOWN,
    "ENTER": KEY_ENTER,
    "ENTER_CR": KEY_ENTER,
    "ENTER_LF": KEY_ENTER,
    "return": KEY_ENTER,
    " ": KEY_SPACE,
    "ESC": KEY_ESCAPE,
    "esc": KEY_ESCAPE,
    "CTRL_C": KEY_CTRL_C,
    "\x03": KEY_CTRL_C,
}


def normalize_key(key: str) -> str:
    """Map a terminal token or symbolic key name to its symbolic name.

    Single printable characters keep their case so only a literal ``q``
    matches the quit binding.
    """
    alias = _KEY_ALIASES.get(key)
    if alias is not None:
        return alias
    if len(key) > 1:
        return key.lower()
    return key


DEFAULT_KEYMAP = KeyComboRegistry(normalize=normalize_key).register_bindings(
    KeyComboBinding((KEY_UP,), Action.MOVE_UP),
    KeyComboBinding((KEY_DOWN,), Action.MOVE_DOWN),
    KeyComboBinding((KEY_PAGE_UP,), Action.PAGE_UP),
    KeyComboBinding((KEY_PAGE_DOWN,), Action.PAGE_DOWN),
    KeyComboBinding((KEY_RIGHT,), Action.DESCEND),
    KeyComboBinding((KEY_LEFT,), Action.ASCEND),
    KeyComboBinding((KEY_ENTER,), Action.CONFIRM),
    KeyComboBinding((KEY_SPACE,), Action.TOGGLE),
    KeyComboBinding((KEY_ESCAPE, KEY_QUIT), Action.CANCEL),
)


__all__ = [
    "KEY_UP",
    "KEY_DOWN",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_PAGE_UP",
    "KEY_PAGE_DOWN",
    "KEY_ENTER",
    "KEY_SPACE",
    "KEY_ESCAPE",
    "KEY_QUIT",
    "KEY_CTRL_C",
    "DEFAULT_KEYMAP",
    "normalize_key",
]
