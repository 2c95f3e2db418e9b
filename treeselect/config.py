"""Prompt configuration and read-only user defaults.

``PromptConfig`` is the single explicit configuration object for a session.
User defaults live in a JSON file under the platform config directory; all
access is defensive: a missing or malformed file yields no defaults.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .item import Item
from .theme import PromptTheme

APP_NAME = "treeselect"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PromptConfig:
    """Options for one ``tree_selector`` session.

    ``theme`` may be a full ``PromptTheme`` or a mapping of overrides merged
    over the base theme. ``initial_selection`` only affects multiple mode.
    """

    message: str
    tree: Item
    page_size: int = DEFAULT_PAGE_SIZE
    loop: bool = False
    allow_cancel: bool = False
    cancel_text: str = "Canceled."
    empty_text: str = "No items available."
    error_text: str = "Failed to load items."
    multiple: bool = False
    initial_selection: str | Iterable[str] | None = None
    theme: PromptTheme | Mapping[str, object] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int) or self.page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size!r}")


def load_config() -> dict[str, object]:
    """Load the user config JSON object, or an empty dict on any failure."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def load_page_size() -> int | None:
    """Return a positive integer ``page_size`` default, if configured."""
    value = load_config().get("page_size")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return None
    return value


def _load_flag(key: str) -> bool:
    value = load_config().get(key)
    return bool(value) if isinstance(value, bool) else False


def load_loop() -> bool:
    return _load_flag("loop")


def load_no_color() -> bool:
    return _load_flag("no_color")


def load_theme_name() -> str | None:
    """Load configured theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_PAGE_SIZE",
    "PromptConfig",
    "load_config",
    "load_page_size",
    "load_loop",
    "load_no_color",
    "load_theme_name",
]
