"""Public package surface for treeselect.

Exports the async ``tree_selector`` entry point and the types needed to
describe trees, configure the prompt, and theme it.
"""

from __future__ import annotations

import logging

from .config import PromptConfig
from .errors import InvalidTreeError, PromptAbortedError, TreeSelectorError
from .item import DeferredChildren, Item, StaticChildren, deferred_children, static_children
from .prompt import TreeSelectorPrompt, tree_selector
from .state import Status
from .theme import PromptTheme, RenderContext, make_theme

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "DeferredChildren",
    "InvalidTreeError",
    "Item",
    "PromptAbortedError",
    "PromptConfig",
    "PromptTheme",
    "RenderContext",
    "StaticChildren",
    "Status",
    "TreeSelectorError",
    "TreeSelectorPrompt",
    "deferred_children",
    "main",
    "make_theme",
    "static_children",
    "tree_selector",
]
