"""Prompt frame rendering.

Builds the full text of one frame from state, config, and theme. Rendering is
presentation-only and side-effect free.
"""

from __future__ import annotations

from .config import PromptConfig
from .item import Item
from .pagination import paginate
from .state import ChildrenFailed, ChildrenPending, SelectorState, Status
from .theme import PromptTheme, RenderContext

LOADING_TEXT = "Loading..."


def _failure_text(config: PromptConfig, error: BaseException) -> str:
    detail = str(error)
    if not detail:
        return config.error_text
    return f"{config.error_text} ({detail})"


def render_children(state: SelectorState, config: PromptConfig, theme: PromptTheme) -> str:
    """Render the body below the message line for an idle prompt."""
    children = state.children
    if isinstance(children, ChildrenPending):
        return LOADING_TEXT
    if isinstance(children, ChildrenFailed):
        return theme.style.error_text(_failure_text(config, children.error))

    items = children.items
    if not items:
        return theme.style.empty_text(config.empty_text)

    def render_row(item: Item, index: int, is_active: bool) -> str:
        is_selected = config.multiple and item.value is not None and item.value in state.selection
        context = RenderContext(
            items=items,
            loop=config.loop,
            index=index,
            is_active=is_active,
            is_selected=is_selected,
            multiple=config.multiple,
        )
        return theme.render(item, context)

    return "\n".join(paginate(items, state.active, config.page_size, config.loop, render_row))


def render_answer(state: SelectorState, config: PromptConfig) -> str:
    """Text summarizing a finished prompt's answer."""
    if config.multiple:
        return state.selection.summary()
    item = state.active_item
    if item is not None:
        return item.name
    return str(state.result)


def render_prompt(state: SelectorState, config: PromptConfig, theme: PromptTheme) -> str:
    """Return the complete frame for ``state``."""
    prefix = theme.prefix.for_status(state.status)
    message = theme.style.message(config.message, state.status)

    if state.status is Status.CANCELED:
        return f"{prefix} {message} {theme.style.cancel_text(config.cancel_text)}"
    if state.status is Status.DONE:
        return f"{prefix} {message} {theme.style.answer(render_answer(state, config))}"

    help_top = theme.style.help(theme.help.top(config.allow_cancel, config.multiple))
    return f"{prefix} {message} {help_top}\n{render_children(state, config, theme)}"


__all__ = ["LOADING_TEXT", "render_children", "render_answer", "render_prompt"]
