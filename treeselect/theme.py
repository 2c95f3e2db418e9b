"""Prompt theme definitions and selection helpers.

A theme bundles status prefixes, text styles, hierarchy symbols, help text,
and the row renderer. Styles are pure formatting functions; the prompt core
calls them but never decides colours itself.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace

from .item import Item
from .state import Status

RESET = "\033[0m"

TICK = "✔"
CROSS = "✖"
LINE = "─"
LINE_UP_DOWN_RIGHT = "├"
LINE_UP_RIGHT = "└"
ARROW_UP = "↑"
ARROW_DOWN = "↓"
ARROW_LEFT = "←"
ARROW_RIGHT = "→"

TextStyle = Callable[[str], str]


def _sgr(code: str) -> TextStyle:
    """Return a style wrapping text in one SGR sequence."""

    def style(text: str) -> str:
        return f"\033[{code}m{text}{RESET}"

    return style


def _plain(text: str) -> str:
    return text


@dataclass(frozen=True)
class RenderContext:
    """Per-row facts handed to ``PromptTheme.render_item``."""

    items: tuple[Item, ...]
    loop: bool
    index: int
    is_active: bool
    is_selected: bool = False
    multiple: bool = False


@dataclass(frozen=True)
class PrefixTheme:
    idle: str
    done: str
    canceled: str

    def for_status(self, status: Status) -> str:
        if status is Status.DONE:
            return self.done
        if status is Status.CANCELED:
            return self.canceled
        return self.idle


@dataclass(frozen=True)
class StyleTheme:
    active: TextStyle
    selected: TextStyle
    unselected: TextStyle
    cancel_text: TextStyle
    empty_text: TextStyle
    error_text: TextStyle
    group: TextStyle
    item: TextStyle
    message: Callable[[str, Status], str]
    help: TextStyle
    answer: TextStyle


@dataclass(frozen=True)
class HierarchySymbols:
    branch: str
    leaf: str


def help_top(allow_cancel: bool, multiple: bool = False) -> str:
    """Key hint line shown next to the message while idle."""
    toggle = ", <space> to toggle selection" if multiple else ""
    confirm = "confirm" if multiple else "select"
    cancel = ", <esc> or q to cancel" if allow_cancel else ""
    return (
        f"(Press {ARROW_UP}{ARROW_DOWN} to navigate, {ARROW_LEFT}{ARROW_RIGHT} to navigate tree"
        f"{toggle}, <enter> to {confirm}{cancel})"
    )


def help_item(multiple: bool = False) -> str:
    if multiple:
        return "(Press <space> to toggle selection)"
    return "(Press <enter> to select)"


@dataclass(frozen=True)
class HelpTheme:
    top: Callable[[bool, bool], str] = help_top
    item: Callable[[bool], str] = help_item


def render_tree_item(theme: PromptTheme, item: Item, context: RenderContext) -> str:
    """Render one child row with its hierarchy glyph and state styling.

    Selected rows carry the selected style and no padding; other rows are
    styled as active, group, or plain and padded by two spaces. The active row
    gets the per-item help hint appended.
    """
    is_last = context.index == len(context.items) - 1
    symbols = theme.hierarchy_symbols
    line = symbols.leaf if is_last and not context.loop else symbols.branch

    if context.is_selected:
        line += theme.style.selected(item.name)
    else:
        if context.is_active:
            line += theme.style.active(item.name)
        elif item.children is not None:
            line += theme.style.group(item.name)
        else:
            line += theme.style.unselected(item.name)
        line += "  "

    if context.is_active:
        line += f" {theme.style.help(theme.help.item(context.multiple))}"
    return line


@dataclass(frozen=True)
class PromptTheme:
    """Complete set of formatting hooks used by the prompt renderer."""

    name: str
    prefix: PrefixTheme
    style: StyleTheme
    hierarchy_symbols: HierarchySymbols
    help: HelpTheme
    render_item: Callable[[PromptTheme, Item, RenderContext], str] = render_tree_item

    def render(self, item: Item, context: RenderContext) -> str:
        return self.render_item(self, item, context)


_HIERARCHY = HierarchySymbols(branch=LINE_UP_DOWN_RIGHT + LINE, leaf=LINE_UP_RIGHT + LINE)


def _selected_style(color: TextStyle) -> TextStyle:
    def style(text: str) -> str:
        return color(f"{text} {TICK}")

    return style


DEFAULT_THEME = PromptTheme(
    name="default",
    prefix=PrefixTheme(
        idle=_sgr("36")("?"),
        done=_sgr("32")(TICK),
        canceled=_sgr("31")(CROSS),
    ),
    style=StyleTheme(
        active=_sgr("36"),
        selected=_selected_style(_sgr("32")),
        unselected=_plain,
        cancel_text=_sgr("31"),
        empty_text=_sgr("31"),
        error_text=_sgr("1;31"),
        group=_sgr("93"),
        item=_plain,
        message=lambda text, _status: _sgr("1")(text),
        help=_sgr("3;90"),
        answer=_sgr("36"),
    ),
    hierarchy_symbols=_HIERARCHY,
    help=HelpTheme(),
)

OCEAN_THEME = PromptTheme(
    name="ocean",
    prefix=PrefixTheme(
        idle=_sgr("38;5;45")("?"),
        done=_sgr("38;5;84")(TICK),
        canceled=_sgr("38;5;215")(CROSS),
    ),
    style=StyleTheme(
        active=_sgr("1;38;5;45"),
        selected=_selected_style(_sgr("38;5;84")),
        unselected=_sgr("38;5;252"),
        cancel_text=_sgr("38;5;215"),
        empty_text=_sgr("2;38;5;110"),
        error_text=_sgr("38;5;215"),
        group=_sgr("38;5;117"),
        item=_sgr("38;5;252"),
        message=lambda text, _status: _sgr("1;38;5;153")(text),
        help=_sgr("2;38;5;110"),
        answer=_sgr("38;5;45"),
    ),
    hierarchy_symbols=_HIERARCHY,
    help=HelpTheme(),
)

PLAIN_THEME = PromptTheme(
    name="plain",
    prefix=PrefixTheme(idle="?", done=TICK, canceled=CROSS),
    style=StyleTheme(
        active=_plain,
        selected=lambda text: f"{text} {TICK}",
        unselected=_plain,
        cancel_text=_plain,
        empty_text=_plain,
        error_text=_plain,
        group=_plain,
        item=_plain,
        message=lambda text, _status: text,
        help=_plain,
        answer=_plain,
    ),
    hierarchy_symbols=_HIERARCHY,
    help=HelpTheme(),
)

_THEMES: dict[str, PromptTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}

_SECTIONS = ("prefix", "style", "hierarchy_symbols", "help")


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> PromptTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def make_theme(
    overrides: PromptTheme | Mapping[str, object] | None,
    base: PromptTheme = DEFAULT_THEME,
) -> PromptTheme:
    """Merge ``overrides`` over ``base``.

    Section keys (``prefix``, ``style``, ``hierarchy_symbols``, ``help``) take
    either a replacement section object or a mapping of field overrides;
    ``render_item`` and ``name`` are replaced as-is. Unknown keys raise
    ``ValueError``.
    """
    if overrides is None:
        return base
    if isinstance(overrides, PromptTheme):
        return overrides

    changes: dict[str, object] = {}
    for key, value in overrides.items():
        if key in _SECTIONS:
            section = getattr(base, key)
            if isinstance(value, Mapping):
                known = {f.name for f in fields(section)}
                unknown = set(value) - known
                if unknown:
                    raise ValueError(f"unknown {key} theme keys: {', '.join(sorted(unknown))}")
                changes[key] = replace(section, **value)
            else:
                changes[key] = value
        elif key in ("render_item", "name"):
            changes[key] = value
        else:
            raise ValueError(f"unknown theme key: {key!r}")
    return replace(base, **changes)


__all__ = [
    "RenderContext",
    "PrefixTheme",
    "StyleTheme",
    "HierarchySymbols",
    "HelpTheme",
    "PromptTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "render_tree_item",
    "help_top",
    "help_item",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "make_theme",
]
