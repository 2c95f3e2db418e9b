from __future__ import annotations

import unittest

from treeselect.item import Item
from treeselect.state import Status
from treeselect.theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    RenderContext,
    available_theme_names,
    make_theme,
    normalize_theme_name,
    resolve_theme,
)


class ThemeSelectionTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_unknown_or_empty_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("solarized"), "default")

    def test_no_color_always_resolves_plain(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)


class MakeThemeTests(unittest.TestCase):
    def test_none_returns_base_and_theme_instance_passes_through(self) -> None:
        self.assertIs(make_theme(None), DEFAULT_THEME)
        self.assertIs(make_theme(OCEAN_THEME), OCEAN_THEME)

    def test_section_mapping_overrides_only_named_fields(self) -> None:
        theme = make_theme({"style": {"answer": lambda text: f"<{text}>"}, "prefix": {"idle": ">"}})

        self.assertEqual(theme.style.answer("x"), "<x>")
        self.assertIs(theme.style.active, DEFAULT_THEME.style.active)
        self.assertEqual(theme.prefix.idle, ">")
        self.assertEqual(theme.prefix.for_status(Status.DONE), DEFAULT_THEME.prefix.done)

    def test_custom_render_item_is_called_with_theme(self) -> None:
        calls = []

        def render_item(theme, item, context):
            calls.append((theme, item.name, context.index))
            return item.name.upper()

        theme = make_theme({"render_item": render_item}, base=PLAIN_THEME)
        item = Item(name="row")

        rendered = theme.render(item, RenderContext(items=(item,), loop=False, index=0, is_active=True))

        self.assertEqual(rendered, "ROW")
        self.assertEqual(calls, [(theme, "row", 0)])

    def test_unknown_keys_raise_value_error(self) -> None:
        with self.assertRaises(ValueError):
            make_theme({"colours": {}})
        with self.assertRaises(ValueError):
            make_theme({"style": {"blink": str}})

    def test_default_styles_wrap_text_in_sgr_sequences(self) -> None:
        self.assertEqual(DEFAULT_THEME.style.active("x"), "\033[36mx\033[0m")
        self.assertEqual(DEFAULT_THEME.style.selected("x"), "\033[32mx ✔\033[0m")
        self.assertEqual(DEFAULT_THEME.style.unselected("x"), "x")


if __name__ == "__main__":
    unittest.main()
