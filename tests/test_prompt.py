"""Session-level tests for the tree selector prompt.

Runs full key scripts through ``tree_selector`` and drives
``TreeSelectorPrompt`` directly to check load ordering, stale-result
discarding, and failure placeholders.
"""

from __future__ import annotations

import asyncio
import io
import unittest

from treeselect.config import PromptConfig
from treeselect.errors import PromptAbortedError
from treeselect.item import DeferredChildren, Item, static_children
from treeselect.prompt import TreeSelectorPrompt, tree_selector
from treeselect.state import ChildrenFailed, ChildrenLoaded, ChildrenPending, Status
from treeselect.theme import PLAIN_THEME


def _sample_tree() -> Item:
    async def a_children(_parent):
        await asyncio.sleep(0)
        return [Item(name="A1", value="a1"), Item(name="A2", value="a2")]

    async def b_children(_parent):
        return [Item(name="B1", value="b1"), Item(name="B2", value="b2")]

    return Item.from_data(
        [
            {"name": "A", "value": "a", "children": a_children},
            {"name": "B", "value": "b", "children": b_children},
        ]
    )


def _config(tree: Item, **overrides) -> PromptConfig:
    overrides.setdefault("theme", PLAIN_THEME)
    return PromptConfig(message="Select an item", tree=tree, **overrides)


class TreeSelectorScenarioTests(unittest.IsolatedAsyncioTestCase):
    async def test_single_selection_inside_a_group(self) -> None:
        """Pick A1 by descending into group A and confirming.

        The sample tree is a top-level list, so it sits under an unnamed root
        whose rows are A and B. Reaching A1 therefore takes "right" (into A)
        rather than "down", then "enter" on the first row.
        """
        output = io.StringIO()

        answer = await tree_selector(_config(_sample_tree()), keys=["right", "enter"], output=output)

        self.assertEqual(answer, "a1")
        self.assertIn("✔ Select an item A1", output.getvalue())

    async def test_multiple_selection_collects_toggled_values(self) -> None:
        """Toggle A1 and A2 inside group A, then confirm.

        As with single selection, the list root means the first move is
        "right" into A; "down" then moves from A1 to A2 within that group.
        """
        output = io.StringIO()

        answer = await tree_selector(
            _config(_sample_tree(), multiple=True),
            keys=["right", "space", "down", "space", "enter"],
            output=output,
        )

        self.assertEqual(answer, ["a1", "a2"])
        self.assertIn("2 items selected", output.getvalue())

    async def test_cancel_resolves_to_none_and_shows_cancel_text(self) -> None:
        output = io.StringIO()

        answer = await tree_selector(
            _config(_sample_tree(), multiple=True, allow_cancel=True, cancel_text="Nothing picked."),
            keys=["escape"],
            output=output,
        )

        self.assertIsNone(answer)
        self.assertIn("✖ Select an item Nothing picked.", output.getvalue())

    async def test_initial_selection_is_returned_without_navigation(self) -> None:
        answer = await tree_selector(
            _config(_sample_tree(), multiple=True, initial_selection=["a1"]),
            keys=["enter"],
            output=io.StringIO(),
        )

        self.assertEqual(answer, ["a1"])

    async def test_async_key_source_is_supported(self) -> None:
        async def keys():
            for key in ("DOWN", "ENTER_CR"):
                yield key

        answer = await tree_selector(_config(_sample_tree()), keys=keys(), output=io.StringIO())

        self.assertEqual(answer, "b")

    async def test_keys_running_out_raises_prompt_aborted(self) -> None:
        with self.assertRaises(PromptAbortedError):
            await tree_selector(_config(_sample_tree()), keys=["down"], output=io.StringIO())

    async def test_ctrl_c_raises_prompt_aborted(self) -> None:
        with self.assertRaises(PromptAbortedError):
            await tree_selector(
                _config(_sample_tree(), allow_cancel=True),
                keys=["down", "CTRL_C", "enter"],
                output=io.StringIO(),
            )


class TreeSelectorPromptTests(unittest.IsolatedAsyncioTestCase):
    async def test_static_children_load_on_next_tick(self) -> None:
        frames: list[str] = []
        tree = Item(name="root", children=static_children([Item(name="only", value="only")]))
        prompt = TreeSelectorPrompt(_config(tree), render=frames.append)

        prompt.start()

        self.assertIsInstance(prompt.state.children, ChildrenPending)
        self.assertIn("Loading...", frames[-1])

        await prompt.settle()

        self.assertIsInstance(prompt.state.children, ChildrenLoaded)
        self.assertIn("└─only", frames[-1])

    async def test_resolver_receives_parent_of_current_node(self) -> None:
        seen: list[Item | None] = []

        def resolver(parent):
            seen.append(parent)
            return [Item(name="leaf", value="leaf")]

        group = Item(name="group", children=DeferredChildren(resolver))
        root = Item(name="root", children=static_children([group]))
        prompt = TreeSelectorPrompt(_config(root))
        prompt.start()
        await prompt.settle()

        prompt.handle_key("right")
        await prompt.settle()

        self.assertEqual(seen, [root])
        self.assertIs(prompt.state.navigator.current, group)

    async def test_stale_load_is_discarded_after_navigating_away(self) -> None:
        release = asyncio.Event()

        async def slow_children(_parent):
            await release.wait()
            return [Item(name="late", value="late")]

        slow = Item(name="slow", children=DeferredChildren(slow_children))
        other = Item(name="other", value="other")
        root = Item(name="root", children=static_children([slow, other]))
        prompt = TreeSelectorPrompt(_config(root))
        prompt.start()
        await prompt.settle()

        prompt.handle_key("right")
        self.assertIs(prompt.state.navigator.current, slow)
        prompt.handle_key("left")
        release.set()

        with self.assertLogs("treeselect.prompt", level="DEBUG") as logs:
            await prompt.settle()

        self.assertIs(prompt.state.navigator.current, root)
        self.assertEqual(prompt.state.loaded_items, (slow, other))
        self.assertTrue(any("discarding children of 'slow'" in line for line in logs.output))

    async def test_failed_load_shows_error_placeholder(self) -> None:
        async def broken(_parent):
            raise RuntimeError("backend down")

        root = Item(name="root", children=DeferredChildren(broken))
        prompt = TreeSelectorPrompt(_config(root))
        prompt.start()

        with self.assertLogs("treeselect.loader", level="WARNING"):
            await prompt.settle()

        self.assertIsInstance(prompt.state.children, ChildrenFailed)
        self.assertIn("Failed to load items. (backend down)", prompt.render())
        self.assertEqual(prompt.status, Status.IDLE)

    async def test_empty_children_show_empty_text(self) -> None:
        root = Item(name="root", children=DeferredChildren(lambda _parent: None))
        prompt = TreeSelectorPrompt(_config(root, empty_text="Nothing here."))
        prompt.start()
        await prompt.settle()

        self.assertTrue(prompt.render().endswith("\nNothing here."))

    async def test_keys_after_finish_are_ignored(self) -> None:
        frames: list[str] = []
        prompt = TreeSelectorPrompt(_config(_sample_tree(), allow_cancel=True), render=frames.append)
        prompt.start()
        await prompt.settle()

        prompt.handle_key("enter")
        frame_count = len(frames)
        prompt.handle_key("escape")

        self.assertEqual(prompt.status, Status.DONE)
        self.assertEqual(await prompt.answer, "a")
        self.assertEqual(len(frames), frame_count)

    async def test_answer_before_start_raises(self) -> None:
        prompt = TreeSelectorPrompt(_config(_sample_tree()))

        with self.assertRaises(RuntimeError):
            prompt.answer


if __name__ == "__main__":
    unittest.main()
