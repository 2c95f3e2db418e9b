"""Tree selector prompt session and its async entry point.

``TreeSelectorPrompt`` owns one session: it feeds keys through the pure
reducer, starts child loads when the current node changes, applies load
results that are still current, re-renders after every change, and resolves
its answer future once the status becomes terminal.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import sys
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable
from typing import TextIO

from .config import PromptConfig
from .errors import PromptAbortedError
from .input import dispatch_key, normalize_key
from .input.keys import KEY_CTRL_C
from .loader import ChildLoader, ChildLoadResult
from .render import render_prompt
from .selection import SelectionState
from .state import SelectorState, Status
from .terminal import FrameWriter, TerminalController, iter_terminal_keys
from .theme import make_theme

logger = logging.getLogger(__name__)

Answer = str | list[str] | None
KeySource = Iterable[str] | AsyncIterable[str]


class TreeSelectorPrompt:
    """One interactive selection session.

    Must be started from inside a running event loop. ``render`` receives
    every frame, including the final Done/Canceled one.
    """

    def __init__(self, config: PromptConfig, render: Callable[[str], None] | None = None) -> None:
        self.config = config
        self.theme = make_theme(config.theme)
        self.state = SelectorState.initial(
            config.tree,
            SelectionState.from_initial(config.initial_selection),
        )
        self._render = render
        self._loader = ChildLoader(self._apply_load_result)
        self._answer: asyncio.Future[Answer] | None = None

    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def finished(self) -> bool:
        return self.state.is_finished

    @property
    def answer(self) -> asyncio.Future[Answer]:
        if self._answer is None:
            raise RuntimeError("prompt has not been started")
        return self._answer

    def start(self) -> None:
        """Create the answer future, request the root's children, draw the first frame."""
        self._answer = asyncio.get_running_loop().create_future()
        self._request_children()
        self._emit()

    def render(self) -> str:
        return render_prompt(self.state, self.config, self.theme)

    def handle_key(self, key: str) -> None:
        """Apply one key event; ignored once the prompt has finished."""
        if self.state.is_finished:
            return
        previous = self.state
        self.state = dispatch_key(previous, key, self.config)
        if self.state is previous:
            return
        if self.state.load_generation != previous.load_generation:
            self._request_children()
        self._emit()
        if self.state.is_finished:
            self._resolve()

    async def settle(self) -> None:
        """Wait for every child load started so far to be applied or discarded."""
        await self._loader.wait_idle()

    def abort(self) -> None:
        """Cancel the answer future and stop outstanding loads."""
        self._loader.close()
        if self._answer is not None and not self._answer.done():
            self._answer.cancel()

    def close(self) -> None:
        self._loader.close()

    def _request_children(self) -> None:
        navigator = self.state.navigator
        self._loader.schedule(self.state.load_generation, navigator.current, navigator.parent)

    def _apply_load_result(self, result: ChildLoadResult) -> None:
        previous = self.state
        request = result.request
        self.state = previous.with_children(request.generation, request.node, result.children)
        if self.state is previous:
            logger.debug(
                "discarding children of %r from load generation %d",
                request.node.name,
                request.generation,
            )
            return
        self._emit()

    def _emit(self) -> None:
        if self._render is not None:
            self._render(self.render())

    def _resolve(self) -> None:
        self._loader.close()
        if self._answer is not None and not self._answer.done():
            self._answer.set_result(self.state.result)


async def _scripted_keys(prompt: TreeSelectorPrompt, keys: KeySource) -> AsyncIterator[str]:
    """Yield scripted keys, letting pending loads finish before each one."""
    if isinstance(keys, AsyncIterable):
        async for key in keys:
            await prompt.settle()
            yield key
        return
    for key in keys:
        await prompt.settle()
        yield key


async def run_prompt(prompt: TreeSelectorPrompt, keys: AsyncIterable[str]) -> Answer:
    """Drive ``prompt`` with ``keys`` until it finishes.

    Ctrl+C, or a key source that ends first, raises ``PromptAbortedError``.
    """
    prompt.start()
    try:
        async for key in keys:
            if normalize_key(key) == KEY_CTRL_C:
                raise PromptAbortedError("prompt interrupted by user")
            prompt.handle_key(key)
            if prompt.finished:
                break
        if not prompt.finished:
            raise PromptAbortedError("key input ended before the prompt completed")
        return await prompt.answer
    except PromptAbortedError:
        prompt.abort()
        raise
    finally:
        prompt.close()


async def tree_selector(
    config: PromptConfig,
    *,
    keys: KeySource | None = None,
    output: TextIO | None = None,
) -> Answer:
    """Run a tree selection prompt and return its answer.

    Multiple mode answers with a list of values, single mode with one value;
    either is ``None`` when the user cancels (only possible with
    ``allow_cancel``). Without ``keys`` the controlling terminal is read in
    raw mode; with ``keys`` the given key names are replayed instead.
    """
    stream = output if output is not None else sys.stdout

    if keys is not None:
        writer = FrameWriter(stream)
        prompt = TreeSelectorPrompt(config, render=writer.write)
        try:
            return await run_prompt(prompt, _scripted_keys(prompt, keys))
        finally:
            writer.finish()

    terminal = TerminalController(sys.stdin.fileno(), stream.fileno())
    writer = FrameWriter(stream, raw=True, columns=shutil.get_terminal_size((80, 24)).columns)
    prompt = TreeSelectorPrompt(config, render=writer.write)
    with terminal.raw_mode():
        try:
            return await run_prompt(prompt, iter_terminal_keys(terminal.stdin_fd))
        finally:
            writer.finish()


__all__ = ["Answer", "TreeSelectorPrompt", "run_prompt", "tree_selector"]
