"""Terminal control helpers for the prompt session.

Owns raw-mode lifecycle, cursor visibility, in-place frame redraws, and the
threaded key source that feeds the asyncio prompt loop.
"""

from __future__ import annotations

import asyncio
import contextlib
import os
import termios
import tty
from collections.abc import AsyncIterator
from typing import TextIO

from .ansi import clip_ansi_line
from .input import read_key

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
KEY_POLL_MS = 100


class TerminalController:
    """Manage raw-mode transitions for an inline (non alternate-screen) prompt."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_prompt_mode(self) -> None:
        """Enter raw mode and hide the cursor."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, HIDE_CURSOR.encode("ascii"))

    def disable_prompt_mode(self) -> None:
        """Show the cursor and restore the saved tty attributes."""
        os.write(self.stdout_fd, SHOW_CURSOR.encode("ascii"))
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with prompt enter/exit calls."""
        try:
            self.enable_prompt_mode()
            yield
        finally:
            self.disable_prompt_mode()


class FrameWriter:
    """Redraw multi-line frames in place on a text stream.

    Each frame erases the previous one by moving the cursor back to its first
    line and clearing to the end of the screen.
    """

    def __init__(self, stream: TextIO, *, raw: bool = False, columns: int | None = None) -> None:
        self.stream = stream
        self.columns = columns
        self._newline = "\r\n" if raw else "\n"
        self._rendered_lines = 0

    def write(self, frame: str) -> None:
        lines = frame.split("\n")
        if self.columns is not None:
            lines = [clip_ansi_line(line, self.columns) for line in lines]
        out: list[str] = []
        if self._rendered_lines > 1:
            out.append(f"\x1b[{self._rendered_lines - 1}A")
        if self._rendered_lines:
            out.append("\r\x1b[J")
        out.append(self._newline.join(lines))
        self.stream.write("".join(out))
        self.stream.flush()
        self._rendered_lines = len(lines)

    def finish(self) -> None:
        """Move below the last frame so later output starts on a fresh line."""
        if self._rendered_lines:
            self.stream.write(self._newline)
            self.stream.flush()
            self._rendered_lines = 0


async def iter_terminal_keys(fd: int, poll_ms: int = KEY_POLL_MS) -> AsyncIterator[str]:
    """Yield key tokens read from ``fd`` in a worker thread.

    Reads poll with a short timeout so the event loop keeps applying child
    loads between keystrokes. The source ends when ``fd`` reaches end of input.
    """
    while True:
        try:
            key = await asyncio.to_thread(read_key, fd, poll_ms)
        except EOFError:
            return
        if key:
            yield key


__all__ = [
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "TerminalController",
    "FrameWriter",
    "iter_terminal_keys",
]
