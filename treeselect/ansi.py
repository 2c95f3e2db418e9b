"""ANSI-aware width clipping for prompt frames.

Rows wider than the terminal would wrap and break the line count used to
redraw frames in place, so each row is clipped to the terminal width while
escape sequences are kept intact.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns; East Asian wide/fullwidth characters
    consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Visible width of ``text`` with escape sequences removed."""
    return sum(char_display_width(ch) for ch in ANSI_ESCAPE_RE.sub("", text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled row to at most ``max_cols`` display columns.

    Escape sequences are copied through without counting toward the width.
    A reset is appended when the row was cut after styling began.
    """
    if max_cols <= 0 or not text:
        return ""
    if display_width(text) <= max_cols:
        return text

    out: list[str] = []
    col = 0
    pos = 0
    styled = False
    while pos < len(text):
        match = ANSI_ESCAPE_RE.match(text, pos)
        if match:
            out.append(match.group(0))
            styled = True
            pos = match.end()
            continue
        width = char_display_width(text[pos])
        if col + width > max_cols:
            break
        out.append(text[pos])
        col += width
        pos += 1
    if styled:
        out.append("\033[0m")
    return "".join(out)


__all__ = ["ANSI_ESCAPE_RE", "char_display_width", "display_width", "clip_ansi_line"]
