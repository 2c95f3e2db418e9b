"""Symbolic prompt actions produced by key resolution."""

from __future__ import annotations

from enum import Enum


class Action(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    DESCEND = "descend"
    ASCEND = "ascend"
    CONFIRM = "confirm"
    TOGGLE = "toggle"
    CANCEL = "cancel"


__all__ = ["Action"]
