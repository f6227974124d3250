"""Discrete commands a host forwards to the tree view."""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    """Tree-view commands, named by their config spelling."""

    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    HALF_PAGE_DOWN = "half_page_down"
    HALF_PAGE_UP = "half_page_up"
    GOTO_TOP = "goto_top"
    GOTO_BOTTOM = "goto_bottom"
    TOGGLE_NODE = "toggle_node"
    OPEN_NODE = "open_node"
    CLOSE_NODE = "close_node"
    TOGGLE_HELP = "toggle_help"
    QUIT = "quit"

    @classmethod
    def from_name(cls, name: str) -> Command | None:
        """Resolve ``"move_down"``/``"MOVE_DOWN"`` style names, else ``None``."""
        candidate = str(name).strip().lower()
        for command in cls:
            if command.value == candidate:
                return command
        return None
