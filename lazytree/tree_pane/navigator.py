"""Cursor movement and open/close commands over a laid-out tree.

The cursor is a line offset into the visible pre-order listing. Every
operation leaves it clamped to ``[0, root.size - 1]``; nothing here raises.
"""

from __future__ import annotations

import logging

from ..tree_model import Node, find_by_offset, recompute_layout

logger = logging.getLogger(__name__)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class Navigator:
    """Own the cursor offset and drive layout recomputation for one tree."""

    def __init__(self, root: Node, cursor_offset: int = 0) -> None:
        self.root = root
        recompute_layout(root)
        self.cursor_offset = clamp(cursor_offset, 0, self.last_offset)

    @property
    def last_offset(self) -> int:
        return max(0, self.root.size - 1)

    def refresh(self) -> None:
        """Recompute layout and re-clamp the cursor to the new bounds."""
        recompute_layout(self.root)
        self.cursor_offset = clamp(self.cursor_offset, 0, self.last_offset)

    def move(self, delta: int) -> bool:
        """Move the cursor by ``delta`` lines, clamping at both ends."""
        prev = self.cursor_offset
        self.refresh()
        self.cursor_offset = clamp(self.cursor_offset + delta, 0, self.last_offset)
        return self.cursor_offset != prev

    def page_move(self, direction: int, height: int) -> bool:
        step = max(1, height)
        return self.move(step if direction > 0 else -step)

    def half_page_move(self, direction: int, height: int) -> bool:
        step = max(1, height // 2)
        return self.move(step if direction > 0 else -step)

    def goto_top(self) -> bool:
        return self.move(-self.cursor_offset)

    def goto_bottom(self) -> bool:
        return self.move(self.root.size)

    def node_at(self, offset: int) -> Node | None:
        return find_by_offset(self.root, offset)

    def node_at_cursor(self) -> Node | None:
        return self.node_at(self.cursor_offset)

    def _set_open_at(self, offset: int, open: bool | None) -> bool:
        """Apply ``open`` (``None`` flips) to the node at ``offset``.

        The cursor then follows that node to its recomputed offset, since
        closing a branch shifts every line below it.
        """
        node = self.node_at(offset)
        if node is None:
            logger.debug("no node at offset %d; ignoring open/close", offset)
            return False
        target = (not node.open) if open is None else open
        changed = node.open != target
        node.open = target
        self.refresh()
        self.cursor_offset = clamp(node.offset, 0, self.last_offset)
        return changed

    def toggle_at(self, offset: int) -> bool:
        return self._set_open_at(offset, None)

    def open_at(self, offset: int) -> bool:
        return self._set_open_at(offset, True)

    def close_at(self, offset: int) -> bool:
        return self._set_open_at(offset, False)

    def toggle(self) -> bool:
        return self.toggle_at(self.cursor_offset)

    def open(self) -> bool:
        return self.open_at(self.cursor_offset)

    def close(self) -> bool:
        return self.close_at(self.cursor_offset)
