"""Events and snapshot types exchanged with the host."""

from __future__ import annotations

from dataclasses import dataclass

from ..input.commands import Command

__all__ = ["Command", "Resize", "UpdateResult", "SnapshotRow", "TreeSnapshot"]


@dataclass(frozen=True)
class Resize:
    """Terminal or host-pane size change."""

    width: int
    height: int


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of one ``TreeView.update`` call."""

    changed: bool = False
    quit: bool = False


@dataclass(frozen=True)
class SnapshotRow:
    """One visible tree line as seen by the presentation layer."""

    label: str
    depth: int
    offset: int
    is_open: bool
    is_selected: bool
    has_children: bool


@dataclass(frozen=True)
class TreeSnapshot:
    """Visible lines, cursor, and viewport bounds after the latest event."""

    rows: tuple[SnapshotRow, ...]
    cursor_offset: int
    window_top: int
    window_height: int

    @property
    def total_lines(self) -> int:
        return len(self.rows)

    @property
    def window_bottom(self) -> int:
        """Exclusive end of the visible window, clamped to the content."""
        return min(self.total_lines, self.window_top + max(0, self.window_height))

    def visible_rows(self) -> tuple[SnapshotRow, ...]:
        return self.rows[self.window_top:self.window_bottom]

    def selected_row(self) -> SnapshotRow | None:
        for row in self.rows:
            if row.is_selected:
                return row
        return None
