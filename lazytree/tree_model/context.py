"""Per-render context shared by every node of a tree."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_OPEN_CHARACTER = "▼"
DEFAULT_CLOSED_CHARACTER = "▶"


@dataclass(frozen=True)
class RenderContext:
    """Values computed once per event and handed to every node before rendering.

    ``cursor_offset`` of ``-1`` means nothing is selected.
    """

    cursor_offset: int = -1
    open_character: str = DEFAULT_OPEN_CHARACTER
    closed_character: str = DEFAULT_CLOSED_CHARACTER

    def glyph_for(self, is_open: bool) -> str:
        return self.open_character if is_open else self.closed_character


EMPTY_RENDER_CONTEXT = RenderContext()
