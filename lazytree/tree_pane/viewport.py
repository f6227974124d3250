"""Scrollable window over the visible tree lines.

The window follows the cursor while keeping ``scroll_off`` context lines above
and below it, and never extends outside the content.
"""

from __future__ import annotations


class Viewport:
    """Window top/height plus the desired scroll-off margin."""

    def __init__(self, height: int, scroll_off: int = 0, top: int = 0) -> None:
        self.height = max(0, height)
        self.scroll_off = max(0, scroll_off)
        self.top = max(0, top)

    def __repr__(self) -> str:
        return f"Viewport(top={self.top}, height={self.height}, scroll_off={self.scroll_off})"

    @property
    def bottom(self) -> int:
        """Exclusive end line of the window."""
        return self.top + self.height

    def effective_margin(self) -> int:
        """Scroll-off capped at half the height so margins never invert."""
        return max(0, min(self.scroll_off, self.height // 2))

    def resize(self, height: int) -> None:
        self.height = max(0, height)

    def clamp(self, total: int) -> None:
        """Keep the window inside ``[0, total)``."""
        max_top = max(0, total - max(1, self.height))
        self.top = max(0, min(self.top, max_top))

    def sync(self, cursor: int, total: int) -> bool:
        """Scroll so ``cursor`` keeps its margin; return whether ``top`` changed."""
        prev_top = self.top
        margin = self.effective_margin()
        min_top = max(cursor - margin, 0)
        min_bottom = min(total - 1, cursor + margin)
        if self.top > min_top:
            self.top = min_top
        elif self.bottom < min_bottom + 1:
            self.top = min_bottom - self.height + 1
        self.clamp(total)
        return self.top != prev_top

    def window(self, total: int) -> range:
        """Return line indices currently inside the window."""
        return range(self.top, min(total, self.bottom))

    def contains(self, line: int) -> bool:
        return self.top <= line < self.bottom
