"""Raw-mode terminal session used by the interactive loop.

The tree is drawn on the alternate screen with the cursor hidden; leaving the
session restores the saved tty attributes even when the loop raises.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_SCREEN = b"\x1b[?1049h\x1b[?25l"
LEAVE_SCREEN = b"\x1b[?25h\x1b[?1049l"
CLEAR_TO_EOL = "\x1b[K"


class TerminalController:
    """Own tty mode switches and full-frame writes for one session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_attrs = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_SCREEN)

    def disable_tui_mode(self) -> None:
        os.write(self.stdout_fd, LEAVE_SCREEN)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_attrs)

    def write_frame(self, frame: str) -> None:
        """Repaint from the top-left corner with ``frame``.

        Raw mode turns off newline translation, so rows are separated with
        CRLF. Each row is cleared to its end and the rest of the screen below
        the last row is erased.
        """
        rows = frame.split("\n")
        payload = "\x1b[H" + (CLEAR_TO_EOL + "\r\n").join(rows) + CLEAR_TO_EOL + "\x1b[J"
        os.write(self.stdout_fd, payload.encode("utf-8"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the enclosed block inside the TUI session."""
        self.enable_tui_mode()
        try:
            yield self
        finally:
            self.disable_tui_mode()
