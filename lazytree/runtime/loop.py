"""Main interactive event loop for the terminal UI.

One key is read, fully processed, and rendered before the next is accepted.
Terminal size is polled each iteration and forwarded as a resize event.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input.reader import read_key
from ..tree_pane import Resize, TreeView
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    idle_poll_ms: int = 200


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_main_loop`` so tests can drive it headless."""

    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size
    read_key: Callable[..., str] = read_key


def run_main_loop(
    view: TreeView,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming | None = None,
    callbacks: RuntimeLoopCallbacks | None = None,
) -> None:
    """Run the interactive loop until the view reports a quit command."""
    timing = timing or RuntimeLoopTiming()
    ops = callbacks or RuntimeLoopCallbacks()
    dirty = True

    with terminal.raw_mode():
        while True:
            term = ops.get_terminal_size((80, 24))
            if (term.columns, term.lines) != (view.width, view.height):
                view.update(Resize(term.columns, term.lines))
                dirty = True

            if dirty:
                terminal.write_frame(view.view())
                dirty = False

            key = ops.read_key(stdin_fd, timeout_ms=timing.idle_poll_ms)
            if not key:
                continue
            result = view.update(key)
            if result.quit:
                logger.debug("quit requested with key %r", key)
                return
            dirty = result.changed
