from __future__ import annotations

import os
import unittest
from contextlib import contextmanager

from lazytree.runtime import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from lazytree.tree_model import tree_root
from lazytree.tree_pane import TreeView
from lazytree.ui_theme import PLAIN_THEME


class _FakeTerminal:
    def __init__(self) -> None:
        self.frames: list[str] = []
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1

    def write_frame(self, frame: str) -> None:
        self.frames.append(frame)


def _scripted_keys(keys: list[str]):
    pending = list(keys)
    timeouts: list[int | None] = []

    def read_key(_fd: int, timeout_ms: int | None = None) -> str:
        timeouts.append(timeout_ms)
        if not pending:
            return "q"
        return pending.pop(0)

    return read_key, timeouts


def _view(width: int = 80, height: int = 10) -> TreeView:
    root = tree_root("R").child("a", "b", "c")
    return TreeView(root, width, height, show_help=False, theme=PLAIN_THEME)


class RuntimeLoopTests(unittest.TestCase):
    def test_renders_only_when_state_changes_and_stops_on_quit(self) -> None:
        view = _view()
        terminal = _FakeTerminal()
        read_key, timeouts = _scripted_keys(["", "j", "x", "q"])
        callbacks = RuntimeLoopCallbacks(
            get_terminal_size=lambda _fallback: os.terminal_size((80, 10)),
            read_key=read_key,
        )

        run_main_loop(view, terminal, 0, RuntimeLoopTiming(idle_poll_ms=7), callbacks)

        self.assertEqual(len(terminal.frames), 2)
        self.assertEqual(view.cursor_offset, 1)
        self.assertEqual(timeouts, [7, 7, 7, 7])
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_terminal_resize_is_forwarded_to_view(self) -> None:
        view = _view()
        terminal = _FakeTerminal()
        read_key, _timeouts = _scripted_keys(["q"])
        callbacks = RuntimeLoopCallbacks(
            get_terminal_size=lambda _fallback: os.terminal_size((3, 2)),
            read_key=read_key,
        )

        run_main_loop(view, terminal, 0, callbacks=callbacks)

        self.assertEqual((view.width, view.height), (3, 2))
        self.assertEqual(terminal.frames, ["▼ R\n├──"])

    def test_terminal_is_restored_when_view_raises(self) -> None:
        view = _view()
        terminal = _FakeTerminal()

        def read_key(_fd: int, timeout_ms: int | None = None) -> str:
            raise KeyboardInterrupt

        callbacks = RuntimeLoopCallbacks(
            get_terminal_size=lambda _fallback: os.terminal_size((80, 10)),
            read_key=read_key,
        )

        with self.assertRaises(KeyboardInterrupt):
            run_main_loop(view, terminal, 0, callbacks=callbacks)
        self.assertEqual(terminal.exited, 1)


if __name__ == "__main__":
    unittest.main()
