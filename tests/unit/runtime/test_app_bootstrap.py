"""Session bootstrap: building views from settings and the non-TTY path."""

from __future__ import annotations

import io
import os
import sys
import unittest
from unittest import mock

from lazytree.input import Command
from lazytree.runtime import build_tree_view, run_tree_view
from lazytree.runtime.config import ViewSettings
from lazytree.tree_model import tree_root
from lazytree.ui_theme import OCEAN_THEME, PLAIN_THEME


class BuildTreeViewTests(unittest.TestCase):
    def test_settings_flow_into_view(self) -> None:
        settings = ViewSettings(
            open_character="-",
            closed_character="+",
            scroll_off=3,
            theme="ocean",
            show_help=False,
            key_bindings={Command.MOVE_DOWN: ("n",)},
        )

        view = build_tree_view(tree_root("R").child("x"), settings, width=30, height=6)

        self.assertEqual((view.width, view.height), (30, 6))
        self.assertEqual(view.scroll_off, 3)
        self.assertIs(view.theme, OCEAN_THEME)
        self.assertFalse(view.show_help)
        self.assertEqual(view.key_map.command_for("n"), Command.MOVE_DOWN)
        self.assertEqual(view.tree_lines()[0], f"{OCEAN_THEME.glyph}-{OCEAN_THEME.reset} {OCEAN_THEME.selected}R{OCEAN_THEME.reset}")

    def test_no_color_selects_plain_theme_and_skips_highlighting(self) -> None:
        view = build_tree_view(
            tree_root("R").child("k: 1"),
            ViewSettings(),
            width=30,
            height=6,
            no_color=True,
            highlight_style="monokai",
        )

        self.assertIs(view.theme, PLAIN_THEME)
        self.assertIsNone(view.label_formatter)

    def test_highlight_style_installs_label_formatter(self) -> None:
        view = build_tree_view(tree_root("R"), ViewSettings(), width=30, height=6, highlight_style="monokai")

        self.assertIsNotNone(view.label_formatter)

    def test_missing_dimensions_come_from_terminal(self) -> None:
        with mock.patch("lazytree.runtime.app.shutil.get_terminal_size", return_value=os.terminal_size((50, 9))):
            view = build_tree_view(tree_root("R"), ViewSettings())

        self.assertEqual((view.width, view.height), (50, 9))


class RunTreeViewTests(unittest.TestCase):
    def test_non_tty_prints_single_frame(self) -> None:
        view = build_tree_view(
            tree_root("R").child("a"),
            ViewSettings(show_help=False),
            width=20,
            height=5,
            no_color=True,
        )
        stdout = io.StringIO()

        with mock.patch.object(sys, "stdin", io.StringIO()), mock.patch.object(sys, "stdout", stdout), mock.patch(
            "lazytree.runtime.app.run_main_loop"
        ) as run_main_loop:
            run_tree_view(view)

        run_main_loop.assert_not_called()
        self.assertEqual(stdout.getvalue(), "▼ R\n└── a\n")


if __name__ == "__main__":
    unittest.main()
