"""``TreeView`` event handling, viewport following, and frame output."""

from __future__ import annotations

import unittest

from lazytree.input import KeyBinding, default_key_map
from lazytree.tree_model import Node, tree_root
from lazytree.tree_pane import Command, Resize, TreeView, UpdateResult
from lazytree.ui_theme import PLAIN_THEME


def _scenario_tree() -> Node:
    return tree_root("R").child(Node("A").child("A1"), "B")


def _long_tree(count: int) -> Node:
    root = tree_root("R")
    for i in range(count):
        root.child(f"item {i}")
    return root


class TreeViewCommandTests(unittest.TestCase):
    def test_page_down_near_end_clamps_to_last_line(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10, show_help=False)
        view.update(Command.MOVE_DOWN)
        view.update(Command.MOVE_DOWN)

        view.update(Command.PAGE_DOWN)

        self.assertEqual(view.cursor_offset, 3)
        self.assertEqual(view.snapshot().selected_row().label, "B")

    def test_key_tokens_resolve_through_key_map(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10)

        result = view.update("j")

        self.assertEqual(result, UpdateResult(changed=True, quit=False))
        self.assertEqual(view.cursor_offset, 1)

    def test_unbound_key_is_ignored(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10)

        self.assertEqual(view.update("x"), UpdateResult())
        self.assertEqual(view.cursor_offset, 0)

    def test_quit_sets_quit_flag(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10)

        result = view.update("q")

        self.assertTrue(result.quit)
        self.assertTrue(view.quit_requested)

    def test_toggle_via_enter_closes_branch(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10, show_help=False, theme=PLAIN_THEME)
        view.update("j")

        view.update("ENTER_CR")

        self.assertEqual(view.view().split("\n"), ["▼ R", "├── ▶ A", "└── B"])
        self.assertEqual(view.snapshot().total_lines, 3)

    def test_in_place_rebind_applies_to_next_key(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10)
        view.update("j")

        view.key_map.rebind(Command.MOVE_DOWN, ["n"])

        self.assertEqual(view.update("j"), UpdateResult())
        self.assertTrue(view.update("n").changed)
        self.assertEqual(view.cursor_offset, 2)

    def test_rebound_keys_replace_defaults(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10)
        view.set_key_map(default_key_map().rebind(Command.MOVE_DOWN, ["n"]))

        view.update("j")
        self.assertEqual(view.cursor_offset, 0)
        view.update("n")
        self.assertEqual(view.cursor_offset, 1)

    def test_disabled_quit_binding_never_quits(self) -> None:
        key_map = default_key_map().rebind(Command.QUIT, [])
        view = TreeView(_scenario_tree(), 80, 10, key_map=key_map)

        self.assertFalse(view.update("q").quit)
        self.assertTrue(view.update(Command.QUIT).quit)


class TreeViewViewportTests(unittest.TestCase):
    def test_goto_bottom_scrolls_window_to_end(self) -> None:
        view = TreeView(_long_tree(30), 80, 10, show_help=False, scroll_off=2)

        view.update("G")
        snapshot = view.snapshot()

        self.assertEqual(snapshot.cursor_offset, 30)
        self.assertEqual(snapshot.window_top, 21)
        self.assertEqual(len(view.tree_lines()), 10)
        self.assertEqual(snapshot.visible_rows()[-1].label, "item 29")

    def test_scroll_off_keeps_context_below_cursor(self) -> None:
        view = TreeView(_long_tree(30), 80, 10, show_help=False, scroll_off=2)

        for _ in range(8):
            view.update(Command.MOVE_DOWN)

        self.assertEqual(view.viewport.top, 1)

    def test_resize_shrinks_window_and_keeps_cursor_visible(self) -> None:
        view = TreeView(_long_tree(30), 80, 20, show_help=False)
        view.update(Command.HALF_PAGE_DOWN)
        self.assertEqual(view.cursor_offset, 10)

        result = view.update(Resize(80, 5))

        self.assertTrue(result.changed)
        self.assertTrue(view.viewport.contains(view.cursor_offset))
        self.assertFalse(view.update(Resize(80, 5)).changed)

    def test_help_rows_reduce_tree_height(self) -> None:
        view = TreeView(_long_tree(30), 80, 10, theme=PLAIN_THEME)

        lines = view.view().split("\n")

        self.assertEqual(view.viewport.height, 8)
        self.assertEqual(len(lines), 10)
        self.assertEqual(lines[8], "")
        self.assertIn("↓/j down", lines[9])

    def test_full_help_toggle_grows_help_area(self) -> None:
        view = TreeView(_long_tree(30), 80, 12, theme=PLAIN_THEME)

        view.update("?")

        self.assertTrue(view.show_full_help)
        self.assertEqual(view.viewport.height, 5)
        self.assertIn("close help", view.view())

    def test_width_clips_rendered_rows(self) -> None:
        view = TreeView(_scenario_tree(), 4, 10, show_help=False, theme=PLAIN_THEME)

        self.assertEqual(view.tree_lines()[:2], ["▼ R", "├── "])


class TreeViewHostTests(unittest.TestCase):
    def test_refresh_picks_up_nodes_attached_by_host(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10, show_help=False)
        view.root.child("C")

        view.refresh()

        self.assertEqual(view.snapshot().total_lines, 5)
        self.assertEqual(view.node(4).label, "C")

    def test_snapshot_rows_describe_visible_lines(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10, show_help=False)

        rows = view.snapshot().rows

        self.assertEqual([row.label for row in rows], ["R", "A", "A1", "B"])
        self.assertEqual([row.depth for row in rows], [0, 1, 2, 1])
        self.assertEqual([row.offset for row in rows], [0, 1, 2, 3])
        self.assertTrue(rows[0].is_selected)
        self.assertTrue(rows[1].has_children)

    def test_flat_nodes_include_hidden_nodes(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10)
        view.update("j")
        view.update("h")

        self.assertEqual(len(view.flat_nodes()), 4)
        self.assertEqual(view.node_at_cursor().label, "A")

    def test_scroll_off_setter_is_floored(self) -> None:
        view = TreeView(_scenario_tree(), 80, 10)

        view.scroll_off = -4

        self.assertEqual(view.scroll_off, 0)

    def test_host_short_help_sits_before_quit(self) -> None:
        view = TreeView(
            _scenario_tree(),
            80,
            10,
            theme=PLAIN_THEME,
            additional_short_help=lambda: [KeyBinding(("r",), "r", "reload")],
        )

        footer = view.view().split("\n")[-1]

        self.assertEqual(footer, "↑/k up • ↓/j down • ⏎ toggle • r reload • q quit • ? more")

    def test_host_full_help_column_counts_toward_tree_height(self) -> None:
        extras = [KeyBinding((f"F{i}",), f"F{i}", f"action {i}") for i in range(1, 9)]
        view = TreeView(
            _long_tree(30),
            80,
            12,
            theme=PLAIN_THEME,
            additional_full_help=lambda: extras,
        )

        view.update("?")
        lines = view.view().split("\n")

        self.assertEqual(view.viewport.height, 3)
        self.assertEqual(len(lines), 12)
        self.assertIn("F8 action 8", lines[-1])
        self.assertLess(lines[4].index("F1 action 1"), lines[4].index("q quit"))


if __name__ == "__main__":
    unittest.main()
