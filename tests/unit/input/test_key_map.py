"""Default bindings, rebinding, and reverse lookup of ``KeyMap``."""

from __future__ import annotations

import unittest

from lazytree.input import Command, KeyMap, default_key_map


class KeyMapLookupTests(unittest.TestCase):
    def test_default_bindings_resolve_expected_commands(self) -> None:
        key_map = default_key_map()
        expected = {
            "DOWN": Command.MOVE_DOWN,
            "j": Command.MOVE_DOWN,
            "CTRL_N": Command.MOVE_DOWN,
            "k": Command.MOVE_UP,
            "PAGE_DOWN": Command.PAGE_DOWN,
            "f": Command.PAGE_DOWN,
            "b": Command.PAGE_UP,
            "CTRL_D": Command.HALF_PAGE_DOWN,
            "u": Command.HALF_PAGE_UP,
            "HOME": Command.GOTO_TOP,
            "G": Command.GOTO_BOTTOM,
            "ENTER_LF": Command.TOGGLE_NODE,
            "l": Command.OPEN_NODE,
            "LEFT": Command.CLOSE_NODE,
            "?": Command.TOGGLE_HELP,
            "CTRL_C": Command.QUIT,
        }
        for key, command in expected.items():
            with self.subTest(key=key):
                self.assertEqual(key_map.command_for(key), command)

    def test_space_and_enter_aliases_toggle(self) -> None:
        key_map = default_key_map()

        self.assertEqual(key_map.command_for(" "), Command.TOGGLE_NODE)
        self.assertEqual(key_map.command_for("\r"), Command.TOGGLE_NODE)
        self.assertEqual(key_map.command_for("enter"), Command.TOGGLE_NODE)

    def test_g_and_shift_g_are_distinct(self) -> None:
        key_map = default_key_map()

        self.assertEqual(key_map.command_for("g"), Command.GOTO_TOP)
        self.assertEqual(key_map.command_for("G"), Command.GOTO_BOTTOM)

    def test_unbound_key_returns_none(self) -> None:
        self.assertIsNone(default_key_map().command_for("z"))


class KeyMapRebindTests(unittest.TestCase):
    def test_rebind_replaces_keys_and_help_label(self) -> None:
        key_map = default_key_map().rebind(Command.MOVE_DOWN, ["n", "DOWN"])

        self.assertIsNone(key_map.command_for("j"))
        self.assertEqual(key_map.command_for("n"), Command.MOVE_DOWN)
        self.assertEqual(key_map[Command.MOVE_DOWN].help_key, "n/DOWN")

    def test_rebind_with_explicit_help_key(self) -> None:
        key_map = default_key_map().rebind(Command.QUIT, ["x"], help_key="x!")

        self.assertEqual(key_map[Command.QUIT].help_key, "x!")
        self.assertEqual(key_map[Command.QUIT].help_desc, "quit")

    def test_empty_rebind_disables_command(self) -> None:
        key_map = default_key_map().rebind(Command.TOGGLE_HELP, [])

        self.assertFalse(key_map[Command.TOGGLE_HELP].enabled)
        self.assertIsNone(key_map.command_for("?"))

    def test_later_command_wins_shared_key(self) -> None:
        key_map = default_key_map().rebind(Command.OPEN_NODE, ["q"])

        self.assertEqual(key_map.command_for("q"), Command.QUIT)

    def test_with_overrides_leaves_original_untouched(self) -> None:
        base = default_key_map()

        derived = base.with_overrides({Command.MOVE_UP: ["w"]})

        self.assertEqual(base.command_for("k"), Command.MOVE_UP)
        self.assertIsNone(derived.command_for("k"))
        self.assertEqual(derived.command_for("w"), Command.MOVE_UP)

    def test_missing_command_gets_generated_label(self) -> None:
        key_map = KeyMap({})

        key_map.rebind(Command.GOTO_TOP, ["t"])

        self.assertEqual(key_map.command_for("t"), Command.GOTO_TOP)
        self.assertEqual(key_map[Command.GOTO_TOP].help_desc, "goto top")


class KeyMapDispatchCacheTests(unittest.TestCase):
    def test_rebind_after_lookup_takes_effect(self) -> None:
        key_map = default_key_map()
        self.assertEqual(key_map.command_for("q"), Command.QUIT)

        key_map.rebind(Command.QUIT, [])

        self.assertIsNone(key_map.command_for("q"))
        self.assertIsNone(key_map.command_for("CTRL_C"))


class CommandNameTests(unittest.TestCase):
    def test_from_name_accepts_either_case(self) -> None:
        self.assertEqual(Command.from_name("move_down"), Command.MOVE_DOWN)
        self.assertEqual(Command.from_name(" PAGE_UP "), Command.PAGE_UP)
        self.assertIsNone(Command.from_name("jump"))


if __name__ == "__main__":
    unittest.main()
