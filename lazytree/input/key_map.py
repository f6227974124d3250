"""Rebindable mapping from key tokens to tree-view commands.

Key tokens are the strings produced by ``input.reader.read_key``: printable
characters as-is, named keys like ``UP``/``PAGE_DOWN``, and ``CTRL_X``
combinations. Each binding also carries the label pair shown in help views.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace

from .commands import Command
from .key_registry import KeyComboBinding, KeyComboRegistry


@dataclass(frozen=True)
class KeyBinding:
    """Keys for one command plus its help label."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str
    enabled: bool = True


DEFAULT_BINDINGS: dict[Command, KeyBinding] = {
    Command.MOVE_DOWN: KeyBinding(("DOWN", "j", "CTRL_N"), "↓/j", "down"),
    Command.MOVE_UP: KeyBinding(("UP", "k", "CTRL_P"), "↑/k", "up"),
    Command.PAGE_DOWN: KeyBinding(("PAGE_DOWN", "f"), "pgdn/f", "page down"),
    Command.PAGE_UP: KeyBinding(("PAGE_UP", "b"), "pgup/b", "page up"),
    Command.HALF_PAGE_DOWN: KeyBinding(("CTRL_D", "d"), "d", "½ page down"),
    Command.HALF_PAGE_UP: KeyBinding(("CTRL_U", "u"), "u", "½ page up"),
    Command.GOTO_TOP: KeyBinding(("HOME", "g"), "g/home", "go to top"),
    Command.GOTO_BOTTOM: KeyBinding(("END", "G"), "G/end", "go to bottom"),
    Command.TOGGLE_NODE: KeyBinding(("ENTER_CR", "ENTER_LF", "SPACE"), "⏎", "toggle"),
    Command.OPEN_NODE: KeyBinding(("RIGHT", "l"), "→/l", "open"),
    Command.CLOSE_NODE: KeyBinding(("LEFT", "h"), "←/h", "close"),
    Command.TOGGLE_HELP: KeyBinding(("?",), "?", "more"),
    Command.QUIT: KeyBinding(("q", "CTRL_C"), "q", "quit"),
}


class KeyMap:
    """Command-to-binding table with reverse key lookup."""

    def __init__(self, bindings: Mapping[Command, KeyBinding] | None = None) -> None:
        self._bindings: dict[Command, KeyBinding] = dict(DEFAULT_BINDINGS if bindings is None else bindings)
        self._dispatch: KeyComboRegistry[Command] | None = None

    def __getitem__(self, command: Command) -> KeyBinding:
        return self._bindings[command]

    def __contains__(self, command: Command) -> bool:
        return command in self._bindings

    def items(self) -> list[tuple[Command, KeyBinding]]:
        return list(self._bindings.items())

    def binding(self, command: Command) -> KeyBinding | None:
        return self._bindings.get(command)

    def rebind(self, command: Command, keys: Iterable[str], help_key: str | None = None) -> KeyMap:
        """Replace the keys of ``command``; an empty key list disables it."""
        key_tuple = tuple(str(key) for key in keys)
        current = self._bindings.get(command)
        if current is None:
            current = KeyBinding((), command.value, command.value.replace("_", " "))
        label = help_key if help_key is not None else (current.help_key if not key_tuple else "/".join(key_tuple[:2]))
        self._bindings[command] = replace(current, keys=key_tuple, help_key=label, enabled=bool(key_tuple))
        self._dispatch = None
        return self

    def _registry(self) -> KeyComboRegistry[Command]:
        if self._dispatch is None:
            registry: KeyComboRegistry[Command] = KeyComboRegistry()
            for command, binding in self._bindings.items():
                if binding.enabled:
                    registry.register_binding(KeyComboBinding(binding.keys, _returning(command)))
            self._dispatch = registry
        return self._dispatch

    def command_for(self, key: str) -> Command | None:
        """Return the enabled command bound to ``key``.

        When two commands share a key, the one registered last wins.
        """
        return self._registry().dispatch(key)

    def with_overrides(self, overrides: Mapping[Command, Iterable[str]]) -> KeyMap:
        """Return a copy with the keys of each command in ``overrides`` replaced."""
        key_map = KeyMap(self._bindings)
        for command, keys in overrides.items():
            key_map.rebind(command, keys)
        return key_map


def _returning(command: Command) -> Callable[[], Command]:
    return lambda: command


def default_key_map() -> KeyMap:
    return KeyMap()
