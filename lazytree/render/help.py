"""Short and full help views built from the active key map.

The short view is a single ``key desc • key desc`` line; the full view lays
binding groups out as side-by-side columns. Hosts may add their own bindings
to either view. Rendering is side-effect free.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..input.commands import Command
from ..input.key_map import KeyBinding, KeyMap
from ..ui_theme import DEFAULT_THEME, PLAIN_THEME, UITheme
from .ansi import clip_ansi_line, display_width

SHORT_SEPARATOR = " • "
COLUMN_SEPARATOR = "    "
ELLIPSIS = "…"

SHORT_HELP_LEADING: tuple[Command, ...] = (
    Command.MOVE_UP,
    Command.MOVE_DOWN,
    Command.TOGGLE_NODE,
)
SHORT_HELP_TRAILING: tuple[Command, ...] = (
    Command.QUIT,
    Command.TOGGLE_HELP,
)

FULL_HELP_COLUMNS: tuple[tuple[Command, ...], ...] = (
    (
        Command.MOVE_UP,
        Command.MOVE_DOWN,
        Command.PAGE_UP,
        Command.PAGE_DOWN,
        Command.HALF_PAGE_UP,
        Command.HALF_PAGE_DOWN,
    ),
    (
        Command.GOTO_TOP,
        Command.GOTO_BOTTOM,
        Command.TOGGLE_NODE,
        Command.OPEN_NODE,
        Command.CLOSE_NODE,
    ),
)
FULL_HELP_CLOSING_COLUMN: tuple[Command, ...] = (
    Command.QUIT,
    Command.TOGGLE_HELP,
)

FULL_HELP_CLOSE_DESC = "close help"


def _entry(binding: KeyBinding, theme: UITheme, desc: str | None = None) -> str:
    text = desc if desc is not None else binding.help_desc
    return f"{theme.help_key}{binding.help_key}{theme.reset} {theme.help_desc}{text}{theme.reset}"


def _enabled_bindings(key_map: KeyMap, commands: tuple[Command, ...]) -> list[tuple[Command, KeyBinding]]:
    out: list[tuple[Command, KeyBinding]] = []
    for command in commands:
        binding = key_map.binding(command)
        if binding is not None and binding.enabled:
            out.append((command, binding))
    return out


def _host_entries(extra: Sequence[KeyBinding], theme: UITheme) -> list[str]:
    return [_entry(binding, theme) for binding in extra if binding.enabled]


def short_help_line(
    key_map: KeyMap,
    width: int,
    theme: UITheme | None = None,
    extra: Sequence[KeyBinding] = (),
) -> str:
    """Render the one-line help, ending in an ellipsis when it does not fit.

    Host ``extra`` bindings go after the navigation keys and before quit.
    """
    active_theme = theme or DEFAULT_THEME
    separator = f"{active_theme.help_separator}{SHORT_SEPARATOR}{active_theme.reset}"
    entries = [_entry(binding, active_theme) for _command, binding in _enabled_bindings(key_map, SHORT_HELP_LEADING)]
    entries += _host_entries(extra, active_theme)
    entries += [_entry(binding, active_theme) for _command, binding in _enabled_bindings(key_map, SHORT_HELP_TRAILING)]

    line = ""
    for entry in entries:
        candidate = entry if not line else line + separator + entry
        if width > 0 and display_width(candidate) > width:
            tail = f" {ELLIPSIS}" if line else ELLIPSIS
            if display_width(line + tail) <= width:
                line += tail
            break
        line = candidate
    return line


def _full_help_columns(key_map: KeyMap, theme: UITheme, extra: Sequence[KeyBinding]) -> list[list[str]]:
    columns = [
        [_entry(binding, theme) for _command, binding in _enabled_bindings(key_map, group)]
        for group in FULL_HELP_COLUMNS
    ]
    columns.append(_host_entries(extra, theme))
    columns.append(
        [
            _entry(binding, theme, FULL_HELP_CLOSE_DESC if command is Command.TOGGLE_HELP else None)
            for command, binding in _enabled_bindings(key_map, FULL_HELP_CLOSING_COLUMN)
        ]
    )
    return [column for column in columns if column]


def full_help_lines(
    key_map: KeyMap,
    width: int,
    theme: UITheme | None = None,
    extra: Sequence[KeyBinding] = (),
) -> list[str]:
    """Render help columns side by side, one output line per row.

    Host ``extra`` bindings form their own column just before quit.
    """
    columns = _full_help_columns(key_map, theme or DEFAULT_THEME, extra)
    if not columns:
        return []

    widths = [max(display_width(entry) for entry in column) for column in columns]
    row_count = max(len(column) for column in columns)
    lines: list[str] = []
    for row in range(row_count):
        cells: list[str] = []
        for column, column_width in zip(columns, widths):
            cell = column[row] if row < len(column) else ""
            cells.append(cell + " " * (column_width - display_width(cell)))
        line = COLUMN_SEPARATOR.join(cells).rstrip()
        lines.append(clip_ansi_line(line, width) if width > 0 else line)
    return lines


def help_lines(
    key_map: KeyMap,
    width: int,
    show_all: bool,
    theme: UITheme | None = None,
    extra_short: Sequence[KeyBinding] = (),
    extra_full: Sequence[KeyBinding] = (),
) -> list[str]:
    if show_all:
        return full_help_lines(key_map, width, theme, extra_full)
    return [short_help_line(key_map, width, theme, extra_short)]


def help_row_count(
    key_map: KeyMap,
    show_help: bool,
    show_all: bool,
    extra_full: Sequence[KeyBinding] = (),
) -> int:
    """Return how many rows the help view occupies, including its top padding."""
    if not show_help:
        return 0
    if not show_all:
        return 2
    columns = _full_help_columns(key_map, PLAIN_THEME, extra_full)
    return 1 + max((len(column) for column in columns), default=0)
