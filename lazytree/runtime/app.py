"""Session bootstrap: build a ``TreeView`` from settings and run it."""

from __future__ import annotations

import shutil
import sys

from ..render.labels import LabelHighlighter
from ..tree_model import Node
from ..tree_pane import TreeView
from ..ui_theme import resolve_theme
from .config import ViewSettings, load_view_settings
from .loop import run_main_loop
from .terminal import TerminalController


def build_tree_view(
    root: Node,
    settings: ViewSettings | None = None,
    *,
    width: int | None = None,
    height: int | None = None,
    no_color: bool = False,
    highlight_style: str | None = None,
) -> TreeView:
    """Create a tree view sized to the terminal unless dimensions are given.

    ``highlight_style`` enables Pygments colors for JSON scalar leaves.
    """
    settings = settings or load_view_settings()
    term = shutil.get_terminal_size((80, 24))
    label_formatter = None
    if highlight_style is not None and not no_color:
        label_formatter = LabelHighlighter(highlight_style)
    return TreeView(
        root,
        width if width is not None else term.columns,
        height if height is not None else term.lines,
        key_map=settings.key_map(),
        theme=resolve_theme(settings.theme, no_color=no_color),
        open_character=settings.open_character,
        closed_character=settings.closed_character,
        scroll_off=settings.scroll_off,
        show_help=settings.show_help,
        label_formatter=label_formatter,
    )


def run_tree_view(view: TreeView) -> None:
    """Run ``view`` interactively, or print one frame when not on a TTY."""
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        sys.stdout.write(view.view() + "\n")
        return
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    run_main_loop(view, terminal, stdin_fd)
