"""Command-line front door for lazytree.

Parses CLI options, builds a tree from a JSON file or a directory, and
dispatches into the interactive runtime (or prints one frame with
``--render``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .render.labels import DEFAULT_STYLE
from .runtime import build_tree_view, run_tree_view
from .runtime.config import load_view_settings
from .tree_model import Node, load_json_tree, tree_from_directory
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _non_negative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazytree",
        description="Browse a JSON document or a directory as a collapsible tree.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="JSON file or directory to browse. Defaults to current directory.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--style",
        default=DEFAULT_STYLE,
        help="Pygments style name used for JSON leaf values.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--scroll-off",
        type=_non_negative_int,
        default=None,
        help="Rows kept visible above and below the cursor.",
    )
    parser.add_argument("--render", action="store_true", help="Print one frame and exit.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Frame width (default: terminal width).")
    parser.add_argument(
        "--height",
        type=_positive_int,
        default=None,
        help="Frame height (default: terminal height).",
    )
    parser.add_argument("--all", action="store_true", help="Include hidden directory entries.")
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=None,
        help="Stop descending into directories below this depth.",
    )
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def configure_logging(log_file: str | None) -> None:
    """Send debug logs to ``log_file``; the terminal itself stays log-free."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_tree(path: Path, *, show_hidden: bool = False, max_depth: int | None = None) -> Node:
    """Build the tree for ``path``; input errors become ``SystemExit``."""
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if path.is_dir():
        return tree_from_directory(path, show_hidden=show_hidden, max_depth=max_depth)
    try:
        return load_json_tree(path, max_open_depth=1)
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazytree on a JSON file or directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    root = load_tree(path, show_hidden=args.all, max_depth=args.max_depth)
    logger.debug("loaded %s with %d visible rows", path, root.size)

    settings = load_view_settings()
    if args.theme is not None:
        settings = replace(settings, theme=args.theme)
    if args.scroll_off is not None:
        settings = replace(settings, scroll_off=args.scroll_off)

    view = build_tree_view(
        root,
        settings,
        width=args.width,
        height=args.height,
        no_color=args.no_color,
        highlight_style=None if path.is_dir() else args.style,
    )
    if args.render:
        sys.stdout.write(view.view() + "\n")
        return
    run_tree_view(view)


if __name__ == "__main__":
    main()
