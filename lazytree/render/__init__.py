"""Presentation helpers: ANSI clipping, help views, and label highlighting."""

from .ansi import ANSI_ESCAPE_RE, char_display_width, clip_ansi_line, display_width, pad_ansi_line, strip_ansi
from .help import full_help_lines, help_lines, help_row_count, short_help_line
from .labels import LabelHighlighter, highlight_scalar

__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "pad_ansi_line",
    "strip_ansi",
    "full_help_lines",
    "help_lines",
    "help_row_count",
    "short_help_line",
    "LabelHighlighter",
    "highlight_scalar",
]
