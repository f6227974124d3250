"""Pygments highlighting for JSON scalar leaves.

JSON-backed trees carry a ``JsonScalar`` payload on every scalar leaf; its
value text is colorized with the JSON lexer so strings, numbers, and literals
read at a glance. The key is never parsed back out of the label, so keys that
contain ``": "`` are left alone. Other nodes pass through unchanged.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..tree_model import JsonScalar, Node
from ..tree_model.build import KEY_VALUE_SEPARATOR

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        logger.debug("unknown pygments style %r; using %s", style, DEFAULT_STYLE)
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=16)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    return Terminal256Formatter(style=style)


@lru_cache(maxsize=4096)
def highlight_value(text: str, style: str = DEFAULT_STYLE) -> str:
    """Colorize one JSON scalar with the given Pygments style."""
    rendered = highlight(text, JsonLexer(), _formatter_for_style(normalize_style(style)))
    return rendered.rstrip("\n")


def highlight_scalar(scalar: JsonScalar, style: str = DEFAULT_STYLE) -> str:
    """Render ``scalar`` with only its value text colorized."""
    value = highlight_value(scalar.text, style)
    if scalar.key is None:
        return value
    return f"{scalar.key}{KEY_VALUE_SEPARATOR}{value}"


class LabelHighlighter:
    """Node label formatter bound to one Pygments style."""

    def __init__(self, style: str | None = None) -> None:
        self.style = normalize_style(style)

    def __call__(self, node: Node) -> str:
        if isinstance(node.value, JsonScalar):
            return highlight_scalar(node.value, self.style)
        return node.label
