"""Color palettes for tree rows and the help footer.

``plain`` carries no escapes and backs ``--no-color``. Leaf value colors come
from a Pygments style instead (see ``render.labels``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """ANSI prefixes per screen role; ``reset`` ends every styled span."""

    name: str
    reset: str
    node: str
    root: str
    selected: str
    glyph: str
    branch: str
    help_key: str
    help_desc: str
    help_separator: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    node="\033[38;5;252m",
    root="\033[1;38;5;252m",
    selected="\033[1;38;5;18;48;5;62m",
    glyph="\033[38;5;44m",
    branch="\033[38;5;240m",
    help_key="\033[38;5;246m",
    help_desc="\033[38;5;241m",
    help_separator="\033[38;5;238m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    node="\033[38;5;153m",
    root="\033[1;38;5;45m",
    selected="\033[1;38;5;16;48;5;39m",
    glyph="\033[38;5;39m",
    branch="\033[2;38;5;31m",
    help_key="\033[38;5;117m",
    help_desc="\033[2;38;5;110m",
    help_separator="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    node="",
    root="",
    selected="",
    glyph="",
    branch="",
    help_key="",
    help_desc="",
    help_separator="",
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme`` and the ``theme`` config key."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Case-fold ``name``; unknown or empty names map to ``"default"``."""
    candidate = str(name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette for ``name``; ``no_color`` always yields the plain one."""
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
