"""Read-only JSON config loaders.

Reads glyphs, scroll-off margin, theme, help visibility, and key bindings.
The file is edited by hand; this module never writes it. All access is
defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..input.commands import Command
from ..input.key_map import KeyMap, default_key_map
from ..tree_model import DEFAULT_CLOSED_CHARACTER, DEFAULT_OPEN_CHARACTER

logger = logging.getLogger(__name__)

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_SCROLL_OFF = 2


@dataclass(frozen=True)
class ViewSettings:
    """Config-derived tree-view settings with defaults filled in."""

    open_character: str = DEFAULT_OPEN_CHARACTER
    closed_character: str = DEFAULT_CLOSED_CHARACTER
    scroll_off: int = DEFAULT_SCROLL_OFF
    theme: str | None = None
    show_help: bool = True
    key_bindings: dict[Command, tuple[str, ...]] = field(default_factory=dict)

    def key_map(self) -> KeyMap:
        return default_key_map().with_overrides(self.key_bindings)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_glyph(key: str, default: str) -> str:
    value = load_config().get(key)
    if not isinstance(value, str) or not value.strip():
        return default
    return value


def load_open_character() -> str:
    return _load_glyph("open_character", DEFAULT_OPEN_CHARACTER)


def load_closed_character() -> str:
    return _load_glyph("closed_character", DEFAULT_CLOSED_CHARACTER)


def load_scroll_off() -> int:
    """Return the persisted scroll-off margin.

    Booleans, non-integers, and negative values fall back to the default.
    """
    value = load_config().get("scroll_off")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_SCROLL_OFF
    return value


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_show_help() -> bool:
    """Return persisted help visibility; only explicit booleans are accepted."""
    value = load_config().get("show_help")
    return value if isinstance(value, bool) else True


def load_key_bindings() -> dict[Command, tuple[str, ...]]:
    """Load key-binding overrides keyed by command.

    Unknown command names, non-list values, and non-string keys are dropped.
    An empty list is kept: it disables the command.
    """
    value = load_config().get("key_bindings")
    if not isinstance(value, dict):
        return {}

    bindings: dict[Command, tuple[str, ...]] = {}
    for name, raw_keys in value.items():
        command = Command.from_name(name) if isinstance(name, str) else None
        if command is None:
            logger.warning("dropping key binding for unknown command %r", name)
            continue
        if not isinstance(raw_keys, list):
            logger.warning("dropping malformed key binding for %s", command.value)
            continue
        keys = tuple(key for key in raw_keys if isinstance(key, str) and key)
        if len(keys) != len(raw_keys):
            logger.warning("dropping invalid keys in binding for %s", command.value)
        bindings[command] = keys
    return bindings


def load_view_settings() -> ViewSettings:
    """Load every tree-view setting at once, filling gaps with defaults."""
    return ViewSettings(
        open_character=load_open_character(),
        closed_character=load_closed_character(),
        scroll_off=load_scroll_off(),
        theme=load_theme_name(),
        show_help=load_show_help(),
        key_bindings=load_key_bindings(),
    )
