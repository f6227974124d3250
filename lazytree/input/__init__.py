"""Input-layer public API: key decoding, commands, and rebindable key maps."""

from .commands import Command
from .key_map import DEFAULT_BINDINGS, KeyBinding, KeyMap, default_key_map
from .key_registry import KeyComboBinding, KeyComboRegistry, normalize_key_token
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Command",
    "KeyBinding",
    "KeyMap",
    "DEFAULT_BINDINGS",
    "default_key_map",
    "KeyComboBinding",
    "KeyComboRegistry",
    "normalize_key_token",
]
