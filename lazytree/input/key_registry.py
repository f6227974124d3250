"""Key-token to handler dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

KEY_ALIASES: dict[str, str] = {
    " ": "SPACE",
    "\r": "ENTER_CR",
    "\n": "ENTER_LF",
    "ENTER": "ENTER_CR",
    "RETURN": "ENTER_CR",
}


def normalize_key_token(key: str) -> str:
    """Map alternate spellings of the same key onto one token."""
    if key in KEY_ALIASES:
        return KEY_ALIASES[key]
    upper = key.upper()
    if len(key) > 1 and upper in KEY_ALIASES:
        return KEY_ALIASES[upper]
    return key


@dataclass(frozen=True)
class KeyComboBinding(Generic[T]):
    """Mapping from one or more key tokens to a single handler."""

    combos: tuple[str, ...]
    handler: Callable[[], T]


class KeyComboRegistry(Generic[T]):
    """Key dispatch table; later registrations win for a shared token."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], T]] = {}

    def register_binding(self, binding: KeyComboBinding[T]) -> KeyComboRegistry[T]:
        for combo in binding.combos:
            self._handlers[normalize_key_token(combo)] = binding.handler
        return self

    def dispatch(self, key: str) -> T | None:
        """Invoke the handler bound to ``key``; ``None`` when nothing is bound."""
        handler = self._handlers.get(normalize_key_token(key))
        if handler is None:
            return None
        return handler()
