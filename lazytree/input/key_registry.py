"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

_SPECIAL_LABELS = {
    " ": "Space",
    "ENTER": "Enter",
    "ESC": "Esc",
    "TAB": "Tab",
    "BACKSPACE": "Backspace",
    "DELETE": "Delete",
    "UP": "Up",
    "DOWN": "Down",
    "LEFT": "Left",
    "RIGHT": "Right",
    "HOME": "Home",
    "END": "End",
    "PAGE_UP": "PageUp",
    "PAGE_DOWN": "PageDown",
}


def key_label(token: str) -> str:
    """Return a human label for a key token (``CTRL_N`` -> ``Ctrl+N``)."""
    if token in _SPECIAL_LABELS:
        return _SPECIAL_LABELS[token]
    if token.startswith("CTRL_") and len(token) > 5:
        return "Ctrl+" + token[5:]
    return token


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single named command."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]
    name: str = ""
    description: str = ""

    def labels(self) -> list[str]:
        return [key_label(combo) for combo in self.combos]


class KeyComboRegistry:
    """Ordered key-dispatch table with an optional catch-all handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}
        self._bindings: list[KeyComboBinding] = []
        self._fallback: Callable[[str], bool | None] | None = None

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        self._bindings.append(binding)
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def set_fallback(self, handler: Callable[[str], bool | None] | None) -> KeyComboRegistry:
        """Route unbound keys to ``handler(key)``."""
        self._fallback = handler
        return self

    def bindings(self) -> list[KeyComboBinding]:
        """Return named bindings in registration order."""
        return [binding for binding in self._bindings if binding.name]

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key`` and return its handled result."""
        handler = self._handlers.get(key)
        if handler is not None:
            return handler()
        if self._fallback is not None:
            return self._fallback(key)
        return None
