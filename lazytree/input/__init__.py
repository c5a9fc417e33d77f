"""Input-layer public API: terminal key decoding and key-combo dispatch."""

from .key_registry import KeyComboBinding, KeyComboRegistry, key_label
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "key_label",
]
