"""Input-layer public API: terminal key decoding and key-to-event mapping."""

from .keymap import key_to_event, text_entry_active
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "key_to_event",
    "read_key",
    "text_entry_active",
]
