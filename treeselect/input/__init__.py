"""Input-layer public API for key decoding and key dispatch.

Exports are split between low-level terminal decoding (`read_key`) and the
pure reducer that turns key names into prompt state transitions.
"""

from .actions import Action
from .dispatch import dispatch_key, move_active, reduce_action
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import DEFAULT_KEYMAP, normalize_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "Action",
    "DEFAULT_KEYMAP",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "_PENDING_BYTES",
    "KeyComboBinding",
    "KeyComboRegistry",
    "dispatch_key",
    "move_active",
    "normalize_key",
    "read_key",
    "reduce_action",
]
