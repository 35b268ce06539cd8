"""Input-layer public API for key decoding.

``read_key`` turns raw terminal bytes into key tokens; ``key_code_for_token``
maps those tokens to the numeric key codes the search widget takes.
"""

from .keycodes import BACKSPACE_KEY_CODE, ENTER_KEY_CODE, ESCAPE_KEY_CODE, key_code_for_token
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "BACKSPACE_KEY_CODE",
    "ENTER_KEY_CODE",
    "ESCAPE_KEY_CODE",
    "key_code_for_token",
]
