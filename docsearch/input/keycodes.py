"""Browser-style numeric key codes for decoded key tokens."""

from __future__ import annotations

from ..widget import ESCAPE_KEY_CODE

BACKSPACE_KEY_CODE = 8
ENTER_KEY_CODE = 13

_TOKEN_KEY_CODES = {
    "ESC": ESCAPE_KEY_CODE,
    "ENTER": ENTER_KEY_CODE,
    "BACKSPACE": BACKSPACE_KEY_CODE,
    "TAB": 9,
    "UP": 38,
    "DOWN": 40,
    "LEFT": 37,
    "RIGHT": 39,
}


def key_code_for_token(token: str) -> int:
    """Return the key code for ``token``, or ``0`` when it has none.

    Printable characters use the code point of their upper-case form, which
    matches ``keyCode`` for letters and digits.
    """
    code = _TOKEN_KEY_CODES.get(token)
    if code is not None:
        return code
    if len(token) == 1 and token.isprintable():
        upper = token.upper()
        return ord(upper) if len(upper) == 1 else ord(token)
    return 0
