"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing and multi-byte UTF-8 characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS = {
    b"\x03": "CTRL_C",
    b"\x0a": "ENTER",
    b"\x0d": "ENTER",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\x09": "TAB",
    b"\x15": "CTRL_U",
    b"\x0b": "CTRL_K",
    b"\x0e": "CTRL_N",
    b"\x10": "CTRL_P",
}
_CSI_TOKENS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}
_CSI_TILDE_TOKENS = {
    b"1": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}
CSI_MAX_SEQUENCE_BYTES = 32
UNKNOWN_KEY = "UNKNOWN"


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_csi(fd: int, first: bytes) -> str:
    """Consume one CSI sequence after ``ESC [`` and map it to a key token.

    Parameter (0x30-0x3F) and intermediate (0x20-0x2F) bytes are read up to
    the final byte (0x40-0x7E). Unrecognized or truncated sequences return
    ``UNKNOWN_KEY`` so they are never mistaken for a lone Escape.
    """
    params = b""
    seq = first
    while 0x20 <= seq[0] <= 0x3F:
        params += seq
        if len(params) > CSI_MAX_SEQUENCE_BYTES:
            return UNKNOWN_KEY
        more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if more is None:
            return UNKNOWN_KEY
        seq = more
    if not 0x40 <= seq[0] <= 0x7E:
        return UNKNOWN_KEY
    if seq == b"~":
        return _CSI_TILDE_TOKENS.get(params.split(b";")[0], UNKNOWN_KEY)
    # Modified arrows (ESC [ 1 ; 5 A) keep their base direction.
    return _CSI_TOKENS.get(seq, UNKNOWN_KEY)


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``; returns ``""`` on timeout or EOF."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    token = _CONTROL_TOKENS.get(ch)
    if token is not None:
        return token

    if ch != b"\x1b":
        data = ch
        for _ in range(_utf8_length(ch[0]) - 1):
            more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if more is None:
                break
            data += more
        return data.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    return _read_csi(fd, seq)
