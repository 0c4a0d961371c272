"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing for arrow and Home/End keys, and swallows
sequences for keys that have no binding.
"""

from __future__ import annotations

import codecs
import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_MAX_SEQUENCE_BYTES = 16
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x15": "CTRL_U",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"7": "HOME",
    b"4": "END",
    b"8": "END",
    b"3": "DELETE",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> str:
    """Complete a multi-byte UTF-8 character that started with ``first``."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    text = decoder.decode(first)
    while not text:
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            return decoder.decode(b"", final=True)
        text = decoder.decode(nxt)
    return text


def _read_sequence_body(fd: int, introducer: bytes) -> bytes | None:
    """Consume an escape sequence up to and including its final byte.

    SS3 sequences carry exactly one final byte. CSI sequences carry parameter
    and intermediate bytes (0x20-0x3F) before a final byte in 0x40-0x7E.
    Returns ``None`` when the sequence is cut off.
    """
    body = b""
    while len(body) < _MAX_SEQUENCE_BYTES:
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            return None
        body += nxt
        if introducer == b"O" or 0x40 <= nxt[0] <= 0x7E:
            return body
        if not 0x20 <= nxt[0] <= 0x3F:
            return None
    return None


def _decode_sequence(introducer: bytes, body: bytes) -> str:
    params, final = body[:-1], body[-1:]
    if final == b"~" and introducer == b"[":
        return _CSI_TILDE_KEYS.get(params, UNKNOWN_KEY)
    if params:
        # Modified keys such as Ctrl+Up are not bound.
        return UNKNOWN_KEY
    return _CSI_FINAL_KEYS.get(final, UNKNOWN_KEY)


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for the next key and return its token.

    Printable characters are returned as themselves; special keys use
    upper-case names such as ``"UP"`` or ``"ENTER"``. Escape sequences that
    are not recognized are consumed whole and reported as ``UNKNOWN_KEY``.
    Returns ``""`` on EOF or when ``timeout_ms`` elapses.
    """
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

    token = _CONTROL_KEYS.get(ch)
    if token is not None:
        return token

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)

    introducer = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if introducer is None:
        return "ESC"
    if introducer not in {b"[", b"O"}:
        _PENDING_BYTES.append(introducer)
        return "ESC"
    body = _read_sequence_body(fd, introducer)
    if body is None:
        return UNKNOWN_KEY
    return _decode_sequence(introducer, body)


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "UNKNOWN_KEY", "read_key"]
