"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, control keys, and SGR mouse wheel events.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x06": "CTRL_F",
    b"\x15": "CTRL_U",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

# Final bytes of ``ESC [`` / ``ESC O`` sequences that carry no parameters.
_FINAL_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

# ``ESC [ <n> ~`` editing keys.
_TILDE_KEYS = {
    b"1": "HOME",
    b"2": "INSERT",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}

CSI_MAX_PARAM_BYTES = 32


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


def _read_mouse(fd: int) -> str:
    """Decode the tail of ``ESC [ < btn ; col ; row (M|m)``."""
    payload: list[bytes] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return ""
        if part in {b"M", b"m"}:
            break
        payload.append(part)
        if len(payload) > 64:
            return ""
    fields = b"".join(payload).decode("ascii", errors="replace").split(";")
    if len(fields) != 3 or not all(field.isdigit() for field in fields):
        return ""
    btn, col, row = (int(field) for field in fields)
    if btn & 0b0100_0000:
        button = btn & 0b11
        if button == 0:
            return f"MOUSE_WHEEL_UP:{col}:{row}"
        if button == 1:
            return f"MOUSE_WHEEL_DOWN:{col}:{row}"
    return "MOUSE"


def _read_csi(fd: int) -> str:
    """Consume ``ESC [ params final`` through its final byte (0x40-0x7E)."""
    first = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if first is None:
        return ""
    if first == b"<":
        return _read_mouse(fd)
    params = b""
    part = first
    while not 0x40 <= part[0] <= 0x7E:
        params += part
        if len(params) > CSI_MAX_PARAM_BYTES:
            return ""
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return ""
    if part == b"~":
        return _TILDE_KEYS.get(params.split(b";")[0], "")
    # Modifier-only parameters (``1;5A``) are not bound to anything.
    if params:
        return ""
    return _FINAL_KEYS.get(part, "")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Return the next key token, or ``""`` when nothing arrived in time.

    Escape sequences are always consumed whole. Sequences without a name
    decode to ``""`` so none of their bytes leak out as ordinary keys.
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

    named = _CONTROL_KEYS.get(ch)
    if named is not None:
        return named

    if ch != b"\x1b":
        data = ch
        for _ in range(_utf8_length(ch[0]) - 1):
            more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if more is None:
                break
            data += more
        return data.decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return ""
        return _FINAL_KEYS.get(final, "")
    _PENDING_BYTES.append(seq)
    return "ESC"


__all__ = ["read_key"]
