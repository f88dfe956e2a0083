"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens
or decoded ``MouseEvent`` values. Handles ESC-sequence timing and SGR
(mode 1006) mouse reports.
"""

from __future__ import annotations

import os
import select

from ..mouse.actions import EventKind, MouseButton, MouseEvent

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_MAX_SGR_PAYLOAD = 64

_SGR_SHIFT = 0b0000_0100
_SGR_ALT = 0b0000_1000
_SGR_CTRL = 0b0001_0000
_SGR_MOTION = 0b0010_0000
_SGR_WHEEL = 0b0100_0000

_PLAIN_BUTTONS = {
    0: MouseButton.LEFT,
    1: MouseButton.MIDDLE,
    2: MouseButton.RIGHT,
    3: MouseButton.NONE,
}
_WHEEL_BUTTONS = {
    0: MouseButton.WHEEL_UP,
    1: MouseButton.WHEEL_DOWN,
    2: MouseButton.WHEEL_LEFT,
    3: MouseButton.WHEEL_RIGHT,
}
_CONTROL_KEYS = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x07": "CTRL_G",
    b"\x0b": "CTRL_K",
    b"\x15": "CTRL_U",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}
_ARROWS = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}


def decode_sgr_mouse(code: int, col: int, row: int, final: str) -> MouseEvent | None:
    """Decode one SGR report ``ESC [ < code ; col ; row final``.

    ``col``/``row`` are 1-based on the wire; the event carries 0-based cells.
    ``final`` is ``"M"`` for press/motion and ``"m"`` for release. Returns
    ``None`` for codes outside the basic and wheel button sets.
    """
    if code < 0 or code >= 128 or final not in {"M", "m"}:
        return None
    low = code & 0b11
    x = max(0, col - 1)
    y = max(0, row - 1)
    modifiers = {
        "shift": bool(code & _SGR_SHIFT),
        "alt": bool(code & _SGR_ALT),
        "ctrl": bool(code & _SGR_CTRL),
    }
    if code & _SGR_WHEEL:
        return MouseEvent(EventKind.PRESS, _WHEEL_BUTTONS[low], x, y, **modifiers)
    button = _PLAIN_BUTTONS[low]
    if final == "m":
        return MouseEvent(EventKind.RELEASE, button, x, y, **modifiers)
    if code & _SGR_MOTION or button is MouseButton.NONE:
        return MouseEvent(EventKind.MOTION, button, x, y, **modifiers)
    return MouseEvent(EventKind.PRESS, button, x, y, **modifiers)


def parse_sgr_payload(payload: bytes, final: bytes) -> MouseEvent | None:
    """Parse the ``code;col;row`` payload bytes of an SGR report."""
    try:
        code_s, col_s, row_s = payload.decode("ascii").split(";")
        code = int(code_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return None
    return decode_sgr_mouse(code, col, row, final.decode("ascii"))


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_sgr_mouse(fd: int) -> MouseEvent | str:
    payload: list[bytes] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if part in {b"M", b"m"}:
            break
        payload.append(part)
        if len(payload) > _MAX_SGR_PAYLOAD:
            return "ESC"
    event = parse_sgr_payload(b"".join(payload), part)
    return event if event is not None else "MOUSE"


def read_key(fd: int, timeout_ms: int | None = None) -> str | MouseEvent:
    """Read one key token or mouse event; ``""`` on timeout or EOF."""
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

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch != b"\x1b":
        return ch.decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _ARROWS:
        return _ARROWS[seq]
    if seq == b"<":
        return _read_sgr_mouse(fd)
    return "ESC"
