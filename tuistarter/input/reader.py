"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``KeyChord`` values or
``MouseEvent`` records. Handles ESC-sequence timing, CSI modifier parameters,
and SGR mouse reports.
"""

from __future__ import annotations

import os
import select
from dataclasses import dataclass
from enum import Enum

from .keyspec import KeyChord, NamedKey

ESC_SEQUENCE_TIMEOUT_MS = 25
_MAX_SEQUENCE_BYTES = 32
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS: dict[str, NamedKey] = {
    "A": NamedKey.UP,
    "B": NamedKey.DOWN,
    "C": NamedKey.RIGHT,
    "D": NamedKey.LEFT,
}


class MouseKind(Enum):
    LEFT_DOWN = "left_down"
    LEFT_UP = "left_up"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"


@dataclass(frozen=True)
class MouseEvent:
    """Pointer event in 0-based cell coordinates."""

    kind: MouseKind
    x: int
    y: int


InputEvent = KeyChord | MouseEvent


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


def _read_char(fd: int, lead: bytes) -> str | None:
    """Complete a UTF-8 character that starts with ``lead``."""
    data = lead
    for _ in range(_utf8_length(lead[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    text = data.decode("utf-8", errors="replace")
    return text[:1] if text else None


def _control_chord(code: int) -> KeyChord | None:
    if code == 0x09:
        return KeyChord(NamedKey.TAB)
    if code in {0x0A, 0x0D}:
        return KeyChord(NamedKey.ENTER)
    if 0x01 <= code <= 0x1A:
        return KeyChord(chr(0x60 + code), ctrl=True)
    return None


def _modifier_flags(param: str) -> tuple[bool, bool, bool]:
    """Decode an xterm modifier parameter into ``(ctrl, alt, shift)``."""
    try:
        bits = max(0, int(param) - 1)
    except ValueError:
        return False, False, False
    return bool(bits & 4), bool(bits & 2), bool(bits & 1)


def _decode_sgr_mouse(params: str, final: str) -> MouseEvent | None:
    try:
        btn_s, col_s, row_s = params.split(";")
        btn = int(btn_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return None
    x = max(0, col - 1)
    y = max(0, row - 1)
    button = btn & 0b11
    if btn & 0b0100_0000:
        if button == 0:
            return MouseEvent(MouseKind.WHEEL_UP, x, y)
        if button == 1:
            return MouseEvent(MouseKind.WHEEL_DOWN, x, y)
        return None
    if btn & 0b0010_0000:
        # Drag/motion reports are not used.
        return None
    if button == 0:
        kind = MouseKind.LEFT_DOWN if final == "M" else MouseKind.LEFT_UP
        return MouseEvent(kind, x, y)
    return None


def _read_csi(fd: int) -> InputEvent | None:
    """Read the rest of a ``ESC [`` sequence and decode it."""
    payload: list[str] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return KeyChord(NamedKey.ESC)
        ch = part.decode("latin-1")
        if "@" <= ch <= "~":
            final = ch
            break
        payload.append(ch)
        if len(payload) > _MAX_SEQUENCE_BYTES:
            return None

    params = "".join(payload)
    if params.startswith("<"):
        return _decode_sgr_mouse(params[1:], final)
    if final == "Z":
        return KeyChord(NamedKey.BACKTAB)
    named = _CSI_FINAL_KEYS.get(final)
    if named is None:
        return None
    if ";" in params:
        ctrl, alt, shift = _modifier_flags(params.rsplit(";", 1)[1])
        return KeyChord(named, ctrl=ctrl, alt=alt, shift=shift)
    return KeyChord(named)


def read_event(fd: int, timeout_ms: int | None = None) -> InputEvent | None:
    """Read one input event, or ``None`` on timeout/undecodable input."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return None
        ch = os.read(fd, 1)
        if not ch:
            return None

    code = ch[0]
    if code != 0x1B:
        if code < 0x20:
            return _control_chord(code)
        if code == 0x7F:
            return None
        char = _read_char(fd, ch)
        return KeyChord(char) if char else None

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KeyChord(NamedKey.ESC)
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        named = _CSI_FINAL_KEYS.get(final.decode("latin-1")) if final is not None else None
        return KeyChord(named) if named is not None else KeyChord(NamedKey.ESC)
    if 0x20 < seq[0] < 0x7F or seq[0] >= 0xC0:
        char = _read_char(fd, seq)
        if char:
            return KeyChord(char.lower(), alt=True)
    # Not an Alt combo: deliver ESC now and the byte on the next read.
    _PENDING_BYTES.append(seq)
    return KeyChord(NamedKey.ESC)


__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "InputEvent",
    "MouseEvent",
    "MouseKind",
    "read_event",
]
