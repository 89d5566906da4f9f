"""Key-spec language: parse human-readable key names into chords.

A spec is zero or more modifiers joined to one key with ``+``, for example
``t``, ``ctrl+c``, ``shift+alt+tab`` or ``esc``. Named keys and modifiers are
case-insensitive; a literal character key keeps its case unless a ctrl/alt
modifier is present, since terminals cannot tell ``ctrl+C`` from ``ctrl+c``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..errors import KeySpecError


class NamedKey(Enum):
    ESC = "esc"
    ENTER = "enter"
    TAB = "tab"
    BACKTAB = "backtab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_NAMED_KEY_TOKENS: dict[str, NamedKey | str] = {
    "esc": NamedKey.ESC,
    "escape": NamedKey.ESC,
    "enter": NamedKey.ENTER,
    "return": NamedKey.ENTER,
    "tab": NamedKey.TAB,
    "backtab": NamedKey.BACKTAB,
    "space": " ",
    "up": NamedKey.UP,
    "down": NamedKey.DOWN,
    "left": NamedKey.LEFT,
    "right": NamedKey.RIGHT,
}

_MODIFIER_TOKENS = {
    "ctrl": "ctrl",
    "control": "ctrl",
    "alt": "alt",
    "shift": "shift",
}


@dataclass(frozen=True)
class KeyChord:
    """One key code plus an exact modifier set."""

    code: NamedKey | str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    def __str__(self) -> str:
        return key_spec_display(self)


ESC = KeyChord(NamedKey.ESC)
CTRL_C = KeyChord("c", ctrl=True)
RESERVED_QUIT_CHORDS: tuple[KeyChord, ...] = (ESC, CTRL_C)


def parse_key_spec(value: str) -> KeyChord:
    """Parse one key-spec string into a ``KeyChord``.

    Raises ``KeySpecError`` for empty input, unknown modifiers, and
    multi-character key tokens that are not named keys.
    """
    trimmed = value.strip()
    if not trimmed:
        raise KeySpecError("empty key spec")

    # A bare "+" is the plus key, not an empty modifier list.
    parts = [trimmed] if trimmed == "+" else [part.strip() for part in trimmed.split("+")]
    modifiers: set[str] = set()
    for token in parts[:-1]:
        modifier = _MODIFIER_TOKENS.get(token.lower())
        if modifier is None:
            raise KeySpecError(f"unsupported modifier '{token}' in key spec '{trimmed}'")
        modifiers.add(modifier)

    key_token = parts[-1]
    if not key_token:
        raise KeySpecError(f"missing key after modifiers in key spec '{trimmed}'")

    code = _NAMED_KEY_TOKENS.get(key_token.lower())
    if code is None:
        if len(key_token) != 1:
            raise KeySpecError(f"unsupported multi-character key spec '{key_token}'")
        code = key_token

    ctrl = "ctrl" in modifiers
    alt = "alt" in modifiers
    if isinstance(code, str) and (ctrl or alt):
        code = code.lower()
    return KeyChord(code, ctrl=ctrl, alt=alt, shift="shift" in modifiers)


# Control bytes the terminal already spends on named keys.
_CTRL_ALIASES = {"i": "tab", "j": "enter", "m": "enter"}
_SHIFT_REPORTING_KEYS = frozenset({NamedKey.UP, NamedKey.DOWN, NamedKey.LEFT, NamedKey.RIGHT})


def unreachable_reason(chord: KeyChord) -> str | None:
    """Explain why a terminal can never deliver ``chord``, or return ``None``."""
    if isinstance(chord.code, str) and chord.ctrl and chord.code in _CTRL_ALIASES:
        return f"terminals send ctrl+{chord.code} as {_CTRL_ALIASES[chord.code]}"
    if chord.shift and chord.code not in _SHIFT_REPORTING_KEYS:
        return "terminals only report shift on arrow keys"
    return None


def parse_key_specs(value: str | Iterable[str]) -> tuple[KeyChord, ...]:
    """Parse one action's key set, given as a single spec or a list of specs."""
    if isinstance(value, str):
        return (parse_key_spec(value),)
    return tuple(parse_key_spec(item) for item in value)


def key_spec_display(chord: KeyChord) -> str:
    """Return the canonical spec string: ``ctrl+`` then ``alt+`` then ``shift+`` then the key."""
    out = []
    if chord.ctrl:
        out.append("ctrl+")
    if chord.alt:
        out.append("alt+")
    if chord.shift:
        out.append("shift+")
    if isinstance(chord.code, NamedKey):
        out.append(chord.code.value)
    elif chord.code == " ":
        out.append("space")
    else:
        out.append(chord.code)
    return "".join(out)


def unique_labels(chords: Iterable[KeyChord]) -> list[str]:
    """Return display labels in order with duplicates removed."""
    labels: list[str] = []
    seen: set[str] = set()
    for chord in chords:
        label = key_spec_display(chord)
        if label in seen:
            continue
        seen.add(label)
        labels.append(label)
    return labels


def key_list_display(chords: Iterable[KeyChord]) -> str:
    """Join de-duplicated labels with ``/`` for help and status text."""
    return "/".join(unique_labels(chords))


__all__ = [
    "NamedKey",
    "KeyChord",
    "ESC",
    "CTRL_C",
    "RESERVED_QUIT_CHORDS",
    "parse_key_spec",
    "parse_key_specs",
    "key_spec_display",
    "key_list_display",
    "unique_labels",
    "unreachable_reason",
]
