"""Action enumeration and the validated action-to-chord binding table.

The table is built once at startup (defaults merged with config overrides),
validated as a whole, and then only queried.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from ..errors import DuplicateBindingError, EmptyBindingError, ReservedKeyError
from .keyspec import (
    RESERVED_QUIT_CHORDS,
    KeyChord,
    key_spec_display,
    parse_key_specs,
    unique_labels,
)


class Action(Enum):
    """User-triggerable effects; values double as config-file key names."""

    CYCLE_THEME = "cycle_theme"
    NEXT_PANEL = "next_panel"
    PREV_PANEL = "prev_panel"
    LIST_UP = "list_up"
    LIST_DOWN = "list_down"
    TOGGLE_HIGH_CONTRAST = "toggle_high_contrast"
    TOGGLE_COLOR = "toggle_color"
    TOGGLE_REDUCED_MOTION = "toggle_reduced_motion"
    TOGGLE_HELP = "toggle_help"
    QUIT = "quit"


# Dispatch order. Quit is checked first so it always wins.
ACTION_PRIORITY: tuple[Action, ...] = (
    Action.QUIT,
    Action.CYCLE_THEME,
    Action.NEXT_PANEL,
    Action.PREV_PANEL,
    Action.LIST_UP,
    Action.LIST_DOWN,
    Action.TOGGLE_HIGH_CONTRAST,
    Action.TOGGLE_COLOR,
    Action.TOGGLE_REDUCED_MOTION,
    Action.TOGGLE_HELP,
)

DEFAULT_KEY_SPECS: Mapping[Action, tuple[str, ...]] = MappingProxyType(
    {
        Action.CYCLE_THEME: ("t",),
        Action.NEXT_PANEL: ("tab", "right"),
        Action.PREV_PANEL: ("backtab", "left"),
        Action.LIST_UP: ("up", "k"),
        Action.LIST_DOWN: ("down", "j"),
        Action.TOGGLE_HIGH_CONTRAST: ("h",),
        Action.TOGGLE_COLOR: ("c",),
        Action.TOGGLE_REDUCED_MOTION: ("r",),
        Action.TOGGLE_HELP: ("?",),
        Action.QUIT: ("q",),
    }
)


@dataclass(frozen=True)
class BindingTable:
    """Validated mapping from every ``Action`` to a non-empty chord tuple."""

    chords: Mapping[Action, tuple[KeyChord, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = MappingProxyType({action: tuple(self.chords.get(action, ())) for action in Action})
        object.__setattr__(self, "chords", frozen)

    def keys_for(self, action: Action) -> tuple[KeyChord, ...]:
        return self.chords[action]

    def matches(self, action: Action, chord: KeyChord) -> bool:
        """Return whether ``chord`` triggers ``action`` (exact chord equality)."""
        if action is Action.QUIT and chord in RESERVED_QUIT_CHORDS:
            return True
        return chord in self.chords[action]

    def action_for(self, chord: KeyChord) -> Action | None:
        """Return the first action in priority order triggered by ``chord``."""
        for action in ACTION_PRIORITY:
            if self.matches(action, chord):
                return action
        return None

    def labels(self, action: Action) -> list[str]:
        if action is Action.QUIT:
            return self.quit_labels()
        return unique_labels(self.chords[action])

    def label(self, action: Action) -> str:
        return "/".join(self.labels(action))

    def quit_labels(self) -> list[str]:
        """Listed quit keys plus ``esc``, which always quits."""
        labels = unique_labels(self.chords[Action.QUIT])
        if "esc" not in labels:
            labels.append("esc")
        return labels


def validate_bindings(table: BindingTable) -> BindingTable:
    """Check emptiness, reserved keys, and cross-action duplicates.

    Duplicate detection runs over the fully merged table. A chord repeated
    inside one action's own list is harmless and not reported.
    """
    for action in Action:
        if not table.chords[action]:
            raise EmptyBindingError(action.value)

    owner: dict[KeyChord, Action] = {}
    for action in Action:
        for chord in table.chords[action]:
            if action is not Action.QUIT and chord in RESERVED_QUIT_CHORDS:
                raise ReservedKeyError(action.value, key_spec_display(chord))
            previous = owner.setdefault(chord, action)
            if previous is not action:
                raise DuplicateBindingError(key_spec_display(chord), previous.value, action.value)
    return table


def default_bindings() -> BindingTable:
    """Build a fresh default table from ``DEFAULT_KEY_SPECS``."""
    return BindingTable({action: parse_key_specs(specs) for action, specs in DEFAULT_KEY_SPECS.items()})


def build_bindings(overrides: Mapping[Action, Iterable[KeyChord]] | None = None) -> BindingTable:
    """Merge per-action overrides over the defaults and validate the result."""
    merged = dict(default_bindings().chords)
    for action, chords in (overrides or {}).items():
        merged[action] = tuple(chords)
    return validate_bindings(BindingTable(merged))


__all__ = [
    "Action",
    "ACTION_PRIORITY",
    "DEFAULT_KEY_SPECS",
    "BindingTable",
    "validate_bindings",
    "default_bindings",
    "build_bindings",
]
