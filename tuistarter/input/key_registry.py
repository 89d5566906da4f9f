"""Action-handler registry primitives used by the input dispatcher."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .bindings import ACTION_PRIORITY, Action, BindingTable
from .keyspec import KeyChord


@dataclass(frozen=True)
class ActionBinding:
    """Mapping from one or more actions to a single handler callback."""

    actions: tuple[Action, ...]
    handler: Callable[[], bool | None]


class ActionRegistry:
    """Small dispatch table resolving chords to actions through a ``BindingTable``."""

    def __init__(self, bindings: BindingTable) -> None:
        """Initialize an empty registry bound to a validated table."""
        self._bindings = bindings
        self._handlers: dict[Action, Callable[[], bool | None]] = {}

    def register_binding(self, binding: ActionBinding) -> ActionRegistry:
        """Register one binding, overwriting existing handlers for the same actions."""
        for action in binding.actions:
            self._handlers[action] = binding.handler
        return self

    def register_bindings(self, *bindings: ActionBinding) -> ActionRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def resolve(self, chord: KeyChord) -> Action | None:
        """Return the first registered action, in priority order, matching ``chord``."""
        for action in ACTION_PRIORITY:
            if action in self._handlers and self._bindings.matches(action, chord):
                return action
        return None

    def dispatch(self, chord: KeyChord) -> bool | None:
        """Invoke the handler for ``chord`` and return its handled result."""
        action = self.resolve(chord)
        if action is None:
            return None
        return self._handlers[action]()
