"""Input dispatcher: applies key and mouse events to ``AppState``.

Every transition is a synchronous mutation of the state passed in. The
selection can never leave ``[0, total - 1]`` because all list moves go
through ``ListSelection``.
"""

from __future__ import annotations

from collections.abc import Callable

from ..layout import RegionSet, partition_screen
from ..state import PANEL_ORDER, AppState, Panel
from ..ui_theme import THEME_ORDER
from .bindings import Action, BindingTable
from .key_registry import ActionBinding, ActionRegistry
from .keyspec import RESERVED_QUIT_CHORDS, KeyChord
from .mouse import ListRowHit, TabHit, hit_test
from .reader import InputEvent, MouseEvent, MouseKind


class InputDispatcher:
    """Map events to actions through the binding table and the hit-test."""

    def __init__(
        self,
        state: AppState,
        bindings: BindingTable,
        *,
        screen_size: Callable[[], tuple[int, int]] = lambda: (80, 24),
    ) -> None:
        self.state = state
        self.bindings = bindings
        self._screen_size = screen_size
        self._registry = ActionRegistry(bindings).register_bindings(
            ActionBinding((Action.QUIT,), self.quit),
            ActionBinding((Action.CYCLE_THEME,), self.cycle_theme),
            ActionBinding((Action.NEXT_PANEL,), lambda: self.step_panel(1)),
            ActionBinding((Action.PREV_PANEL,), lambda: self.step_panel(-1)),
            ActionBinding((Action.LIST_UP,), lambda: self.move_selection(-1)),
            ActionBinding((Action.LIST_DOWN,), lambda: self.move_selection(1)),
            ActionBinding((Action.TOGGLE_HIGH_CONTRAST,), self.toggle_high_contrast),
            ActionBinding((Action.TOGGLE_COLOR,), self.toggle_color),
            ActionBinding((Action.TOGGLE_REDUCED_MOTION,), self.toggle_reduced_motion),
            ActionBinding((Action.TOGGLE_HELP,), self.toggle_help),
        )

    def quit(self) -> bool:
        self.state.should_quit = True
        return True

    def cycle_theme(self) -> bool:
        self.state.theme_index = (self.state.theme_index + 1) % len(THEME_ORDER)
        self.state.dirty = True
        return True

    def step_panel(self, delta: int) -> bool:
        idx = PANEL_ORDER.index(self.state.panel)
        return self.set_panel(PANEL_ORDER[(idx + delta) % len(PANEL_ORDER)])

    def set_panel(self, panel: Panel) -> bool:
        if self.state.panel is panel:
            return False
        self.state.panel = panel
        self.state.dirty = True
        return True

    def move_selection(self, delta: int) -> bool:
        """Move the list selection; ignored unless the list panel is active."""
        if self.state.panel is not Panel.LIST:
            return False
        moved = self.state.selection.move(delta)
        if moved:
            self.state.dirty = True
        return moved

    def select_row(self, index: int) -> bool:
        if self.state.panel is not Panel.LIST:
            return False
        changed = self.state.selection.select(index)
        if changed:
            self.state.dirty = True
        return changed

    def toggle_high_contrast(self) -> bool:
        self.state.high_contrast = not self.state.high_contrast
        self.state.dirty = True
        return True

    def toggle_color(self) -> bool:
        self.state.no_color = not self.state.no_color
        self.state.dirty = True
        return True

    def toggle_reduced_motion(self) -> bool:
        self.state.reduced_motion = not self.state.reduced_motion
        self.state.dirty = True
        return True

    def toggle_help(self) -> bool:
        self.state.show_help = not self.state.show_help
        self.state.dirty = True
        return True

    def handle_key(self, chord: KeyChord) -> Action | None:
        """Apply one key chord and return the action it triggered, if any."""
        if chord in RESERVED_QUIT_CHORDS:
            self.quit()
            return Action.QUIT
        action = self._registry.resolve(chord)
        if action is not None:
            self._registry.dispatch(chord)
        return action

    def handle_mouse(self, event: MouseEvent, regions: RegionSet | None = None) -> bool:
        """Apply one mouse event; returns whether state changed.

        ``regions`` defaults to a fresh partition of the current screen size.
        """
        if not self.state.mouse_enabled:
            return False
        if event.kind is MouseKind.WHEEL_UP:
            return self.move_selection(-1)
        if event.kind is MouseKind.WHEEL_DOWN:
            return self.move_selection(1)
        if event.kind is not MouseKind.LEFT_DOWN:
            return False
        # Panels are hidden under the help modal.
        if self.state.show_help:
            return False

        if regions is None:
            regions = partition_screen(*self._screen_size())
        target = hit_test(event.x, event.y, regions, self.state.selection)
        if isinstance(target, TabHit):
            return self.set_panel(target.panel)
        if isinstance(target, ListRowHit):
            return self.select_row(target.index)
        return False

    def handle_event(self, event: InputEvent) -> None:
        if isinstance(event, MouseEvent):
            self.handle_mouse(event)
        else:
            self.handle_key(event)


__all__ = ["InputDispatcher"]
