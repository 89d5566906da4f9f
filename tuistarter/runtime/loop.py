"""Main interactive event loop for the demo screen.

One iteration renders when dirty, waits for at most one input event bounded
by the tick interval, dispatches it, and advances the spinner once the
interval has elapsed.
"""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input.bindings import BindingTable
from ..input.dispatch import InputDispatcher
from ..input.reader import InputEvent, read_event
from ..render.screen import frame_to_terminal, render_frame
from ..state import AppState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Tick intervals in seconds."""

    tick_seconds: float = 0.2
    reduced_motion_tick_seconds: float = 0.5

    def interval(self, state: AppState) -> float:
        return self.reduced_motion_tick_seconds if state.reduced_motion else self.tick_seconds


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size((80, 24))
    return size.columns, size.lines


def run_main_loop(
    state: AppState,
    bindings: BindingTable,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
    ascii: bool = False,
    terminal_size: Callable[[], tuple[int, int]] = _terminal_size,
    read: Callable[[int, int], InputEvent | None] = read_event,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Run until a quit action sets ``state.should_quit``.

    The caller owns terminal mode setup; this function only reads and writes.
    """
    dispatcher = InputDispatcher(state, bindings, screen_size=terminal_size)
    last_size: tuple[int, int] | None = None
    last_tick = clock()
    logger.debug("main loop started (theme=%s)", state.theme_name.value)

    while not state.should_quit:
        size = terminal_size()
        if size != last_size:
            last_size = size
            state.dirty = True
        if state.dirty:
            terminal.write(frame_to_terminal(render_frame(state, bindings, size[0], size[1], ascii=ascii)))
            state.dirty = False

        interval = timing.interval(state)
        remaining = max(0.0, interval - (clock() - last_tick))
        event = read(stdin_fd, int(remaining * 1000))
        if event is not None:
            dispatcher.handle_event(event)
            if state.should_quit:
                break

        now = clock()
        if now - last_tick >= timing.interval(state):
            state.tick()
            last_tick = now

    logger.debug("main loop stopped")


__all__ = ["RuntimeLoopTiming", "run_main_loop"]
