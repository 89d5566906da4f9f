"""Demo bootstrap: terminal checks, session setup, and the event loop.

``run_demo`` is the only entry point that touches terminal modes. The static
preview path lives in ``render_preview`` and never leaves cooked mode.
"""

from __future__ import annotations

import logging
import os
import sys

from ..errors import TerminalUnavailableError
from ..render.screen import render_static_preview
from ..state import AppState
from .config import RuntimeConfig
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

NO_TTY_MESSAGE = (
    "interactive demo needs a terminal on stdin and stdout; "
    "try `tui-starter demo --no-tty`, `tui-starter themes` or `tui-starter keys`"
)


def ensure_interactive_terminal(stdin_fd: int, stdout_fd: int) -> None:
    if not (os.isatty(stdin_fd) and os.isatty(stdout_fd)):
        raise TerminalUnavailableError(NO_TTY_MESSAGE)


def render_preview(
    runtime: RuntimeConfig,
    width: int | None = None,
    height: int | None = None,
    *,
    ascii: bool = False,
) -> str:
    """Build the one-frame text preview used by ``demo --no-tty``."""
    state = AppState.from_settings(runtime.settings)
    return render_static_preview(state, runtime.bindings, width, height, ascii=ascii)


def run_demo(
    runtime: RuntimeConfig,
    *,
    mouse: bool = False,
    ascii: bool = False,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
) -> None:
    """Run the interactive demo until the user quits."""
    try:
        stdin_fd = sys.stdin.fileno()
        stdout_fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError) as exc:
        raise TerminalUnavailableError(NO_TTY_MESSAGE) from exc
    ensure_interactive_terminal(stdin_fd, stdout_fd)

    state = AppState.from_settings(runtime.settings, mouse_enabled=mouse)
    terminal = TerminalController(stdin_fd, stdout_fd, mouse_enabled=mouse)
    logger.debug("starting demo (config=%s, mouse=%s)", runtime.config_path, mouse)
    with terminal.session():
        run_main_loop(state, runtime.bindings, terminal, stdin_fd, timing=timing, ascii=ascii)


__all__ = ["NO_TTY_MESSAGE", "ensure_interactive_terminal", "render_preview", "run_demo"]
