"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and mouse capture.
Release always runs in the order: show cursor, disable mouse capture, leave
the alternate screen, restore tty attributes.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

logger = logging.getLogger(__name__)

ENTER_ALT_SCREEN = b"\x1b[?1049h"
LEAVE_ALT_SCREEN = b"\x1b[?1049l"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
ENABLE_MOUSE = b"\x1b[?1000h\x1b[?1006h"
DISABLE_MOUSE = b"\x1b[?1000l\x1b[?1006l"


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int, *, mouse_enabled: bool = False) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.mouse_enabled = mouse_enabled
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._raw_active = False
        self._alt_screen_active = False
        self._mouse_active = False

    def enable_tui_mode(self) -> None:
        """Enter raw mode, the alternate screen, and optional mouse capture.

        A failure part-way through undoes the steps already taken before the
        error propagates.
        """
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
            self._raw_active = True
            os.write(self.stdout_fd, ENTER_ALT_SCREEN + HIDE_CURSOR)
            self._alt_screen_active = True
            if self.mouse_enabled:
                os.write(self.stdout_fd, ENABLE_MOUSE)
                self._mouse_active = True
        except Exception:
            self.disable_tui_mode()
            raise
        logger.debug("entered tui mode (mouse=%s)", self.mouse_enabled)

    def disable_tui_mode(self) -> None:
        """Restore the terminal; safe to call after a partial enable.

        Each step is attempted even when an earlier one fails, so a hung-up
        terminal still gets its tty attributes back.
        """
        if self._alt_screen_active:
            self._release_step("show cursor", os.write, self.stdout_fd, SHOW_CURSOR)
        if self._mouse_active:
            self._mouse_active = False
            self._release_step("disable mouse", os.write, self.stdout_fd, DISABLE_MOUSE)
        if self._alt_screen_active:
            self._alt_screen_active = False
            self._release_step("leave alternate screen", os.write, self.stdout_fd, LEAVE_ALT_SCREEN)
        if self._raw_active:
            self._raw_active = False
            self._release_step(
                "restore tty", termios.tcsetattr, self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state
            )
        logger.debug("left tui mode")

    @staticmethod
    def _release_step(name: str, func, *args) -> None:
        try:
            func(*args)
        except (OSError, termios.error) as exc:
            logger.warning("terminal release step failed: %s: %s", name, exc)

    def write(self, text: str) -> None:
        data = text.encode("utf-8")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    @contextlib.contextmanager
    def session(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        self.enable_tui_mode()
        try:
            yield self
        finally:
            self.disable_tui_mode()
