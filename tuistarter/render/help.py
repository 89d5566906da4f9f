"""Help overlay content and modal placement.

The overlay lists every action with its current key labels, so user
overrides from the config file show up here without extra wiring.
"""

from __future__ import annotations

from ..input.bindings import Action, BindingTable
from ..layout import Rect
from ..ui_theme import UITheme
from .ansi import Canvas

HELP_MIN_WIDTH = 20
HELP_MAX_WIDTH = 84
HELP_MIN_HEIGHT = 10
HELP_MAX_HEIGHT = 16

# Paired actions share one row so the modal fits its maximum height.
_HELP_ROWS: tuple[tuple[tuple[Action, ...], str], ...] = (
    ((Action.CYCLE_THEME,), "cycle theme"),
    ((Action.NEXT_PANEL, Action.PREV_PANEL), "next/previous panel"),
    ((Action.LIST_UP, Action.LIST_DOWN), "list up/down"),
    ((Action.TOGGLE_HIGH_CONTRAST,), "toggle high contrast"),
    ((Action.TOGGLE_COLOR,), "toggle color"),
    ((Action.TOGGLE_REDUCED_MOTION,), "toggle reduced motion"),
    ((Action.TOGGLE_HELP,), "toggle help"),
    ((Action.QUIT,), "quit"),
)

ACCESSIBILITY_NOTES: tuple[str, ...] = (
    "- No-color mode for screen readers",
    "- High-contrast palette",
    "- Reduced motion toggle",
)


def help_lines(bindings: BindingTable, theme: UITheme) -> list[tuple[str, str]]:
    """Return ``(text, style)`` rows for the help modal body."""
    heading = theme.accent + theme.bold
    rows: list[tuple[str, str]] = [("Keys", heading)]
    for actions, description in _HELP_ROWS:
        keys = ", ".join(bindings.label(action) for action in actions)
        rows.append((f"{keys}: {description}", theme.fg))
    rows.append(("", theme.fg))
    rows.append(("Accessibility", heading))
    rows.extend((note, theme.fg) for note in ACCESSIBILITY_NOTES)
    return rows


def centered_popup_rect(width: int, height: int) -> Rect:
    """Center a modal of bounded size inside a ``width`` x ``height`` screen."""
    if width <= 2 or height <= 2:
        return Rect(0, 0, width, height)
    popup_w = min(width, max(HELP_MIN_WIDTH, min(HELP_MAX_WIDTH, width - 4)))
    popup_h = min(height, max(HELP_MIN_HEIGHT, min(HELP_MAX_HEIGHT, height - 2)))
    return Rect((width - popup_w) // 2, (height - popup_h) // 2, popup_w, popup_h)


def draw_help(canvas: Canvas, bindings: BindingTable, theme: UITheme, *, ascii: bool = False) -> Rect:
    """Clear the popup area and draw the help modal over the current frame."""
    rect = centered_popup_rect(canvas.width, canvas.height)
    canvas.fill(rect, " ", theme.fg)
    canvas.box(rect, " Help ", style=theme.accent, title_style=theme.accent + theme.bold, ascii=ascii)
    inner = rect.inset(1)
    for row, (text, style) in enumerate(help_lines(bindings, theme)[: inner.height]):
        canvas.text(inner.x, inner.y + row, text, style, max_width=inner.width)
    return rect


__all__ = ["centered_popup_rect", "draw_help", "help_lines"]
