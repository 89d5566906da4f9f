"""Frame composition for the demo screen.

Every panel is drawn into the rectangles returned by ``partition_screen``;
the list panel uses ``scroll_window_start`` for its first visible row. The
mouse hit-test reads the same two functions, so a click always lands on
what was drawn there.
"""

from __future__ import annotations

from ..input.bindings import Action, BindingTable
from ..layout import FOOTER_HEIGHT, HEADER_HEIGHT, NARROW_BREAKPOINT, Rect, RegionSet, partition_screen, scroll_window_start
from ..state import SHOWCASE_ITEMS, AppState, Panel
from ..ui_theme import UITheme, resolve_theme
from .ansi import Canvas, display_width
from .help import draw_help
from .highlight import EXAMPLE_COMMANDS, command_segments

PREVIEW_WIDTH_RANGE = (20, 240)
PREVIEW_HEIGHT_RANGE = (11, 120)
DEFAULT_PREVIEW_SIZE = (80, 24)

# Static so previews stay deterministic.
GAUGE_RATIO = 0.62
HEADER_COMPACT_WIDTH = 70
ACCESSIBILITY_FULL_BODY_HEIGHT = 20


def _on_off(value: bool) -> str:
    return "on" if value else "off"


def _center_x(rect: Rect, text: str) -> int:
    return rect.x + max(0, (rect.width - display_width(text)) // 2)


def _draw_segments(canvas: Canvas, x: int, y: int, segments: list[tuple[str, str]], max_width: int) -> int:
    used = 0
    for text, style in segments:
        if used >= max_width:
            break
        used += canvas.text(x + used, y, text, style, max_width=max_width - used)
    return used


def draw_header(canvas: Canvas, rect: Rect, state: AppState, theme: UITheme, *, ascii: bool = False) -> None:
    canvas.box(rect, style=theme.muted, ascii=ascii)
    inner = rect.inset(1)
    if inner.height <= 0:
        return
    title = [
        (" CLI TUI Starter ", theme.accent + theme.bold),
        (" ", theme.fg),
        (state.spinner_frame(), theme.muted),
        (" ", theme.fg),
        ("ready", theme.success),
    ]
    _draw_segments(canvas, inner.x, inner.y, title, inner.width)
    if inner.height < 2:
        return

    parts = [(f"Theme: {state.theme_name.value}", theme.fg)]
    if rect.width >= HEADER_COMPACT_WIDTH:
        parts.append((f"High contrast: {_on_off(state.high_contrast)}", theme.muted))
    parts.append((f"No color: {_on_off(state.no_color)}", theme.muted))
    parts.append((f"Reduced motion: {_on_off(state.reduced_motion)}", theme.muted))
    info: list[tuple[str, str]] = []
    for idx, part in enumerate(parts):
        if idx:
            info.append((" | ", theme.fg))
        info.append(part)
    _draw_segments(canvas, inner.x, inner.y + 1, info, inner.width)


def draw_commands(canvas: Canvas, rect: Rect, theme: UITheme, *, ascii: bool = False) -> None:
    canvas.box(rect, " Commands ", style=theme.muted, title_style=theme.fg, ascii=ascii)
    inner = rect.inset(1)
    for row, command in enumerate(EXAMPLE_COMMANDS[: inner.height]):
        _draw_segments(canvas, inner.x, inner.y + row, command_segments(command, theme), inner.width)


def _draw_tabs(canvas: Canvas, tabs: Rect, active: Panel, theme: UITheme) -> None:
    half = tabs.width // 2
    halves = (
        (Panel.OVERVIEW, Rect(tabs.x, tabs.y, half, 1)),
        (Panel.LIST, Rect(tabs.x + half, tabs.y, tabs.width - half, 1)),
    )
    for panel, cell in halves:
        if panel is active:
            label = f"[{panel.title}]"
            style = theme.accent + theme.bold + theme.reverse
        else:
            label = f" {panel.title} "
            style = theme.muted
        canvas.text(_center_x(cell, label), cell.y, label, style, max_width=cell.width)


def _draw_gauge(canvas: Canvas, rect: Rect, theme: UITheme, *, ascii: bool = False) -> None:
    filled = round(rect.width * GAUGE_RATIO)
    bar = "#" if ascii else "█"
    for col in range(rect.width):
        if col < filled:
            canvas.put(rect.x + col, rect.y, bar, theme.accent)
        else:
            canvas.put(rect.x + col, rect.y, " ", theme.fg)
    label = f"{round(GAUGE_RATIO * 100)}%"
    canvas.text(_center_x(rect, label), rect.y, label, theme.fg + theme.bold, max_width=rect.width)


def _draw_overview(
    canvas: Canvas,
    body: Rect,
    state: AppState,
    bindings: BindingTable,
    theme: UITheme,
    *,
    ascii: bool = False,
) -> None:
    rows: list[tuple[str, str] | None] = [
        (state.theme_name.value, theme.accent + theme.bold),
        (theme.description, theme.muted),
    ]
    if body.height >= 4:
        rows.append((f"Press {bindings.label(Action.CYCLE_THEME)} to cycle themes.", theme.fg))
    # None marks the gauge row.
    rows.append(None)

    key_col = body.x + body.width * 55 // 100
    table = (
        ("Action", "Key", theme.muted + theme.bold),
        ("cycle theme", bindings.label(Action.CYCLE_THEME), theme.fg),
        ("help", bindings.label(Action.TOGGLE_HELP), theme.fg),
        ("quit", bindings.label(Action.QUIT), theme.fg),
    )

    y = body.y
    for row in rows:
        if y >= body.bottom:
            return
        if row is None:
            _draw_gauge(canvas, Rect(body.x, y, body.width, 1), theme, ascii=ascii)
        else:
            canvas.text(body.x, y, row[0], row[1], max_width=body.width)
        y += 1
    for action_text, key_text, style in table:
        if y >= body.bottom:
            return
        canvas.text(body.x, y, action_text, style, max_width=max(0, key_col - body.x - 1))
        canvas.text(key_col, y, key_text, style, max_width=body.right - key_col)
        y += 1


def _draw_list(canvas: Canvas, viewport: Rect, state: AppState, theme: UITheme) -> None:
    selection = state.selection
    start = scroll_window_start(selection.selected, selection.total, viewport.height)
    for offset in range(viewport.height):
        index = start + offset
        if index >= selection.total:
            break
        y = viewport.y + offset
        if index == selection.selected:
            canvas.fill(Rect(viewport.x, y, viewport.width, 1), " ", theme.accent + theme.reverse)
            canvas.text(viewport.x, y, f"> {SHOWCASE_ITEMS[index]}", theme.accent + theme.reverse, max_width=viewport.width)
        else:
            canvas.text(viewport.x, y, f"  {SHOWCASE_ITEMS[index]}", theme.fg, max_width=viewport.width)


def draw_showcase(
    canvas: Canvas,
    regions: RegionSet,
    state: AppState,
    bindings: BindingTable,
    theme: UITheme,
    *,
    ascii: bool = False,
) -> None:
    canvas.box(regions.showcase, " Showcase ", style=theme.muted, title_style=theme.fg, ascii=ascii)
    if regions.showcase_tabs.width <= 0:
        return
    _draw_tabs(canvas, regions.showcase_tabs, state.panel, theme)
    if state.panel is Panel.LIST:
        _draw_list(canvas, regions.showcase_list, state, theme)
    else:
        _draw_overview(canvas, regions.showcase_list, state, bindings, theme, ascii=ascii)


def accessibility_lines(bindings: BindingTable, theme: UITheme, *, compact: bool) -> list[list[tuple[str, str]]]:
    """Rows for the accessibility panel; ``compact`` folds them onto one line."""
    contrast = bindings.label(Action.TOGGLE_HIGH_CONTRAST)
    color = bindings.label(Action.TOGGLE_COLOR)
    motion = bindings.label(Action.TOGGLE_REDUCED_MOTION)
    help_keys = bindings.label(Action.TOGGLE_HELP)
    quit_keys = bindings.label(Action.QUIT)
    if compact:
        text = f"{contrast} contrast | {color} color | {motion} motion | {help_keys} help | {quit_keys} quit"
        return [[("Keys: ", theme.muted + theme.bold), (text, theme.fg)]]
    return [
        [(f"{contrast}: high contrast", theme.accent)],
        [(f"{color}: toggle color", theme.fg)],
        [(f"{motion}: reduced motion", theme.fg)],
        [(f"{help_keys}: help panel", theme.fg)],
        [(f"{quit_keys}: quit", theme.fg)],
    ]


def draw_accessibility(
    canvas: Canvas,
    rect: Rect,
    bindings: BindingTable,
    theme: UITheme,
    *,
    compact: bool,
    ascii: bool = False,
) -> None:
    canvas.box(rect, " Accessibility ", style=theme.muted, title_style=theme.fg, ascii=ascii)
    inner = rect.inset(1)
    lines = accessibility_lines(bindings, theme, compact=compact)
    for row, segments in enumerate(lines[: inner.height]):
        _draw_segments(canvas, inner.x, inner.y + row, segments, inner.width)


def draw_footer(canvas: Canvas, rect: Rect, bindings: BindingTable, theme: UITheme, *, ascii: bool = False) -> None:
    canvas.box(rect, style=theme.muted, ascii=ascii)
    inner = rect.inset(1)
    if inner.height <= 0:
        return
    help_text = f"Press {bindings.label(Action.TOGGLE_HELP)} for help."
    quit_text = f"Use {bindings.label(Action.QUIT)} to exit."
    x = _center_x(inner, f"{help_text} {quit_text}")
    segments = [(help_text, theme.muted), (" ", theme.fg), (quit_text, theme.danger)]
    _draw_segments(canvas, x, inner.y, segments, inner.right - x)


def draw_too_small(canvas: Canvas, theme: UITheme) -> None:
    """Fallback for terminals below the minimum partition size."""
    lines = ("Terminal too small", f"{canvas.width}x{canvas.height}")
    top = max(0, (canvas.height - len(lines)) // 2)
    full = Rect(0, 0, canvas.width, canvas.height)
    for row, text in enumerate(lines):
        canvas.text(_center_x(full, text), top + row, text, theme.danger if row == 0 else theme.muted)


def compose_frame(
    state: AppState,
    bindings: BindingTable,
    width: int,
    height: int,
    *,
    ascii: bool = False,
) -> Canvas:
    """Paint one complete frame onto a fresh canvas."""
    theme = resolve_theme(state.theme_name, no_color=state.no_color, high_contrast=state.high_contrast)
    canvas = Canvas(width, height)
    regions = partition_screen(width, height)
    if regions is None:
        draw_too_small(canvas, theme)
        return canvas

    body_height = height - HEADER_HEIGHT - FOOTER_HEIGHT
    compact = width < NARROW_BREAKPOINT or body_height < ACCESSIBILITY_FULL_BODY_HEIGHT

    draw_header(canvas, regions.header, state, theme, ascii=ascii)
    draw_commands(canvas, regions.commands, theme, ascii=ascii)
    draw_showcase(canvas, regions, state, bindings, theme, ascii=ascii)
    draw_accessibility(canvas, regions.accessibility, bindings, theme, compact=compact, ascii=ascii)
    draw_footer(canvas, regions.footer, bindings, theme, ascii=ascii)
    if state.show_help:
        draw_help(canvas, bindings, theme, ascii=ascii)
    return canvas


def render_frame(
    state: AppState,
    bindings: BindingTable,
    width: int,
    height: int,
    *,
    ascii: bool = False,
) -> list[str]:
    """Return one ANSI string per screen row."""
    return compose_frame(state, bindings, width, height, ascii=ascii).to_lines()


def frame_to_terminal(lines: list[str]) -> str:
    """Wrap rendered rows with cursor-home and clear-to-end sequences."""
    body = "\r\n".join(line + "\033[K" for line in lines)
    return "\033[H" + body + "\033[J"


def clamp_preview_size(width: int | None, height: int | None) -> tuple[int, int]:
    w = DEFAULT_PREVIEW_SIZE[0] if width is None else width
    h = DEFAULT_PREVIEW_SIZE[1] if height is None else height
    w = max(PREVIEW_WIDTH_RANGE[0], min(PREVIEW_WIDTH_RANGE[1], w))
    h = max(PREVIEW_HEIGHT_RANGE[0], min(PREVIEW_HEIGHT_RANGE[1], h))
    return w, h


def render_static_preview(
    state: AppState,
    bindings: BindingTable,
    width: int | None = None,
    height: int | None = None,
    *,
    ascii: bool = False,
) -> str:
    """Render a single frame as text for non-interactive output.

    Trailing blanks are trimmed from each row and trailing empty rows are
    dropped. Escapes appear only when the state allows color.
    """
    w, h = clamp_preview_size(width, height)
    lines = compose_frame(state, bindings, w, h, ascii=ascii).to_lines(trim=True)
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines) + "\n"


__all__ = [
    "PREVIEW_WIDTH_RANGE",
    "PREVIEW_HEIGHT_RANGE",
    "DEFAULT_PREVIEW_SIZE",
    "accessibility_lines",
    "clamp_preview_size",
    "compose_frame",
    "draw_accessibility",
    "draw_commands",
    "draw_footer",
    "draw_header",
    "draw_showcase",
    "draw_too_small",
    "frame_to_terminal",
    "render_frame",
    "render_static_preview",
]
