"""Screen partition shared by the renderer and the mouse hit-test.

``partition_screen`` is the only place that knows the region geometry. The
renderer draws into the rectangles it returns and the hit-test classifies
pointer coordinates against the same rectangles, so the two cannot drift.
All values are pure functions of the terminal size.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MIN_WIDTH = 20
MIN_HEIGHT = 11
HEADER_HEIGHT = 4
FOOTER_HEIGHT = 3
NARROW_BREAKPOINT = 90
NARROW_COMMANDS_HEIGHT = 5
NARROW_ACCESSIBILITY_HEIGHT = 4
WIDE_COMMANDS_PERCENT = 52
WIDE_SHOWCASE_PERCENT = 60
BORDER_MARGIN = 1
# Border rows plus the tab strip plus one list row.
SHOWCASE_MIN_HEIGHT = 2 * BORDER_MARGIN + 2


class RegionKind(Enum):
    HEADER = "header"
    COMMANDS = "commands"
    SHOWCASE = "showcase"
    SHOWCASE_TABS = "showcase_tabs"
    SHOWCASE_LIST = "showcase_list"
    ACCESSIBILITY = "accessibility"
    FOOTER = "footer"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def inset(self, margin: int) -> Rect:
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )


@dataclass(frozen=True)
class Region:
    kind: RegionKind
    rect: Rect


@dataclass(frozen=True)
class RegionSet:
    """All tagged regions for one terminal size."""

    width: int
    height: int
    narrow: bool
    header: Rect
    commands: Rect
    showcase: Rect
    showcase_tabs: Rect
    showcase_list: Rect
    accessibility: Rect
    footer: Rect

    def regions(self) -> tuple[Region, ...]:
        return (
            Region(RegionKind.HEADER, self.header),
            Region(RegionKind.COMMANDS, self.commands),
            Region(RegionKind.SHOWCASE, self.showcase),
            Region(RegionKind.SHOWCASE_TABS, self.showcase_tabs),
            Region(RegionKind.SHOWCASE_LIST, self.showcase_list),
            Region(RegionKind.ACCESSIBILITY, self.accessibility),
            Region(RegionKind.FOOTER, self.footer),
        )

    @property
    def list_viewport_rows(self) -> int:
        return self.showcase_list.height


def is_narrow(width: int) -> bool:
    return width < NARROW_BREAKPOINT


def _split_narrow_body(body: Rect) -> tuple[Rect, Rect, Rect]:
    """Stack commands, showcase, accessibility; the showcase keeps its minimum."""
    spare = body.height - SHOWCASE_MIN_HEIGHT
    commands_h = min(NARROW_COMMANDS_HEIGHT, spare)
    access_h = min(NARROW_ACCESSIBILITY_HEIGHT, spare - commands_h)
    showcase_h = body.height - commands_h - access_h
    commands = Rect(body.x, body.y, body.width, commands_h)
    showcase = Rect(body.x, commands.bottom, body.width, showcase_h)
    accessibility = Rect(body.x, showcase.bottom, body.width, access_h)
    return commands, showcase, accessibility


def _split_wide_body(body: Rect) -> tuple[Rect, Rect, Rect]:
    """Commands on the left; showcase above accessibility on the right."""
    left_w = body.width * WIDE_COMMANDS_PERCENT // 100
    commands = Rect(body.x, body.y, left_w, body.height)
    right_x = body.x + left_w
    right_w = body.width - left_w
    showcase_h = min(body.height, max(SHOWCASE_MIN_HEIGHT, body.height * WIDE_SHOWCASE_PERCENT // 100))
    showcase = Rect(right_x, body.y, right_w, showcase_h)
    accessibility = Rect(right_x, showcase.bottom, right_w, body.height - showcase_h)
    return commands, showcase, accessibility


def partition_screen(width: int, height: int) -> RegionSet | None:
    """Return the region partition for a terminal size, or ``None`` when too small."""
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        return None

    header = Rect(0, 0, width, HEADER_HEIGHT)
    footer = Rect(0, height - FOOTER_HEIGHT, width, FOOTER_HEIGHT)
    body = Rect(0, header.bottom, width, footer.y - header.bottom)
    if body.height < SHOWCASE_MIN_HEIGHT:
        return None

    narrow = is_narrow(width)
    if narrow:
        commands, showcase, accessibility = _split_narrow_body(body)
    else:
        commands, showcase, accessibility = _split_wide_body(body)

    inner = showcase.inset(BORDER_MARGIN)
    tabs = Rect(inner.x, inner.y, inner.width, 1)
    list_viewport = Rect(inner.x, inner.y + 1, inner.width, inner.height - 1)
    return RegionSet(
        width=width,
        height=height,
        narrow=narrow,
        header=header,
        commands=commands,
        showcase=showcase,
        showcase_tabs=tabs,
        showcase_list=list_viewport,
        accessibility=accessibility,
        footer=footer,
    )


def scroll_window_start(selected: int, total: int, viewport: int) -> int:
    """Return the first visible list index that keeps ``selected`` on screen.

    The window never extends past the end of the list.
    """
    viewport = max(1, viewport)
    start = max(0, selected + 1 - viewport)
    return min(start, max(0, total - viewport))


__all__ = [
    "MIN_WIDTH",
    "MIN_HEIGHT",
    "NARROW_BREAKPOINT",
    "RegionKind",
    "Rect",
    "Region",
    "RegionSet",
    "is_narrow",
    "partition_screen",
    "scroll_window_start",
]
