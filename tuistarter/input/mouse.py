"""Pointer hit-testing against the shared screen partition.

``hit_test`` never looks at what was drawn. It classifies a cell coordinate
against the rectangles from ``partition_screen`` and the scroll window from
``scroll_window_start``, the same inputs the renderer uses.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..layout import RegionSet, partition_screen, scroll_window_start
from ..state import ListSelection, Panel


@dataclass(frozen=True)
class TabHit:
    """Click on the tab strip; ``column`` is relative to the strip's left edge."""

    column: int
    panel: Panel


@dataclass(frozen=True)
class ListRowHit:
    """Click inside the list viewport at visible ``offset`` mapping to ``index``."""

    offset: int
    index: int


@dataclass(frozen=True)
class NoTarget:
    pass


NO_TARGET = NoTarget()
HitTarget = TabHit | ListRowHit | NoTarget


def tab_for_column(regions: RegionSet, x: int) -> Panel:
    """Left half of the tab strip is the overview tab, right half the list tab."""
    tabs = regions.showcase_tabs
    midpoint = tabs.x + tabs.width // 2
    return Panel.OVERVIEW if x < midpoint else Panel.LIST


def hit_test(x: int, y: int, regions: RegionSet | None, selection: ListSelection) -> HitTarget:
    """Classify a 0-based cell coordinate into a UI target."""
    if regions is None:
        return NO_TARGET

    tabs = regions.showcase_tabs
    if tabs.contains(x, y):
        return TabHit(column=x - tabs.x, panel=tab_for_column(regions, x))

    viewport = regions.showcase_list
    if selection.total > 0 and viewport.contains(x, y):
        offset = y - viewport.y
        start = scroll_window_start(selection.selected, selection.total, viewport.height)
        return ListRowHit(offset=offset, index=min(start + offset, selection.total - 1))

    return NO_TARGET


def hit_test_screen(x: int, y: int, width: int, height: int, selection: ListSelection) -> HitTarget:
    """Recompute regions for the current terminal size, then hit-test."""
    return hit_test(x, y, partition_screen(width, height), selection)


__all__ = [
    "TabHit",
    "ListRowHit",
    "NoTarget",
    "NO_TARGET",
    "HitTarget",
    "tab_for_column",
    "hit_test",
    "hit_test_screen",
]
