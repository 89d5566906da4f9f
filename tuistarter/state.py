from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .runtime.settings import Settings
from .ui_theme import THEME_ORDER, ThemeName

SPINNER_FRAMES: tuple[str, ...] = ("-", "\\", "|", "/")
STATIC_SPINNER_FRAME = "*"

_SHOWCASE_TOPICS: tuple[str, ...] = (
    "Keyboard navigation",
    "Mouse hit-testing",
    "Theme cycling",
    "High-contrast palette",
    "No-color fallback",
    "Reduced motion",
    "Config file overrides",
    "Environment detection",
)

SHOWCASE_ITEMS: tuple[str, ...] = tuple(
    f"{idx + 1:02d}  {_SHOWCASE_TOPICS[idx % len(_SHOWCASE_TOPICS)]}" for idx in range(40)
)


class Panel(Enum):
    OVERVIEW = "overview"
    LIST = "list"

    @property
    def title(self) -> str:
        return "Overview" if self is Panel.OVERVIEW else "List"


PANEL_ORDER: tuple[Panel, ...] = (Panel.OVERVIEW, Panel.LIST)


@dataclass
class ListSelection:
    """Selected row within a list of ``total`` items; always kept in range."""

    total: int
    selected: int = 0

    def __post_init__(self) -> None:
        self.total = max(0, self.total)
        self.selected = self.clamp(self.selected)

    def clamp(self, index: int) -> int:
        if self.total <= 0:
            return 0
        return max(0, min(index, self.total - 1))

    def select(self, index: int) -> bool:
        """Set the selection directly; return whether it changed."""
        clamped = self.clamp(index)
        if clamped == self.selected:
            return False
        self.selected = clamped
        return True

    def move(self, delta: int) -> bool:
        return self.select(self.selected + delta)


@dataclass
class AppState:
    theme_index: int
    no_color: bool
    high_contrast: bool
    reduced_motion: bool
    mouse_enabled: bool = False
    panel: Panel = Panel.OVERVIEW
    show_help: bool = False
    should_quit: bool = False
    spinner_index: int = 0
    dirty: bool = True
    selection: ListSelection = field(default_factory=lambda: ListSelection(total=len(SHOWCASE_ITEMS)))

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        mouse_enabled: bool = False,
        panel: Panel = Panel.OVERVIEW,
    ) -> AppState:
        """Seed mutable UI state from the startup-resolved settings snapshot."""
        return cls(
            theme_index=THEME_ORDER.index(settings.theme),
            no_color=settings.no_color,
            high_contrast=settings.high_contrast,
            reduced_motion=settings.reduced_motion,
            mouse_enabled=mouse_enabled,
            panel=panel,
        )

    @property
    def theme_name(self) -> ThemeName:
        return THEME_ORDER[self.theme_index % len(THEME_ORDER)]

    def spinner_frame(self) -> str:
        if self.no_color or self.reduced_motion:
            return STATIC_SPINNER_FRAME
        return SPINNER_FRAMES[self.spinner_index % len(SPINNER_FRAMES)]

    def tick(self) -> None:
        if self.no_color or self.reduced_motion:
            return
        self.spinner_index += 1
        self.dirty = True
