"""UI theme definitions and selection helpers.

Themes are named ANSI palettes. Accessibility modes derive from them: no-color
swaps in the plain palette and high-contrast swaps in a fixed bright palette.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ThemeName(Enum):
    AURORA = "aurora"
    MONO = "mono"
    SOLAR = "solar"

    @classmethod
    def parse(cls, value: str) -> ThemeName | None:
        """Case-insensitive lookup that ignores surrounding whitespace."""
        candidate = str(value).strip().lower()
        for name in cls:
            if name.value == candidate:
                return name
        return None


THEME_ORDER: tuple[ThemeName, ...] = (ThemeName.AURORA, ThemeName.MONO, ThemeName.SOLAR)
DEFAULT_THEME_NAME = ThemeName.AURORA


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    description: str
    fg: str
    accent: str
    muted: str
    success: str
    danger: str
    bold: str = "\033[1m"
    reverse: str = "\033[7m"
    reset: str = "\033[0m"


AURORA_THEME = UITheme(
    name=ThemeName.AURORA.value,
    description="Cool blues with a calm accent",
    fg="\033[97m",
    accent="\033[94m",
    muted="\033[37m",
    success="\033[92m",
    danger="\033[91m",
)

MONO_THEME = UITheme(
    name=ThemeName.MONO.value,
    description="Neutral monochrome for maximum focus",
    fg="\033[97m",
    accent="\033[37m",
    muted="\033[90m",
    success="\033[97m",
    danger="\033[97m",
)

SOLAR_THEME = UITheme(
    name=ThemeName.SOLAR.value,
    description="Warm highlights with soft contrast",
    fg="\033[97m",
    accent="\033[33m",
    muted="\033[37m",
    success="\033[92m",
    danger="\033[91m",
)

_HIGH_CONTRAST_COLORS = {
    "fg": "\033[1;97;40m",
    "accent": "\033[1;93;40m",
    "muted": "\033[37;40m",
    "success": "\033[1;92;40m",
    "danger": "\033[1;91;40m",
}

_THEMES: dict[ThemeName, UITheme] = {
    ThemeName.AURORA: AURORA_THEME,
    ThemeName.MONO: MONO_THEME,
    ThemeName.SOLAR: SOLAR_THEME,
}


def available_themes() -> tuple[UITheme, ...]:
    return tuple(_THEMES[name] for name in THEME_ORDER)


def available_theme_names() -> tuple[str, ...]:
    return tuple(name.value for name in THEME_ORDER)


def plain_theme(base: UITheme) -> UITheme:
    """Strip every escape from ``base`` while keeping its name and description."""
    return replace(base, fg="", accent="", muted="", success="", danger="", bold="", reverse="", reset="")


def resolve_theme(name: ThemeName, *, no_color: bool = False, high_contrast: bool = False) -> UITheme:
    """Return the concrete palette for a theme and the accessibility toggles.

    No-color wins over high-contrast.
    """
    base = _THEMES[name]
    if no_color:
        return plain_theme(base)
    if high_contrast:
        return replace(base, **_HIGH_CONTRAST_COLORS)
    return base


__all__ = [
    "ThemeName",
    "THEME_ORDER",
    "DEFAULT_THEME_NAME",
    "UITheme",
    "available_themes",
    "available_theme_names",
    "plain_theme",
    "resolve_theme",
]
