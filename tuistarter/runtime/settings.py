"""Settings resolution across CLI flags, config file, environment, and defaults.

Each field resolves independently, highest precedence first:

1. an explicit CLI override (``True``/``False``; ``None`` means "not given"),
2. the value from the config file's ``[demo]`` section,
3. an environment-derived default (only ``no_color`` has one),
4. the built-in default.

``resolve_settings`` is pure so callers and tests can feed literal inputs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..ui_theme import DEFAULT_THEME_NAME, ThemeName

CLICOLOR_OFF = "0"
DUMB_TERM = "dumb"


@dataclass(frozen=True)
class Settings:
    theme: ThemeName = DEFAULT_THEME_NAME
    no_color: bool = False
    high_contrast: bool = False
    reduced_motion: bool = False


@dataclass(frozen=True)
class CliOverrides:
    """Command-line overrides; each flag pair collapses into one tri-state."""

    theme: ThemeName | None = None
    no_color: bool | None = None
    high_contrast: bool | None = None
    reduced_motion: bool | None = None

    @staticmethod
    def from_flag_pair(force_on: bool, force_off: bool) -> bool | None:
        if force_on:
            return True
        if force_off:
            return False
        return None


@dataclass(frozen=True)
class FileDefaults:
    """Values present in the config file; ``None`` means the key is absent."""

    theme: ThemeName | None = None
    no_color: bool | None = None
    high_contrast: bool | None = None
    reduced_motion: bool | None = None


@dataclass(frozen=True)
class EnvSignals:
    no_color: str | None = None
    clicolor: str | None = None
    term: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> EnvSignals:
        return cls(
            no_color=environ.get("NO_COLOR"),
            clicolor=environ.get("CLICOLOR"),
            term=environ.get("TERM"),
        )

    def disables_color(self) -> bool:
        return env_disables_color(self.no_color, self.clicolor, self.term)


def env_disables_color(no_color: str | None, clicolor: str | None, term: str | None) -> bool:
    """Return whether environment signals ask for colorless output.

    ``NO_COLOR`` disables color by presence alone, even when empty.
    """
    if no_color is not None:
        return True
    if term == DUMB_TERM:
        return True
    return clicolor == CLICOLOR_OFF


def _first_set(*values: bool | None, default: bool) -> bool:
    for value in values:
        if value is not None:
            return value
    return default


def resolve_settings(cli: CliOverrides, file: FileDefaults, env: EnvSignals) -> Settings:
    """Merge the four sources into one immutable ``Settings`` snapshot."""
    theme = cli.theme or file.theme or DEFAULT_THEME_NAME
    return Settings(
        theme=theme,
        no_color=_first_set(cli.no_color, file.no_color, default=env.disables_color()),
        high_contrast=_first_set(cli.high_contrast, file.high_contrast, default=False),
        reduced_motion=_first_set(cli.reduced_motion, file.reduced_motion, default=False),
    )


__all__ = [
    "Settings",
    "CliOverrides",
    "FileDefaults",
    "EnvSignals",
    "env_disables_color",
    "resolve_settings",
]
