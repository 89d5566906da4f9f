"""TOML configuration file: lookup, strict parsing, and starter template.

The file is read once at startup. It has two optional sections::

    [demo]
    theme = "solar"
    no_color = false

    [keys]
    cycle_theme = "n"
    quit = ["q", "x"]

Unknown sections or fields, wrong value types, unknown theme names, and bad
key specs all fail the whole load with a ``ConfigError`` naming the field and
the file.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..errors import BindingError, ConfigError, ConfigNotFoundError, KeySpecError
from ..input.bindings import DEFAULT_KEY_SPECS, Action, BindingTable, build_bindings
from ..input.keyspec import KeyChord, key_spec_display, parse_key_specs, unreachable_reason
from ..ui_theme import ThemeName, available_theme_names
from .settings import CliOverrides, EnvSignals, FileDefaults, Settings, resolve_settings

logger = logging.getLogger(__name__)

APP_NAME = "tui-starter"
CONFIG_FILENAME = "config.toml"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_INIT_HINT = "try `tui-starter config init`"

_DEMO_BOOL_FIELDS = ("no_color", "high_contrast", "reduced_motion")
_DEMO_FIELDS = ("theme",) + _DEMO_BOOL_FIELDS


@dataclass(frozen=True)
class FileConfig:
    """Parsed config file contents."""

    demo: FileDefaults = field(default_factory=FileDefaults)
    keys: Mapping[Action, tuple[KeyChord, ...]] = field(default_factory=dict)
    source: Path | None = None


@dataclass(frozen=True)
class RuntimeConfig:
    """Validated startup configuration: resolved settings plus bindings."""

    settings: Settings
    bindings: BindingTable
    config_path: Path | None = None


def default_config_path() -> Path:
    return DEFAULT_CONFIG_PATH


def _reject_unknown(table: Mapping[str, object], allowed: tuple[str, ...], where: str, source: Path) -> None:
    for name in table:
        if name not in allowed:
            raise ConfigError(
                f"unknown field '{name}' in {where} of {source} (expected one of: {', '.join(allowed)})"
            )


def _parse_demo_section(raw: object, source: Path) -> FileDefaults:
    if not isinstance(raw, dict):
        raise ConfigError(f"[demo] must be a table in {source}")
    _reject_unknown(raw, _DEMO_FIELDS, "[demo]", source)

    theme: ThemeName | None = None
    if "theme" in raw:
        raw_theme = raw["theme"]
        theme = ThemeName.parse(raw_theme) if isinstance(raw_theme, str) else None
        if theme is None:
            raise ConfigError(
                f"invalid theme {raw_theme!r} in {source}. valid themes: {', '.join(available_theme_names())}"
            )

    flags: dict[str, bool | None] = {}
    for name in _DEMO_BOOL_FIELDS:
        value = raw.get(name)
        if value is not None and not isinstance(value, bool):
            raise ConfigError(f"[demo].{name} must be true or false in {source}")
        flags[name] = value
    return FileDefaults(theme=theme, **flags)


def _parse_keys_section(raw: object, source: Path) -> dict[Action, tuple[KeyChord, ...]]:
    if not isinstance(raw, dict):
        raise ConfigError(f"[keys] must be a table in {source}")
    _reject_unknown(raw, tuple(action.value for action in Action), "[keys]", source)

    overrides: dict[Action, tuple[KeyChord, ...]] = {}
    for name, value in raw.items():
        action = Action(name)
        is_list = isinstance(value, list) and all(isinstance(item, str) for item in value)
        if not isinstance(value, str) and not is_list:
            raise ConfigError(f"[keys].{name} must be a key spec string or a list of strings in {source}")
        try:
            overrides[action] = parse_key_specs(value)
        except KeySpecError as exc:
            raise ConfigError(f"invalid key spec for '{name}' in {source}: {exc}") from exc
        for chord in overrides[action]:
            reason = unreachable_reason(chord)
            if reason is not None:
                logger.warning("[keys].%s: %s never fires (%s) in %s", name, key_spec_display(chord), reason, source)
    return overrides


def parse_config_text(contents: str, source: Path) -> FileConfig:
    """Parse and structurally validate config text read from ``source``."""
    try:
        raw = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config TOML in {source}: {exc}") from exc

    _reject_unknown(raw, ("demo", "keys"), "top level", source)
    demo = _parse_demo_section(raw["demo"], source) if "demo" in raw else FileDefaults()
    keys = _parse_keys_section(raw["keys"], source) if "keys" in raw else {}
    return FileConfig(demo=demo, keys=keys, source=source)


def _resolve_config_path(path_override: Path | None) -> Path | None:
    """Return the file to read, ``None`` when the default file is absent."""
    if path_override is not None:
        if not path_override.exists():
            raise ConfigNotFoundError(f"config file not found: {path_override} ({CONFIG_INIT_HINT})")
        return path_override
    path = default_config_path()
    return path if path.exists() else None


def load_config_file(path_override: Path | None = None) -> FileConfig:
    """Load the config file, or an empty ``FileConfig`` when there is none."""
    path = _resolve_config_path(path_override)
    if path is None:
        logger.debug("no config file at %s; using built-in defaults", default_config_path())
        return FileConfig()
    try:
        contents = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to read config file {path}: {exc}") from exc
    logger.debug("loaded config file %s", path)
    return parse_config_text(contents, path)


def bindings_from_file(file_config: FileConfig) -> BindingTable:
    """Merge file key overrides over the defaults and validate the merged table."""
    if file_config.keys:
        logger.debug(
            "key overrides from %s: %s",
            file_config.source,
            ", ".join(sorted(action.value for action in file_config.keys)),
        )
    try:
        return build_bindings(file_config.keys)
    except BindingError as exc:
        if file_config.source is None:
            raise
        raise ConfigError(f"{exc} (in {file_config.source})") from exc


def resolve_key_bindings(path_override: Path | None = None) -> BindingTable:
    return bindings_from_file(load_config_file(path_override))


def resolve_runtime(
    cli: CliOverrides,
    path_override: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> RuntimeConfig:
    """Produce validated settings and bindings from every startup source."""
    file_config = load_config_file(path_override)
    env = EnvSignals.from_environ(os.environ if environ is None else environ)
    settings = resolve_settings(cli, file_config.demo, env)
    bindings = bindings_from_file(file_config)
    logger.debug("resolved settings: %s", settings)
    return RuntimeConfig(settings=settings, bindings=bindings, config_path=file_config.source)


def validate_config_file(path: Path) -> RuntimeConfig:
    """Fully validate one config file, including the merged binding table."""
    file_config = load_config_file(path)
    settings = resolve_settings(CliOverrides(), file_config.demo, EnvSignals())
    return RuntimeConfig(settings=settings, bindings=bindings_from_file(file_config), config_path=path)


def _toml_value(specs: tuple[str, ...]) -> str:
    quoted = [f'"{spec}"' for spec in specs]
    if len(quoted) == 1:
        return quoted[0]
    return "[" + ", ".join(quoted) + "]"


def starter_config_toml() -> str:
    """Return a commented starter config that lists every field with its default."""
    lines = [
        "# tui-starter configuration",
        "#",
        "# Command-line flags override these values; NO_COLOR, CLICOLOR=0 and",
        "# TERM=dumb only apply when no_color is not set here.",
        "",
        "[demo]",
        f"# theme: one of {', '.join(available_theme_names())}",
        'theme = "aurora"',
        "# no_color = false",
        "high_contrast = false",
        "reduced_motion = false",
        "",
        "[keys]",
        "# Each action takes one key spec or a list of them, e.g. \"ctrl+n\" or [\"j\", \"down\"].",
        "# esc and ctrl+c always quit and cannot be bound to other actions.",
        "# Terminals send ctrl+i as tab and ctrl+j/ctrl+m as enter, and report no shift",
        "# on characters, so bind \"T\" rather than \"shift+t\". Such chords never fire.",
    ]
    for action, specs in DEFAULT_KEY_SPECS.items():
        lines.append(f"{action.value} = {_toml_value(specs)}")
    return "\n".join(lines) + "\n"


def write_starter_config(path: Path, *, force: bool = False) -> Path:
    if path.exists() and not force:
        raise ConfigError(f"config already exists at {path} (use `tui-starter config init --force` to overwrite)")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(starter_config_toml(), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to write config file {path}: {exc}") from exc
    logger.debug("wrote starter config to %s", path)
    return path


__all__ = [
    "APP_NAME",
    "DEFAULT_CONFIG_PATH",
    "FileConfig",
    "RuntimeConfig",
    "default_config_path",
    "parse_config_text",
    "load_config_file",
    "bindings_from_file",
    "resolve_key_bindings",
    "resolve_runtime",
    "validate_config_file",
    "starter_config_toml",
    "write_starter_config",
]
