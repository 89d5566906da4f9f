"""Command-line front door for tui-starter.

Parses subcommands, resolves startup configuration, and dispatches into the
interactive demo, the static preview, or one of the listing commands.
Startup failures surface as a single ``error: ...`` line and exit status 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import TuiStarterError
from .input.bindings import Action
from .logs import LOG_LEVELS, configure_logging
from .runtime import run_demo
from .runtime.app import render_preview
from .runtime.config import (
    default_config_path,
    resolve_key_bindings,
    resolve_runtime,
    starter_config_toml,
    validate_config_file,
    write_starter_config,
)
from .runtime.settings import CliOverrides
from .ui_theme import ThemeName, available_theme_names, available_themes

logger = logging.getLogger(__name__)

FORMATS = ("text", "json")


def _theme_name(value: str) -> ThemeName:
    """argparse type for theme names."""
    parsed = ThemeName.parse(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(
            f"unknown theme {value!r} (choose from {', '.join(available_theme_names())})"
        )
    return parsed


def _add_flag_pair(group_parent: argparse.ArgumentParser, on: str, off: str, dest: str, on_help: str, off_help: str) -> None:
    group = group_parent.add_mutually_exclusive_group()
    group.add_argument(on, dest=f"{dest}_on", action="store_true", help=on_help)
    group.add_argument(off, dest=f"{dest}_off", action="store_true", help=off_help)


def _add_format(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", choices=FORMATS, default="text", help="Output format (default: text).")


def _add_config(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Config file path (default: {default_config_path()}).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tui-starter",
        description="Accessible terminal UI starter: themes, key bindings, and a demo screen.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write diagnostic logs to this file.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level for --log-file (default: DEBUG).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    demo = commands.add_parser("demo", help="Run the interactive demo screen.")
    demo.add_argument(
        "--theme",
        type=_theme_name,
        default=None,
        help=f"UI theme ({', '.join(available_theme_names())}).",
    )
    _add_flag_pair(demo, "--no-color", "--color", "no_color", "Disable color output.", "Force color output.")
    _add_flag_pair(
        demo,
        "--high-contrast",
        "--normal-contrast",
        "high_contrast",
        "Use the high-contrast palette.",
        "Use the theme's normal palette.",
    )
    _add_flag_pair(
        demo,
        "--reduced-motion",
        "--motion",
        "reduced_motion",
        "Stop the spinner animation.",
        "Animate the spinner.",
    )
    _add_config(demo)
    demo.add_argument("--mouse", action="store_true", help="Enable mouse capture (tabs, list rows, wheel).")
    demo.add_argument("--no-tty", action="store_true", help="Print one static frame and exit.")
    demo.add_argument("--width", type=int, default=None, help="Preview width for --no-tty (20-240, default 80).")
    demo.add_argument("--height", type=int, default=None, help="Preview height for --no-tty (11-120, default 24).")
    demo.add_argument("--ascii", action="store_true", help="Draw borders with +-| instead of box characters.")

    themes = commands.add_parser("themes", help="List available themes.")
    _add_format(themes)

    keys = commands.add_parser("keys", help="List the effective key bindings.")
    _add_config(keys)
    _add_format(keys)

    config = commands.add_parser("config", help="Manage the config file.")
    config_commands = config.add_subparsers(dest="config_command", required=True)
    init = config_commands.add_parser("init", help="Write a commented starter config file.")
    init.add_argument("--force", action="store_true", help="Overwrite an existing file.")
    init.add_argument("--stdout", action="store_true", help="Print the starter config instead of writing it.")
    _add_config(init)
    validate = config_commands.add_parser("validate", help="Check a config file and its key bindings.")
    _add_config(validate)
    _add_format(validate)
    return parser


def _emit(text: str) -> None:
    sys.stdout.write(text if text.endswith("\n") else text + "\n")


def _emit_json(payload: object) -> None:
    _emit(json.dumps(payload, indent=2))


def cli_overrides(args: argparse.Namespace) -> CliOverrides:
    return CliOverrides(
        theme=args.theme,
        no_color=CliOverrides.from_flag_pair(args.no_color_on, args.no_color_off),
        high_contrast=CliOverrides.from_flag_pair(args.high_contrast_on, args.high_contrast_off),
        reduced_motion=CliOverrides.from_flag_pair(args.reduced_motion_on, args.reduced_motion_off),
    )


def command_demo(args: argparse.Namespace) -> None:
    runtime = resolve_runtime(cli_overrides(args), args.config)
    if args.no_tty:
        sys.stdout.write(render_preview(runtime, args.width, args.height, ascii=args.ascii))
        return
    run_demo(runtime, mouse=args.mouse, ascii=args.ascii)


def command_themes(args: argparse.Namespace) -> None:
    themes = available_themes()
    if args.format == "json":
        _emit_json([{"name": theme.name, "description": theme.description} for theme in themes])
        return
    width = max(len(theme.name) for theme in themes)
    _emit("\n".join(f"{theme.name:<{width}}  {theme.description}" for theme in themes))


def command_keys(args: argparse.Namespace) -> None:
    bindings = resolve_key_bindings(args.config)
    if args.format == "json":
        _emit_json({action.value: bindings.labels(action) for action in Action})
        return
    width = max(len(action.value) for action in Action)
    _emit("\n".join(f"{action.value:<{width}}  {bindings.label(action)}" for action in Action))


def command_config_init(args: argparse.Namespace) -> None:
    if args.stdout:
        sys.stdout.write(starter_config_toml())
        return
    path = write_starter_config(args.config or default_config_path(), force=args.force)
    _emit(f"wrote {path}")


def command_config_validate(args: argparse.Namespace) -> None:
    path = args.config or default_config_path()
    validate_config_file(path)
    if args.format == "json":
        _emit_json({"ok": True, "path": str(path)})
        return
    _emit(f"ok: {path}")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the selected subcommand.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "demo" and not args.no_tty and (args.width is not None or args.height is not None):
        parser.error("--width/--height require --no-tty")

    try:
        configure_logging(args.log_file, args.log_level)
    except OSError as exc:
        raise SystemExit(f"error: cannot open log file {args.log_file}: {exc}") from exc
    logger.debug("command: %s", args.command)

    handlers = {
        "demo": command_demo,
        "themes": command_themes,
        "keys": command_keys,
    }
    try:
        if args.command == "config":
            if args.config_command == "init":
                command_config_init(args)
            else:
                command_config_validate(args)
        else:
            handlers[args.command](args)
    except TuiStarterError as exc:
        logger.debug("startup failed: %s", exc)
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
