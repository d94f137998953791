"""Command-line interface for growlscript."""

from __future__ import annotations

import argparse
import copy
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from growlscript.config import DEFAULT_CONFIG, apply_overrides, build_notifier, load_config
from growlscript.errors import ConfigError, GrowlRuntimeError, UserInputError, format_error
from growlscript.logging_utils import setup_logging
from growlscript.notifier import GrowlNotifier

DEFAULT_CONFIG_PATH = Path("config") / "config.json"
logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the growlscript CLI entrypoint."""
    parser = _build_parser()
    try:
        cleaned_argv, config_path = _extract_config_arg(argv)
        args = parser.parse_args(cleaned_argv)
        args.config = config_path or str(DEFAULT_CONFIG_PATH)

        config = _load_or_default(config_path)
        config = apply_overrides(config, _collect_overrides(args))
        setup_logging(config)
        logger.debug("Using config from %s", args.config)

        if args.command == "status":
            return _handle_status(config)
        if args.command == "register":
            _handle_register(config)
            return 0
        if args.command == "notify":
            _handle_notify(config, args.name, args.title, args.message, args.icon)
            return 0
    except (ConfigError, UserInputError, GrowlRuntimeError) as exc:
        print(format_error(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        print(format_error(exc), file=sys.stderr)
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 2


def _build_parser() -> argparse.ArgumentParser:
    common_parser = argparse.ArgumentParser(add_help=False)
    _add_common_options(common_parser)

    parser = argparse.ArgumentParser(
        prog="growlscript",
        description="Send Growl notifications through AppleScript.",
        parents=[common_parser],
    )
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to config file (default: config/config.json).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "status",
        help="Check whether Growl is running.",
        parents=[common_parser],
    )

    subparsers.add_parser(
        "register",
        help="Register the application and its notifications with Growl.",
        parents=[common_parser],
    )

    notify_parser = subparsers.add_parser(
        "notify",
        help="Post a notification.",
        parents=[common_parser],
    )
    notify_parser.add_argument("name", help="Registered notification name.")
    notify_parser.add_argument("title", help="Notification title.")
    notify_parser.add_argument("message", help="Notification body.")
    notify_parser.add_argument("--icon", default=None, help="Absolute path to an icon image.")

    return parser


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--app-name",
        dest="app_name",
        default=argparse.SUPPRESS,
        help="Application name shown by Growl.",
    )


def _collect_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    app_name = getattr(args, "app_name", None)
    if app_name is not None:
        overrides["application"] = {"name": app_name}
    return overrides


def _extract_config_arg(argv: Sequence[str] | None) -> tuple[list[str], str | None]:
    """Allow --config to appear before or after subcommands, up to a bare ``--``."""
    if argv is None:
        argv_list = list(sys.argv[1:])
    else:
        argv_list = list(argv)

    config_path: str | None = None
    cleaned: list[str] = []
    index = 0

    while index < len(argv_list):
        value = argv_list[index]
        if value == "--":
            cleaned.extend(argv_list[index:])
            break
        if value == "--config":
            if index + 1 >= len(argv_list):
                raise UserInputError("Missing value for --config.")
            config_path = argv_list[index + 1]
            if not config_path:
                raise UserInputError("Config path cannot be empty.")
            index += 2
            continue
        if value.startswith("--config="):
            config_path = value.split("=", 1)[1]
            if not config_path:
                raise UserInputError("Config path cannot be empty.")
            index += 1
            continue

        cleaned.append(value)
        index += 1

    return cleaned, config_path


def _load_or_default(config_path: str | None) -> dict[str, Any]:
    if config_path is not None:
        return load_config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(str(DEFAULT_CONFIG_PATH))
    return copy.deepcopy(DEFAULT_CONFIG)


def _initialized_notifier(config: dict[str, Any]) -> GrowlNotifier:
    notifier = build_notifier(config)
    if not notifier.initialize():
        raise GrowlRuntimeError("Growl is not available.")
    return notifier


def _handle_status(config: dict[str, Any]) -> int:
    notifier = build_notifier(config)
    if notifier.initialize():
        print("Growl is running.")
        return 0
    print("Growl is not available.")
    return 1


def _handle_register(config: dict[str, Any]) -> None:
    _initialized_notifier(config).register_application()


def _handle_notify(
    config: dict[str, Any], name: str, title: str, message: str, icon: str | None
) -> None:
    notifier = _initialized_notifier(config)
    if icon:
        notifier.notify_with_icon(name, title, message, icon)
    else:
        notifier.notify(name, title, message)


__all__ = ["main"]
