"""Configuration loading and validation for growlscript."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from growlscript.errors import ConfigError
from growlscript.notifier import GROWL_BUNDLE_ID, GrowlNotifier
from growlscript.runner import DEFAULT_OSASCRIPT_COMMAND, OsascriptEngineProvider

ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_CONFIG: dict[str, Any] = {
    "application": {
        "name": "growlscript",
        "notifications": ["Info"],
        "enabled_notifications": ["Info"],
    },
    "growl": {
        "bundle_id": GROWL_BUNDLE_ID,
    },
    "engine": {
        "command": DEFAULT_OSASCRIPT_COMMAND,
        "timeout": None,
    },
    "logging": {
        "level": "INFO",
        "console": True,
        "file": "",
    },
}


def load_config(path: str) -> dict[str, Any]:
    """Load and validate the config file at the provided path."""
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw_config = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file is not valid JSON: {config_path}") from exc

    if not isinstance(raw_config, dict):
        raise ConfigError("Config file must contain a JSON object at the top level.")

    merged = _merge_dicts(DEFAULT_CONFIG, raw_config)
    _validate_config(merged)
    return merged


def apply_overrides(
    config: dict[str, Any], overrides: dict[str, Any] | None
) -> dict[str, Any]:
    """Merge CLI overrides into an existing config dictionary."""
    if overrides is None:
        return copy.deepcopy(config)
    if not isinstance(overrides, dict):
        raise ConfigError("Overrides must be provided as a dictionary.")
    merged = _merge_dicts(config, overrides)
    _validate_config(merged)
    return merged


def build_notifier(config: dict[str, Any]) -> GrowlNotifier:
    """Create a notifier wired to osascript according to the config."""
    application = config["application"]
    engine = config["engine"]
    provider = OsascriptEngineProvider(engine["command"], timeout=engine["timeout"])
    return GrowlNotifier(
        application["name"],
        application["notifications"],
        application["enabled_notifications"],
        engine_provider=provider,
        growl_bundle_id=config["growl"]["bundle_id"],
    )


def _merge_dicts(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate_config(config: dict[str, Any]) -> None:
    application = _require_dict(config, "application")
    _validate_str(application, "name")
    _validate_str_list(application, "notifications", allow_empty=False)
    _validate_str_list(application, "enabled_notifications")

    growl = _require_dict(config, "growl")
    _validate_str(growl, "bundle_id")

    engine = _require_dict(config, "engine")
    _validate_str(engine, "command")
    _validate_optional_float(engine, "timeout", min_value=0.0)

    logging_config = _require_dict(config, "logging")
    _validate_str(logging_config, "level", allowed=ALLOWED_LOG_LEVELS)
    _validate_bool(logging_config, "console")
    _validate_optional_str(logging_config, "file")


def _require_dict(parent: dict[str, Any], key: str) -> dict[str, Any]:
    value = parent.get(key)
    if not isinstance(value, dict):
        raise ConfigError(f"Config key '{key}' must be an object.")
    return value


def _validate_str(
    parent: dict[str, Any],
    key: str,
    *,
    allowed: set[str] | None = None,
) -> None:
    value = parent.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Config key '{key}' must be a non-empty string.")
    if allowed is not None and value not in allowed:
        allowed_list = ", ".join(sorted(allowed))
        raise ConfigError(f"Config key '{key}' must be one of: {allowed_list}.")


def _validate_optional_str(parent: dict[str, Any], key: str) -> None:
    value = parent.get(key)
    if value is None:
        return
    if not isinstance(value, str):
        raise ConfigError(f"Config key '{key}' must be a string.")


def _validate_str_list(
    parent: dict[str, Any], key: str, *, allow_empty: bool = True
) -> None:
    value = parent.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"Config key '{key}' must be a list of strings.")
    if not allow_empty and not value:
        raise ConfigError(f"Config key '{key}' must not be empty.")


def _validate_bool(parent: dict[str, Any], key: str) -> None:
    value = parent.get(key)
    if not isinstance(value, bool):
        raise ConfigError(f"Config key '{key}' must be a boolean.")


def _validate_optional_float(
    parent: dict[str, Any], key: str, *, min_value: float | None = None
) -> None:
    value = parent.get(key)
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (float, int)):
        raise ConfigError(f"Config key '{key}' must be a number or null.")
    if min_value is not None and float(value) <= min_value:
        raise ConfigError(f"Config key '{key}' must be > {min_value}.")


__all__ = ["DEFAULT_CONFIG", "apply_overrides", "build_notifier", "load_config"]
