"""Logging setup for the growlscript package logger.

Only the ``growlscript`` logger is touched, so an application embedding the
notifier keeps its own root configuration. When no handler is configured the
package logger propagates to whatever the host application set up.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "growlscript"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Marks handlers installed here so a second setup replaces only those.
_OWNED_ATTR = "_growlscript_owned"


def setup_logging(config: dict[str, Any]) -> logging.Logger:
    """Configure the package logger from the ``logging`` config section."""
    settings = config.get("logging", {})
    level_name = str(settings.get("level", "INFO")).upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_owned_handlers(logger)
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = []
    if settings.get("console", True):
        handlers.append(logging.StreamHandler())

    file_path = str(settings.get("file") or "").strip()
    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
        logger.addHandler(handler)

    # own handlers replace propagation to the host handlers
    logger.propagate = not handlers
    return logger


def _remove_owned_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "setup_logging"]
