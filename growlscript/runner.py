"""Script engines and the runner that evaluates generated scripts."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import Protocol, TypeVar, Union

from growlscript.errors import ScriptExecutionError

APPLESCRIPT_ENGINE = "AppleScript"
DEFAULT_OSASCRIPT_COMMAND = "osascript"

T = TypeVar("T")
logger = logging.getLogger(__name__)


class ScriptEngine(Protocol):
    def eval(self, script: str) -> str:
        """Evaluate a script and return its textual result."""
        ...


class ScriptEngineProvider(Protocol):
    def get_engine(self, name: str) -> ScriptEngine | None:
        """Return an engine for the named language, or None if unavailable."""
        ...


class OsascriptEngine:
    """Evaluate AppleScript through the ``osascript`` command."""

    def __init__(self, command: str, *, timeout: float | None = None) -> None:
        self.command = command
        self.timeout = timeout

    def eval(self, script: str) -> str:
        try:
            result = subprocess.run(
                [self.command, "-e", script],
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ScriptExecutionError(
                f"Script timed out after {self.timeout}s.", script=script
            ) from exc
        except OSError as exc:
            raise ScriptExecutionError(
                f"Could not run {self.command}: {exc}", script=script
            ) from exc
        except ValueError as exc:
            # Null bytes cannot be passed as process arguments.
            raise ScriptExecutionError(f"Invalid script text: {exc}", script=script) from exc
        if result.returncode != 0:
            details = result.stderr.strip() or f"exit status {result.returncode}"
            raise ScriptExecutionError(details, script=script)
        return result.stdout.strip()


class OsascriptEngineProvider:
    """Provide an AppleScript engine when ``osascript`` is installed."""

    def __init__(
        self, command: str = DEFAULT_OSASCRIPT_COMMAND, *, timeout: float | None = None
    ) -> None:
        self.command = command
        self.timeout = timeout

    def get_engine(self, name: str) -> ScriptEngine | None:
        if name != APPLESCRIPT_ENGINE:
            return None
        resolved = shutil.which(self.command)
        if resolved is None:
            logger.debug("%s not found on PATH.", self.command)
            return None
        return OsascriptEngine(resolved, timeout=self.timeout)


@dataclass(frozen=True)
class ScriptSuccess:
    value: str

    @property
    def ok(self) -> bool:
        return True

    def value_or(self, default: T) -> T:
        """Return the result converted to the type of ``default``."""
        return _coerce(self.value, default)


@dataclass(frozen=True)
class ScriptFailure:
    error: ScriptExecutionError

    @property
    def ok(self) -> bool:
        return False

    def value_or(self, default: T) -> T:
        return default


ScriptResult = Union[ScriptSuccess, ScriptFailure]


def _coerce(raw: str, default: T) -> T:
    text = raw.strip()
    lowered = text.lower()
    try:
        if isinstance(default, bool):
            if lowered in ("true", "false"):
                return lowered == "true"  # type: ignore[return-value]
            return default
        if isinstance(default, int):
            if lowered in ("true", "false"):
                return int(lowered == "true")  # type: ignore[return-value]
            return int(text)  # type: ignore[return-value]
        if isinstance(default, float):
            return float(text)  # type: ignore[return-value]
        if isinstance(default, str):
            return text  # type: ignore[return-value]
    except ValueError:
        logger.debug("Could not convert script result %r to %s.", raw, type(default).__name__)
        return default
    return default


class ScriptRunner:
    """Run scripts against an engine without letting failures escape."""

    def __init__(self, engine: ScriptEngine) -> None:
        self.engine = engine

    def run(self, script: str) -> ScriptResult:
        logger.debug("Evaluating script:\n%s", script)
        try:
            return ScriptSuccess(self.engine.eval(script))
        except ScriptExecutionError as exc:
            if exc.script is None:
                exc.script = script
            return ScriptFailure(exc)

    def evaluate(self, script: str) -> None:
        """Evaluate a script on a best-effort basis."""
        result = self.run(script)
        if isinstance(result, ScriptFailure):
            logger.error("Problem executing script.")
            logger.debug("Script error: %s", result.error)

    def evaluate_as(self, script: str, default: T) -> T:
        """Evaluate a script and return its result as the type of ``default``."""
        result = self.run(script)
        if isinstance(result, ScriptFailure):
            logger.error("%s", result.error)
        return result.value_or(default)


__all__ = [
    "APPLESCRIPT_ENGINE",
    "DEFAULT_OSASCRIPT_COMMAND",
    "OsascriptEngine",
    "OsascriptEngineProvider",
    "ScriptEngine",
    "ScriptEngineProvider",
    "ScriptFailure",
    "ScriptResult",
    "ScriptRunner",
    "ScriptSuccess",
]
