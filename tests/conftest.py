"""Shared fakes for growlscript tests."""

from __future__ import annotations

import pytest

from growlscript.errors import ScriptExecutionError


class FakeEngine:
    """Record evaluated scripts and answer from a queue of results."""

    def __init__(self, results: list[object] | None = None) -> None:
        self.scripts: list[str] = []
        self.results = list(results or [])

    def eval(self, script: str) -> str:
        self.scripts.append(script)
        if not self.results:
            return ""
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return str(result)


class FakeProvider:
    def __init__(self, engine: FakeEngine | None) -> None:
        self.engine = engine
        self.requested: list[str] = []

    def get_engine(self, name: str) -> FakeEngine | None:
        self.requested.append(name)
        return self.engine


@pytest.fixture
def failing() -> ScriptExecutionError:
    return ScriptExecutionError("execution error: Growl got an error (-1708)")
