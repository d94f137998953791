"""Fluent assembly of AppleScript source text."""

from __future__ import annotations

from typing import Iterable


class ScriptBuilder:
    """Accumulate script text one fragment at a time.

    Quoted values are wrapped in double quotes as-is. Embedded quotes or
    backslashes are not escaped, so callers must not pass untrusted text.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, text: str) -> ScriptBuilder:
        self._parts.append(text)
        return self

    def append_quoted(self, text: str) -> ScriptBuilder:
        self._parts.append(f'"{text}"')
        return self

    def newline(self, text: str) -> ScriptBuilder:
        """Start a new script line with the given text."""
        self._parts.append("\n")
        self._parts.append(text)
        return self

    def append_array(self, items: Iterable[str]) -> ScriptBuilder:
        """Append an AppleScript list literal such as ``{"a", "b"}``."""
        quoted = ", ".join(f'"{item}"' for item in items)
        self._parts.append("{" + quoted + "}")
        return self

    def build(self) -> str:
        return "".join(self._parts)


def script() -> ScriptBuilder:
    """Return a fresh builder."""
    return ScriptBuilder()


__all__ = ["ScriptBuilder", "script"]
