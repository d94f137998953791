"""Tests for script text assembly."""

from __future__ import annotations

from growlscript.script_builder import ScriptBuilder, script


def test_append_array_formats_list_literals() -> None:
    assert ScriptBuilder().append_array([]).build() == "{}"
    assert ScriptBuilder().append_array(["x"]).build() == '{"x"}'
    assert ScriptBuilder().append_array(["a", "b"]).build() == '{"a", "b"}'


def test_append_array_keeps_order_and_duplicates() -> None:
    text = ScriptBuilder().append_array(["b", "a", "b"]).build()
    assert text == '{"b", "a", "b"}'


def test_append_quoted_wraps_in_double_quotes() -> None:
    text = ScriptBuilder().append_quoted("hello").build()
    assert text == '"hello"'
    assert len(text) == len("hello") + 2


def test_append_quoted_does_not_escape() -> None:
    text = ScriptBuilder().append_quoted('say "hi" \\ bye').build()
    assert text == '"say "hi" \\ bye"'


def test_composition_preserves_order() -> None:
    text = script().append("a").newline("b").append_quoted("c").build()
    assert text == 'a\nb"c"'


def test_script_returns_fresh_builder() -> None:
    first = script().append("one")
    second = script()
    assert first.build() == "one"
    assert second.build() == ""
