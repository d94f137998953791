"""Tests for the command-line interface."""

from __future__ import annotations

import json

import pytest

from growlscript import cli
from growlscript.errors import UserInputError


class RecordingNotifier:
    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.calls: list[tuple] = []

    def initialize(self) -> bool:
        return self.available

    def register_application(self) -> None:
        self.calls.append(("register",))

    def notify(self, name: str, title: str, message: str) -> None:
        self.calls.append(("notify", name, title, message))

    def notify_with_icon(self, name: str, title: str, message: str, icon: str) -> None:
        self.calls.append(("notify_with_icon", name, title, message, icon))


@pytest.fixture
def recorder(monkeypatch) -> dict[str, object]:
    state: dict[str, object] = {"notifier": RecordingNotifier()}

    def fake_build(config):
        state["config"] = config
        return state["notifier"]

    monkeypatch.setattr(cli, "build_notifier", fake_build)
    monkeypatch.setattr(cli, "setup_logging", lambda _config: None)
    monkeypatch.setattr(cli, "DEFAULT_CONFIG_PATH", cli.Path("does-not-exist.json"))
    return state


def test_help_includes_commands() -> None:
    help_text = cli._build_parser().format_help()
    for command in ("status", "register", "notify"):
        assert command in help_text


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli._build_parser().parse_args([])
    assert excinfo.value.code == 2


def test_notify_without_icon(recorder) -> None:
    assert cli.main(["notify", "Info", "Title", "Body"]) == 0
    assert recorder["notifier"].calls == [("notify", "Info", "Title", "Body")]


def test_notify_with_icon(recorder) -> None:
    assert cli.main(["notify", "Info", "Title", "Body", "--icon", "/tmp/i.png"]) == 0
    assert recorder["notifier"].calls == [
        ("notify_with_icon", "Info", "Title", "Body", "/tmp/i.png")
    ]


def test_register_uses_app_name_override(recorder) -> None:
    assert cli.main(["register", "--app-name", "MyApp"]) == 0
    assert recorder["notifier"].calls == [("register",)]
    assert recorder["config"]["application"]["name"] == "MyApp"


def test_status_reports_availability(recorder, capsys) -> None:
    assert cli.main(["status"]) == 0
    assert "Growl is running." in capsys.readouterr().out

    recorder["notifier"] = RecordingNotifier(available=False)
    assert cli.main(["status"]) == 1
    assert "Growl is not available." in capsys.readouterr().out


def test_notify_fails_when_growl_unavailable(recorder, capsys) -> None:
    recorder["notifier"] = RecordingNotifier(available=False)
    assert cli.main(["notify", "Info", "t", "m"]) == 1
    assert "Runtime error: Growl is not available." in capsys.readouterr().err


def test_config_after_subcommand(recorder, tmp_path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"application": {"name": "FromFile"}}), encoding="utf-8")

    assert cli.main(["register", f"--config={config_path}"]) == 0
    assert recorder["config"]["application"]["name"] == "FromFile"


def test_missing_explicit_config_is_an_error(recorder, tmp_path, capsys) -> None:
    assert cli.main(["--config", str(tmp_path / "nope.json"), "status"]) == 1
    assert "Config error" in capsys.readouterr().err


def test_extract_config_arg_rejects_missing_value() -> None:
    with pytest.raises(UserInputError, match="Missing value"):
        cli._extract_config_arg(["--config"])


def test_extract_config_arg_defaults_to_none() -> None:
    assert cli._extract_config_arg(["status"]) == (["status"], None)


def test_extract_config_arg_stops_at_double_dash() -> None:
    cleaned, config_path = cli._extract_config_arg(
        ["--config", "a.json", "notify", "Info", "Title", "--", "--config"]
    )
    assert config_path == "a.json"
    assert cleaned == ["notify", "Info", "Title", "--", "--config"]
