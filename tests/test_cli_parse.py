"""
Goal: CLI smoke tests against a fake desktop (help text, exit codes, JSON output).
"""
import json

import pytest
from typer.testing import CliRunner

from winfocus.cli import cli
from winfocus.services.focus_service import FocusService

runner = CliRunner()


@pytest.fixture(autouse=True)
def _fake_service(monkeypatch, desktop):
    monkeypatch.setattr(cli, "_service", lambda: FocusService(desktop))


def test_cli_help():
    r = runner.invoke(cli.app, ["--help"])
    assert r.exit_code == 0
    assert "WinFocus CLI" in r.stdout


def test_windows_lists_json():
    r = runner.invoke(cli.app, ["windows"])
    assert r.exit_code == 0
    assert [w["handle"] for w in json.loads(r.stdout)["windows"]] == [111, 222, 333]


def test_resolve_found():
    r = runner.invoke(cli.app, ["resolve", "Notepad (333)"])
    assert r.exit_code == 0
    assert json.loads(r.stdout) == {"found": True, "handle": 333, "strategy": "embedded"}


def test_resolve_not_found_exit_code():
    r = runner.invoke(cli.app, ["resolve", "Firefox"])
    assert r.exit_code == 1
    assert json.loads(r.stdout)["found"] is False


def test_resolve_strict_bad_pattern():
    r = runner.invoke(cli.app, ["resolve", "--strict", "Fire("])
    assert r.exit_code == 2
    assert "invalid pattern" in json.loads(r.stdout)["error"]


def test_complete_plain():
    r = runner.invoke(cli.app, ["complete", "chrome", "--plain"])
    assert r.exit_code == 0
    assert r.stdout.splitlines() == ["chrome (222)", "Chrome - Tab (111)"]


def test_complete_limit():
    r = runner.invoke(cli.app, ["complete", "", "--limit", "1"])
    assert len(json.loads(r.stdout)["items"]) == 1


def test_focus(desktop):
    r = runner.invoke(cli.app, ["focus", "222"])
    assert r.exit_code == 0
    assert desktop.activated == [222]


def test_complete_rejects_negative_limit():
    r = runner.invoke(cli.app, ["complete", "chrome", "--limit", "-1"])
    assert r.exit_code == 2
