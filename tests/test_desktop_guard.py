"""
Goal: The enumerator never lets OS trouble escape, and the live backend stays importable off Windows.
"""

import pytest

from winfocus.adapters import desktop as desktop_mod
from winfocus.adapters.desktop import DesktopWindowSource, WindowEnumerator
from winfocus.errors import EnumerationError


def test_untitled_windows_are_skipped(desktop):
    titles = [w.title for w in WindowEnumerator(desktop).list_windows()]
    assert titles == ["Chrome - Tab", "chrome", "Notepad"]


def test_enumeration_failure_degrades_to_empty(desktop):
    desktop.broken = True
    assert WindowEnumerator(desktop).list_windows() == []


def test_window_exists_tracks_live_set(desktop):
    enum = WindowEnumerator(desktop)
    assert enum.window_exists(333)
    desktop.close(333)
    assert not enum.window_exists(333)


def test_bring_to_front_skips_dead_windows(desktop):
    enum = WindowEnumerator(desktop)
    enum.bring_to_front(999)
    assert desktop.activated == []


def test_bring_to_front_swallows_refusal(desktop):
    desktop.refuse_focus = True
    WindowEnumerator(desktop).bring_to_front(111)
    assert desktop.activated == []


def test_missing_backend_reports_enumeration_error(monkeypatch):
    monkeypatch.setattr(desktop_mod, "_findwindows", None)
    monkeypatch.setattr(desktop_mod, "_win32gui", None)
    src = DesktopWindowSource()
    with pytest.raises(EnumerationError):
        src.enumerate()
    assert src.probe(123) is False
    assert WindowEnumerator(src).list_windows() == []


def test_import_pywinauto():
    try:
        import pywinauto.findwindows  # noqa: F401
    except Exception:
        pytest.skip("pywinauto not available in this environment")
    assert desktop_mod._findwindows is not None
