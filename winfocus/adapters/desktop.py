"""
Goal: Enumerate top-level windows, probe whether a handle is still alive, and bring a window to front.

- WindowSource is the raw OS capability (enumerate / probe / activate). DesktopWindowSource backs it
  with pywinauto + pywin32; tests hand in an in-memory registry instead.
- WindowEnumerator is what the rest of the app talks to: it hides the callback-driven enumeration,
  drops untitled windows and never lets an OS failure escape (empty list / False / logged warning).
- Nothing is cached: every call asks the window manager again.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, List, Optional, Sequence, Tuple

from loguru import logger

from winfocus.errors import EnumerationError
from winfocus.models.schemas import WindowRecord
from winfocus.settings import VISIBLE_ONLY

# Runtime imports of the Windows-only backend, typed as Any so the module imports everywhere
_findwindows: Any
_hwndwrapper: Any
_win32gui: Any
try:
    _findwindows = import_module("pywinauto.findwindows")
    _hwndwrapper = import_module("pywinauto.controls.hwndwrapper")
    _win32gui = import_module("win32gui")
except Exception:
    _findwindows = _hwndwrapper = _win32gui = None


class WindowSource:
    """The OS touchpoints the engine needs. Subclass to plug in another window manager."""

    def enumerate(self) -> Sequence[Tuple[int, str]]:
        """Return (handle, title) for every top-level window, in enumeration order."""
        raise NotImplementedError

    def probe(self, handle: int) -> bool:
        """Return True if the handle still refers to a live window."""
        raise NotImplementedError

    def activate(self, handle: int) -> None:
        """Restore the window if minimized and ask for foreground focus."""
        raise NotImplementedError


class DesktopWindowSource(WindowSource):
    """Win32 window manager via pywinauto (enumeration, focus) and win32gui (geometry probe)."""

    def __init__(self, visible_only: bool = VISIBLE_ONLY) -> None:
        self.visible_only = visible_only

    def enumerate(self) -> Sequence[Tuple[int, str]]:
        if _findwindows is None:
            raise EnumerationError("pywinauto is not available; install it and run on Windows.")
        try:
            # find_elements drives EnumWindows internally and reads each full title
            elements = _findwindows.find_elements(
                top_level_only=True,
                visible_only=self.visible_only,
                backend="win32",
            )
        except Exception as exc:
            raise EnumerationError(f"window enumeration failed: {exc}") from exc
        return [(int(e.handle), e.name or "") for e in elements]

    def probe(self, handle: int) -> bool:
        if _win32gui is None:
            return False
        try:
            _win32gui.GetWindowRect(handle)
        except Exception:
            return False
        return True

    def activate(self, handle: int) -> None:
        if _hwndwrapper is None:
            raise RuntimeError("pywinauto_not_installed")
        window = _hwndwrapper.HwndWrapper(handle)
        if window.is_minimized():
            window.restore()
        window.set_focus()


class WindowEnumerator:
    """Snapshot-style access to the live window set."""

    def __init__(self, source: Optional[WindowSource] = None) -> None:
        self.source = source if source is not None else DesktopWindowSource()

    def list_windows(self) -> List[WindowRecord]:
        try:
            raw = self.source.enumerate()
        except EnumerationError as exc:
            logger.warning("Window enumeration unavailable: {}", exc)
            return []
        except Exception:  # noqa: BLE001
            logger.exception("Window enumeration crashed; treating desktop as empty")
            return []
        # Untitled windows never match a pattern or rank, so skip them
        return [WindowRecord(title=title, handle=handle) for handle, title in raw if title]

    def window_exists(self, handle: int) -> bool:
        try:
            return bool(self.source.probe(handle))
        except Exception:  # noqa: BLE001
            logger.debug("Probe failed for handle {}", handle)
            return False

    def bring_to_front(self, handle: int) -> None:
        """Best effort: the OS may refuse focus stealing, so callers must not assume success."""
        if not self.window_exists(handle):
            logger.warning("Not activating {}: window no longer exists", handle)
            return
        try:
            self.source.activate(handle)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Foreground request for {} refused: {}", handle, exc)
            return
        logger.info("Requested foreground for window {}", handle)
