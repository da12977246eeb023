"""
Goal: An in-memory window registry standing in for the desktop, so tests never touch real windows.
"""
from typing import List, Sequence, Tuple

import pytest

from winfocus.adapters.desktop import WindowSource
from winfocus.errors import EnumerationError
from winfocus.services.focus_service import FocusService


class FakeWindowSource(WindowSource):
    def __init__(self, windows: Sequence[Tuple[int, str]] = ()) -> None:
        self.windows: List[Tuple[int, str]] = list(windows)
        self.activated: List[int] = []
        self.enumerations = 0
        self.broken = False
        self.refuse_focus = False

    def enumerate(self) -> Sequence[Tuple[int, str]]:
        self.enumerations += 1
        if self.broken:
            raise EnumerationError("access denied")
        return list(self.windows)

    def probe(self, handle: int) -> bool:
        return any(h == handle for h, _ in self.windows)

    def activate(self, handle: int) -> None:
        if self.refuse_focus:
            raise RuntimeError("SetForegroundWindow refused")
        self.activated.append(handle)

    def close(self, handle: int) -> None:
        self.windows = [(h, t) for h, t in self.windows if h != handle]


@pytest.fixture
def desktop() -> FakeWindowSource:
    return FakeWindowSource(
        [
            (111, "Chrome - Tab"),
            (222, "chrome"),
            (333, "Notepad"),
            (444, ""),
        ]
    )


@pytest.fixture
def service(desktop: FakeWindowSource) -> FocusService:
    return FocusService(desktop)
