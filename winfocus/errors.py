"""
Goal: The small set of errors WinFocus knows about.

None of these are fatal: enumeration failures become an empty window list and
malformed patterns only surface when a caller asks for strict parsing.
"""


class WinFocusError(Exception):
    """Base class for WinFocus errors."""


class EnumerationError(WinFocusError, RuntimeError):
    """The window manager refused (or was unable) to enumerate windows."""


class MalformedQueryError(WinFocusError, ValueError):
    """A query pattern could not be compiled as a regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason
