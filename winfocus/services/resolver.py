"""
Goal: Turn a query string into a live window handle.

Precedence (first match wins):
  1) "12345"            -> literal handle
  2) "Some title (123)" -> embedded handle, the exact format the completer emits
  3) anything else      -> case-sensitive regex searched in titles, first window wins

Handles from 1) and 2) are only returned if the window still exists. Pattern matches come
straight from live enumeration, so they need no extra check.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern

from loguru import logger

from winfocus.adapters.desktop import WindowEnumerator
from winfocus.errors import MalformedQueryError
from winfocus.models.schemas import NOT_FOUND, ResolutionResult, Strategy

_LITERAL_HANDLE = re.compile(r"[0-9]+")
# Greedy prefix so "Report (2) (77)" yields 77, the last group; the space before "(" is required
_EMBEDDED_HANDLE = re.compile(r".* \((?P<handle>[0-9]+)\)\s*", re.DOTALL)


def compile_query_pattern(pattern: str, strict: bool = False) -> Optional[Pattern[str]]:
    """Compile a user pattern; None (matches nothing) on failure unless strict."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        if strict:
            raise MalformedQueryError(pattern, str(exc)) from exc
        logger.debug("Pattern {!r} does not compile ({}); treating as no match", pattern, exc)
        return None


class QueryResolver:
    def __init__(self, enumerator: WindowEnumerator) -> None:
        self.enumerator = enumerator

    def resolve(self, query: str, strict: bool = False) -> ResolutionResult:
        # An empty regex would match the first arbitrary window, which nobody wants
        if not query:
            return NOT_FOUND

        if _LITERAL_HANDLE.fullmatch(query):
            return self._checked(query, "handle")

        m = _EMBEDDED_HANDLE.fullmatch(query)
        if m:
            return self._checked(m.group("handle"), "embedded")

        return self._by_pattern(query, strict)

    def _checked(self, digits: str, strategy: Strategy) -> ResolutionResult:
        try:
            handle = int(digits)
        except ValueError:
            # int() refuses digit runs past the interpreter limit; no window has such a handle
            return NOT_FOUND
        if not self.enumerator.window_exists(handle):
            logger.debug("Handle {} ({}) is not a live window", handle, strategy)
            return NOT_FOUND
        return ResolutionResult(handle=handle, strategy=strategy)

    def _by_pattern(self, query: str, strict: bool) -> ResolutionResult:
        rx = compile_query_pattern(query, strict=strict)
        if rx is None:
            return NOT_FOUND
        for window in self.enumerator.list_windows():
            if rx.search(window.title):
                logger.debug("Pattern {!r} matched {!r} ({})", query, window.title, window.handle)
                return ResolutionResult(handle=window.handle, strategy="pattern")
        return NOT_FOUND
