"""
Goal: The caller-facing surface of the engine, shared by the CLI and the agent.

- windows()         -> live window list
- resolve(query)    -> ResolutionResult (check .found)
- rank(partial)     -> best-first suggestions; .display strings resolve back to the same handle
- focus(query)      -> resolve, then bring the window to front (best effort)

Every call re-enumerates; the service keeps no window state between calls.
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from winfocus.adapters.desktop import WindowEnumerator, WindowSource
from winfocus.models.schemas import ResolutionResult, ScoredCandidate, WindowRecord
from winfocus.services import ranker
from winfocus.services.resolver import QueryResolver


class FocusService:
    def __init__(self, source: Optional[WindowSource] = None) -> None:
        self.enumerator = WindowEnumerator(source)
        self.resolver = QueryResolver(self.enumerator)

    def windows(self) -> List[WindowRecord]:
        return self.enumerator.list_windows()

    def resolve(self, query: str, strict: bool = False) -> ResolutionResult:
        return self.resolver.resolve(query, strict=strict)

    def rank(self, partial: str, limit: Optional[int] = None) -> List[ScoredCandidate]:
        ranked = ranker.rank(partial, self.enumerator.list_windows())
        return ranked[:limit] if limit and limit > 0 else ranked

    def focus(self, query: str) -> ResolutionResult:
        result = self.resolve(query)
        if not result.found:
            logger.info("No window matches {!r}", query)
            return result
        # resolve() already checked liveness; bring_to_front re-checks right before activating
        self.enumerator.bring_to_front(result.handle)  # type: ignore[arg-type]
        return result
