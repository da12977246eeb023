"""
Goal: Rank open windows against a partially typed title for interactive completion.

Each title gets the score of the first rule it satisfies:

    950  equal (case-sensitive)          900  equal (ignoring case)
    850  wildcard match (case-sensitive) 800  wildcard match (ignoring case)
    750  starts with (case-sensitive)    700  starts with (ignoring case)
    650  contains (case-sensitive)       600  contains (ignoring case)

Zero-score titles are dropped; the rest come back best-first, ties by title (ordinal).
Wildcards are shell-style: `*`, `?` and `[...]` against the whole title.
"""

from __future__ import annotations

import re
from fnmatch import fnmatchcase
from typing import Callable, List, Sequence, Tuple

from winfocus.models.schemas import ScoredCandidate, WindowRecord


def _wildcard(title: str, partial: str) -> bool:
    try:
        return fnmatchcase(title, partial)
    except re.error:
        return False


# (score, predicate(title, partial, title_lower, partial_lower)), checked top to bottom
_LADDER: Tuple[Tuple[int, Callable[[str, str, str, str], bool]], ...] = (
    (950, lambda t, p, tl, pl: t == p),
    (900, lambda t, p, tl, pl: tl == pl),
    (850, lambda t, p, tl, pl: _wildcard(t, p)),
    (800, lambda t, p, tl, pl: _wildcard(tl, pl)),
    (750, lambda t, p, tl, pl: t.startswith(p)),
    (700, lambda t, p, tl, pl: tl.startswith(pl)),
    (650, lambda t, p, tl, pl: p in t),
    (600, lambda t, p, tl, pl: pl in tl),
)


def score(title: str, partial: str) -> int:
    """Score one title against the partial input; 0 means not a candidate."""
    if not title:
        return 0
    title_lower, partial_lower = title.lower(), partial.lower()
    for points, matches in _LADDER:
        if matches(title, partial, title_lower, partial_lower):
            return points
    return 0


def rank(partial: str, windows: Sequence[WindowRecord]) -> List[ScoredCandidate]:
    candidates: List[ScoredCandidate] = []
    for w in windows:
        points = score(w.title, partial)
        if points > 0:
            candidates.append(ScoredCandidate(title=w.title, handle=w.handle, score=points))
    candidates.sort(key=lambda c: (-c.score, c.title))
    return candidates
