"""
Goal: Scoring ladder, ordering and the display format the resolver parses back.
"""

import pytest

from winfocus.models.schemas import ScoredCandidate, WindowRecord
from winfocus.services.ranker import rank, score


def _w(*pairs):
    return [WindowRecord(title=t, handle=h) for h, t in pairs]


@pytest.mark.parametrize(
    "title,partial,expected",
    [
        ("Notepad", "Notepad", 950),
        ("notepad", "Notepad", 900),
        ("Notepad", "N*d", 850),
        ("Notepad", "n?TEPAD", 800),
        ("Notepad - x.txt", "Note", 750),
        ("Notepad - x.txt", "note", 700),
        ("My Notepad", "Note", 650),
        ("My Notepad", "NOTE", 600),
        ("Notepad", "Word", 0),
        ("", "", 0),
    ],
)
def test_score_ladder(title, partial, expected):
    assert score(title, partial) == expected


def test_bad_wildcard_does_not_raise():
    assert score("Notepad [1]", "[") == 650


def test_example_ordering():
    windows = _w((111, "Chrome - Tab"), (222, "chrome"), (333, "Notepad"))
    got = [(c.handle, c.score) for c in rank("chrome", windows)]
    # "Chrome - Tab" starts with "chrome" ignoring case
    assert got == [(222, 950), (111, 700)]


def test_exact_outranks_substring():
    windows = _w((1, "xx Code xx"), (2, "Code"))
    assert rank("Code", windows)[0].handle == 2


def test_ties_by_title_ordinal():
    windows = _w((1, "max"), (2, "box"), (3, "Box"))
    ranked = rank("x", windows)
    assert {c.score for c in ranked} == {650}
    assert [c.title for c in ranked] == ["Box", "box", "max"]


def test_empty_windows():
    assert rank("anything", []) == []


def test_empty_partial_lists_all_sorted():
    windows = _w((1, "b"), (2, "a"), (3, ""))
    assert [(c.title, c.score) for c in rank("", windows)] == [("a", 750), ("b", 750)]


def test_display_doubles_quotes():
    c = ScoredCandidate(title="It's Bob's", handle=42, score=600)
    assert c.display == "It''s Bob''s (42)"
