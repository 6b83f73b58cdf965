"""Lightweight regex-based sentence splitter, the always-available fallback."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

import ahocorasick

from ._splitter import SentenceSplitter

# Sentence-ending punctuation (plus closing quotes/brackets) followed by
# whitespace and a capital letter, optionally behind an opening quote.
_BOUNDARY_RE = re.compile(
    r"[.!?]+[\"')\]]*"
    r"(?=\s+[\"'(\[]?[A-Z])"
)

ABBREVIATIONS: frozenset[str] = frozenset({
    "mr", "mrs", "ms", "dr", "st", "jr", "sr", "prof", "gen", "sgt",
    "cpl", "pvt", "rev", "capt", "col", "lt", "gov", "sen", "rep",
    "inc", "ltd", "corp", "co", "vs", "etc", "no", "vol", "fig",
    "approx", "dept", "est", "e.g", "i.e", "u.s", "a.m", "p.m",
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept",
    "oct", "nov", "dec",
})


def _normalize(abbrev: str) -> str:
    return abbrev.strip().lower().rstrip(".")


def _append_trimmed(
    spans: list[tuple[int, int]], text: str, start: int, end: int
) -> None:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    if start < end:
        spans.append((start, end))


class RegexSplitter(SentenceSplitter):
    """Punctuation/capitalization heuristics with an abbreviation guard.

    A lone period is not a boundary when it closes a known abbreviation or
    a single-letter initial. Abbreviations are found in one Aho-Corasick
    pass over the lower-cased text.
    """

    __slots__ = ("_abbreviations", "_abbrev_ac")

    name = "regex"

    def __init__(self, abbreviations: Iterable[str] | None = None) -> None:
        words = set(ABBREVIATIONS)
        if abbreviations is not None:
            words.update(_normalize(a) for a in abbreviations)
        words.discard("")
        self._abbreviations = frozenset(words)

        ac = ahocorasick.Automaton()
        for word in self._abbreviations:
            ac.add_word(word, len(word))
        ac.make_automaton()
        self._abbrev_ac = ac

    @property
    def abbreviations(self) -> frozenset[str]:
        return self._abbreviations

    def _abbreviation_ends(self, text_lower: str) -> set[int]:
        """Indices of the last character of every word-initial abbreviation."""
        ends: set[int] = set()
        for end_inclusive, length in self._abbrev_ac.iter(text_lower):
            start = end_inclusive - length + 1
            if start == 0 or not text_lower[start - 1].isalnum():
                ends.add(end_inclusive)
        return ends

    @staticmethod
    def _is_initial(text: str, dot: int) -> bool:
        return (
            dot >= 1
            and text[dot - 1].isupper()
            and (dot == 1 or not text[dot - 2].isalpha())
        )

    def spans(self, text: str) -> list[tuple[int, int]]:
        abbrev_ends: set[int] | None = None
        spans: list[tuple[int, int]] = []
        start = 0
        for m in _BOUNDARY_RE.finditer(text):
            dot = m.start()
            lone_period = text[dot] == "." and text[dot + 1] not in ".!?"
            if lone_period:
                if abbrev_ends is None:
                    abbrev_ends = self._abbreviation_ends(text.lower())
                if dot - 1 in abbrev_ends or self._is_initial(text, dot):
                    continue
            _append_trimmed(spans, text, start, m.end())
            start = m.end()
        _append_trimmed(spans, text, start, len(text))
        return spans


@lru_cache(maxsize=1)
def _default_splitter() -> RegexSplitter:
    return RegexSplitter()


def split_sentences(text: str) -> list[str]:
    """Split text into sentences using regex heuristics."""
    return _default_splitter().split(text)
