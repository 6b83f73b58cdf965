"""Base abstraction for sentence splitter implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ._types import Sentence


class SentenceSplitter(ABC):
    """Abstract interface for sentence splitters.

    Implementations only provide ``spans``; string and ``Sentence`` views
    are derived from it. ``operational`` is the self-check consulted by the
    resolver and must never raise.
    """

    __slots__ = ()

    name: str = "splitter"

    @abstractmethod
    def spans(self, text: str) -> list[tuple[int, int]]:
        """Return ``(start, end)`` offsets of each sentence in ``text``.

        Args:
            text: Raw source text.

        Returns:
            Offsets in source order, trimmed of surrounding whitespace.
        """

    def split(self, text: str) -> list[str]:
        """Split text into sentence strings."""
        return [text[start:end] for start, end in self.spans(text)]

    def segment(self, text: str) -> list[Sentence]:
        """Split text into ``Sentence`` records carrying their offsets."""
        return [
            Sentence(text=text[start:end], start=start, end=end)
            for start, end in self.spans(text)
        ]

    def operational(self) -> bool:
        """Report whether this splitter can actually be used."""
        return True

    def failure_reason(self) -> str | None:
        """Explain why ``operational`` is False, if it is."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(operational={self.operational()})"
