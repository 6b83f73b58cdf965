"""Document: an ordered, named batch of sentences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ._splitter import SentenceSplitter


class Document:
    """Sentences in discourse order under one identifier.

    Meant for post-processing steps that need several sentences at a
    time. The backing list exists from construction, so appending to a
    fresh document is always valid. Not thread-safe: use one appender per
    document or lock externally.
    """

    __slots__ = ("_id", "_sentences")

    def __init__(self, id: str | None = None) -> None:
        self._id = id
        self._sentences: list[Any] = []

    @classmethod
    def from_text(
        cls, text: str, splitter: SentenceSplitter, id: str | None = None
    ) -> Document:
        """Segment ``text`` with ``splitter`` into a new document."""
        doc = cls(id)
        doc.extend(splitter.segment(text))
        return doc

    @property
    def id(self) -> str | None:
        return self._id

    @id.setter
    def id(self, value: str | None) -> None:
        self._id = value

    @property
    def sentences(self) -> tuple[Any, ...]:
        """Snapshot of the sentences in insertion order."""
        return tuple(self._sentences)

    def add_sentence(self, sentence: Any) -> None:
        self._sentences.append(sentence)

    def extend(self, sentences: Iterable[Any]) -> None:
        self._sentences.extend(sentences)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._sentences)

    def __len__(self) -> int:
        return len(self._sentences)

    def __repr__(self) -> str:
        return f"Document(id={self._id!r}, n_sentences={len(self._sentences)})"
