"""Data structures for sentseg."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ._splitter import SentenceSplitter


@dataclass(slots=True, frozen=True)
class Sentence:
    text: str
    start: int   # offset into the source text
    end: int     # exclusive


class SplitterKind(enum.Enum):
    PREFERRED = "preferred"
    FALLBACK = "fallback"


class ProbeStatus(enum.Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"          # availability gate failed
    NOT_OPERATIONAL = "not_operational"  # operability gate failed


@dataclass(slots=True, frozen=True)
class SplitterCandidate:
    name: str
    modules: tuple[str, ...]
    factory: Callable[[], SentenceSplitter]
    install_hint: str = ""
    asset_hint: str = ""


@dataclass(slots=True, frozen=True)
class ProbeResult:
    candidate: str
    status: ProbeStatus
    splitter: SentenceSplitter | None = None
    reason: str = ""
    remedy: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ProbeStatus.OK


@dataclass(slots=True, frozen=True)
class Resolution:
    splitter: SentenceSplitter
    kind: SplitterKind
    probes: tuple[ProbeResult, ...] = ()
