"""Sentseg: sentence splitter resolution with graceful fallback."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._document import Document
from ._errors import (
    ResolutionError,
    SentsegChecksumError,
    SentsegError,
    SentsegVersionError,
    SplitterNotOperationalError,
)
from ._loader import ENV_MODEL_DIR, load_model, resolve_model_dir, save_model
from ._resolver import ENV_SPLITTER, SplitterResolver, default_resolver, punkt_candidate
from ._sentence import RegexSplitter, split_sentences
from ._splitter import SentenceSplitter
from ._types import (
    ProbeResult,
    ProbeStatus,
    Resolution,
    Sentence,
    SplitterCandidate,
    SplitterKind,
)

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "resolve",
    "Document",
    "ENV_MODEL_DIR",
    "ENV_SPLITTER",
    "ProbeResult",
    "ProbeStatus",
    "PunktSplitter",
    "RegexSplitter",
    "Resolution",
    "ResolutionError",
    "Sentence",
    "SentenceSplitter",
    "SentsegChecksumError",
    "SentsegError",
    "SentsegVersionError",
    "SplitterCandidate",
    "SplitterKind",
    "SplitterNotOperationalError",
    "SplitterResolver",
    "default_resolver",
    "load_model",
    "punkt_candidate",
    "resolve_model_dir",
    "save_model",
    "split_sentences",
]


def resolve(model_dir: Path | str | None = None) -> SentenceSplitter:
    """Resolve and return the best usable sentence splitter.

    Args:
        model_dir: Punkt model directory. If None, uses $SENTSEG_MODEL_DIR
            or the bundled location.
    """
    return default_resolver(model_dir).resolve()


# Deferred import so PunktSplitter is available as sentseg.PunktSplitter
# without making nltk a hard dependency.
def __getattr__(name: str):
    if name == "PunktSplitter":
        from ._punkt import PunktSplitter
        return PunktSplitter
    raise AttributeError(f"module 'sentseg' has no attribute {name!r}")
