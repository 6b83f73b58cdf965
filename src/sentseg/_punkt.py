"""NLTK Punkt splitter backed by a checksummed model directory."""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Any

from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer, PunktTrainer

from ._errors import SentsegError, SplitterNotOperationalError
from ._loader import load_model, resolve_model_dir, save_model
from ._splitter import SentenceSplitter

logger = logging.getLogger(__name__)


def _to_parameters(params: dict[str, Any]) -> PunktParameters:
    punkt = PunktParameters()
    punkt.abbrev_types = set(params["abbrev_types"])
    punkt.collocations = set(params["collocations"])
    punkt.sent_starters = set(params["sent_starters"])
    punkt.ortho_context = defaultdict(int, params["ortho_context"])
    return punkt


def _from_parameters(punkt: PunktParameters) -> dict[str, Any]:
    return {
        "abbrev_types": set(punkt.abbrev_types),
        "collocations": set(punkt.collocations),
        "sent_starters": set(punkt.sent_starters),
        "ortho_context": dict(punkt.ortho_context),
    }


class PunktSplitter(SentenceSplitter):
    """Statistical splitter using pre-trained Punkt parameters.

    A missing or invalid model does not raise here; the error is kept and
    ``operational`` reports False so a resolver can fall back.
    """

    __slots__ = ("_model_dir", "_tokenizer", "_load_error")

    name = "punkt"

    def __init__(self, model_dir: Path | str | None = None) -> None:
        self._model_dir = resolve_model_dir(model_dir)
        self._tokenizer: PunktSentenceTokenizer | None = None
        self._load_error: str | None = None
        try:
            params = load_model(self._model_dir)
        except (SentsegError, OSError) as exc:
            self._load_error = str(exc)
            logger.debug("Punkt model unusable: %s", exc)
        else:
            self._tokenizer = PunktSentenceTokenizer(_to_parameters(params))

    @property
    def model_dir(self) -> Path:
        return self._model_dir

    def operational(self) -> bool:
        return self._tokenizer is not None

    def failure_reason(self) -> str | None:
        return self._load_error

    def spans(self, text: str) -> list[tuple[int, int]]:
        if self._tokenizer is None:
            raise SplitterNotOperationalError(
                f"Punkt model not loaded from {self._model_dir}: {self._load_error}"
            )
        return list(self._tokenizer.span_tokenize(text))


def train_model(text: str, model_dir: Path | str) -> Path:
    """Train Punkt parameters on raw text and save them as a model directory."""
    trainer = PunktTrainer()
    trainer.train(text, finalize=True)
    return save_model(_from_parameters(trainer.get_params()), model_dir)
