"""Splitter resolution: availability and operability gates with fallback."""

from __future__ import annotations

import importlib.util
import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path
from threading import Lock

from ._errors import ResolutionError
from ._loader import ENV_MODEL_DIR, resolve_model_dir
from ._sentence import RegexSplitter
from ._splitter import SentenceSplitter
from ._types import (
    ProbeResult,
    ProbeStatus,
    Resolution,
    SplitterCandidate,
    SplitterKind,
)

logger = logging.getLogger(__name__)

ENV_SPLITTER = "SENTSEG_SPLITTER"

_MODES = ("auto", "regex")


def _module_present(module: str) -> bool:
    try:
        return importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        # Parent package missing, or a module with a bogus __spec__.
        return False


def _failure_reason(splitter: SentenceSplitter) -> str:
    """``failure_reason()`` of a splitter that failed its self-check. Never raises."""
    try:
        return splitter.failure_reason() or "self-check failed"
    except Exception as exc:
        return f"self-check failed ({type(exc).__name__}: {exc})"


class SplitterResolver:
    """Hand out the best usable sentence splitter.

    Candidates are tried in order. Each must pass the availability gate
    (its modules can be found) and then the operability gate (it builds
    and reports ``operational()``). The first candidate passing both is
    used; otherwise the fallback is built. Probe failures are logged and
    never raised. Only a broken fallback raises ``ResolutionError``.
    """

    def __init__(
        self,
        candidates: Sequence[SplitterCandidate] = (),
        fallback: Callable[[], SentenceSplitter] = RegexSplitter,
    ) -> None:
        self._candidates = tuple(candidates)
        self._fallback = fallback
        self._lock = Lock()
        self._resolution: Resolution | None = None

    @property
    def candidates(self) -> tuple[SplitterCandidate, ...]:
        return self._candidates

    @property
    def resolution(self) -> Resolution | None:
        """Outcome of the most recent ``resolve()`` call."""
        return self._resolution

    @property
    def kind(self) -> SplitterKind | None:
        return None if self._resolution is None else self._resolution.kind

    def probe(self, candidate: SplitterCandidate) -> ProbeResult:
        """Run both gates for one candidate. Never raises."""
        missing = [m for m in candidate.modules if not _module_present(m)]
        if missing:
            return ProbeResult(
                candidate=candidate.name,
                status=ProbeStatus.UNAVAILABLE,
                reason=f"required module(s) not installed: {', '.join(missing)}",
                remedy=candidate.install_hint,
            )

        try:
            splitter = candidate.factory()
            operational = splitter.operational()
        except Exception as exc:
            return ProbeResult(
                candidate=candidate.name,
                status=ProbeStatus.NOT_OPERATIONAL,
                reason=f"{type(exc).__name__}: {exc}",
                remedy=candidate.asset_hint,
            )
        if not operational:
            return ProbeResult(
                candidate=candidate.name,
                status=ProbeStatus.NOT_OPERATIONAL,
                reason=_failure_reason(splitter),
                remedy=candidate.asset_hint,
            )

        return ProbeResult(
            candidate=candidate.name, status=ProbeStatus.OK, splitter=splitter,
        )

    def _warn(self, result: ProbeResult) -> None:
        gate = (
            "not installed"
            if result.status is ProbeStatus.UNAVAILABLE
            else "not working"
        )
        message = (
            "Sentence splitter %r is %s (%s). "
            "Falling back to a less accurate splitter."
        )
        args: tuple = (result.candidate, gate, result.reason)
        if result.remedy:
            message += " %s"
            args += (result.remedy,)
        logger.warning(message, *args)

    def _build_fallback(self) -> SentenceSplitter:
        try:
            splitter = self._fallback()
            operational = splitter.operational()
        except Exception as exc:
            logger.error("Fallback sentence splitter failed to build: %s", exc)
            raise ResolutionError(
                f"Fallback sentence splitter could not be built: {exc}"
            ) from exc
        if not operational:
            raise ResolutionError(
                f"Fallback sentence splitter {splitter.name!r} is not operational: "
                f"{_failure_reason(splitter)}"
            )
        return splitter

    def resolve(self) -> SentenceSplitter:
        """Probe every candidate afresh and return the splitter to use.

        Raises:
            ResolutionError: If the fallback cannot be built or is not operational.
        """
        with self._lock:
            probes: list[ProbeResult] = []
            for candidate in self._candidates:
                result = self.probe(candidate)
                probes.append(result)
                if result.ok:
                    self._resolution = Resolution(
                        splitter=result.splitter,
                        kind=SplitterKind.PREFERRED,
                        probes=tuple(probes),
                    )
                    logger.info("Using sentence splitter %r", candidate.name)
                    return result.splitter
                self._warn(result)

            splitter = self._build_fallback()
            self._resolution = Resolution(
                splitter=splitter, kind=SplitterKind.FALLBACK, probes=tuple(probes),
            )
            logger.info("Using fallback sentence splitter %r", splitter.name)
            return splitter


def punkt_candidate(model_dir: Path | str | None = None) -> SplitterCandidate:
    """Candidate for the NLTK Punkt splitter reading ``model_dir``."""
    location = resolve_model_dir(model_dir)

    def factory() -> SentenceSplitter:
        from ._punkt import PunktSplitter

        return PunktSplitter(location)

    return SplitterCandidate(
        name="punkt",
        modules=("nltk",),
        factory=factory,
        install_hint="Install it with: pip install 'sentseg[punkt]'",
        asset_hint=(
            f"Make sure a punkt model (manifest.json, punkt.bin) is installed in "
            f"{location}, or point {ENV_MODEL_DIR} at an alternate model directory."
        ),
    )


def default_resolver(
    model_dir: Path | str | None = None, mode: str | None = None
) -> SplitterResolver:
    """Build the standard resolver: Punkt preferred, regex fallback.

    Args:
        model_dir: Punkt model directory. Defaults per ``resolve_model_dir``.
        mode: ``"auto"`` or ``"regex"``. Defaults to $SENTSEG_SPLITTER, then
            ``"auto"``. ``"regex"`` skips the preferred splitter entirely.

    Raises:
        ValueError: If mode is not recognized.
    """
    mode_raw = mode if mode is not None else os.environ.get(ENV_SPLITTER, "auto")
    normalized = mode_raw.strip().lower() or "auto"
    if normalized not in _MODES:
        raise ValueError(
            f"Unsupported splitter mode: {mode_raw!r}. "
            f"Supported modes: {', '.join(_MODES)}"
        )

    if normalized == "regex":
        logger.info("Preferred sentence splitters disabled (mode=regex)")
        return SplitterResolver()
    return SplitterResolver([punkt_candidate(model_dir)])
