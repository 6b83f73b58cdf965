"""Punkt model storage: manifest validation, SHA-256 checksums, msgpack."""

from __future__ import annotations

import hashlib
import json
import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any

import msgpack

from ._errors import SentsegChecksumError, SentsegError, SentsegVersionError

logger = logging.getLogger(__name__)

ENV_MODEL_DIR = "SENTSEG_MODEL_DIR"

_EXPECTED_VERSION = "1.0"

_MANIFEST_FILE = "manifest.json"
_MODEL_FILE = "punkt.bin"

_PARAM_KEYS = ("abbrev_types", "collocations", "sent_starters", "ortho_context")


def _default_model_dir() -> Path:
    return Path(str(resources.files("sentseg") / "data" / "punkt"))


def resolve_model_dir(model_dir: Path | str | None = None) -> Path:
    """Explicit argument, then $SENTSEG_MODEL_DIR, then the bundled location."""
    if model_dir is not None:
        return Path(model_dir)
    env_dir = os.environ.get(ENV_MODEL_DIR)
    if env_dir:
        return Path(env_dir)
    return _default_model_dir()


def _file_digest(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as f:
        while chunk := f.read(1 << 16):
            digest.update(chunk)
    return digest.hexdigest()


def _load_manifest(model_dir: Path) -> dict[str, str]:
    """Read the manifest, check its version, and return the checksum map."""
    path = model_dir / _MANIFEST_FILE
    if not path.is_file():
        raise SentsegError(f"{_MANIFEST_FILE} not found in {model_dir}")
    try:
        manifest = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SentsegError(f"Malformed {_MANIFEST_FILE} in {model_dir}: {exc}") from exc

    if not isinstance(manifest, dict):
        raise SentsegError(f"{_MANIFEST_FILE} must contain an object at top level")
    if manifest.get("version") != _EXPECTED_VERSION:
        raise SentsegVersionError(
            f"Expected model version {_EXPECTED_VERSION!r}, "
            f"got {manifest.get('version')!r}"
        )
    files = manifest.get("files", {})
    if not isinstance(files, dict):
        raise SentsegError(f"'files' in {_MANIFEST_FILE} must be an object")
    return files


def _verify_checksum(model_dir: Path, filename: str, checksums: dict[str, Any]) -> Path:
    path = model_dir / filename
    if not path.is_file():
        raise SentsegError(f"Missing model file: {path}")
    expected = checksums.get(filename)
    if expected is None:
        raise SentsegError(f"No checksum in manifest for {filename}")
    if not isinstance(expected, str):
        raise SentsegError(f"Checksum for {filename} must be a string")
    actual = _file_digest(path)
    if actual != expected:
        raise SentsegChecksumError(
            f"Checksum mismatch for {filename}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )
    return path


def _str_set(raw: dict[str, Any], key: str) -> set[str]:
    values = raw[key]
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise SentsegError(f"{_MODEL_FILE}: {key!r} must be a list of strings")
    return set(values)


def _collocations(raw: dict[str, Any]) -> set[tuple[str, str]]:
    pairs = raw["collocations"]
    if not isinstance(pairs, list) or not all(
        isinstance(p, list) and len(p) == 2 and all(isinstance(w, str) for w in p)
        for p in pairs
    ):
        raise SentsegError(f"{_MODEL_FILE}: 'collocations' must be a list of word pairs")
    return {(first, second) for first, second in pairs}


def _ortho_context(raw: dict[str, Any]) -> dict[str, int]:
    context = raw["ortho_context"]
    if not isinstance(context, dict) or not all(
        isinstance(k, str) and isinstance(v, int) and not isinstance(v, bool)
        for k, v in context.items()
    ):
        raise SentsegError(f"{_MODEL_FILE}: 'ortho_context' must map strings to ints")
    return dict(context)


def load_model(model_dir: Path | str | None = None) -> dict[str, Any]:
    """Load and validate a Punkt model directory.

    Returns a dict with ``abbrev_types``, ``sent_starters`` (sets of str),
    ``collocations`` (set of str pairs) and ``ortho_context`` (str -> int).

    Raises:
        SentsegError: For any missing, unreadable or malformed model content.
    """
    model_dir = resolve_model_dir(model_dir)

    checksums = _load_manifest(model_dir)
    model_path = _verify_checksum(model_dir, _MODEL_FILE, checksums)

    try:
        raw = msgpack.unpackb(model_path.read_bytes(), raw=False)
    except (ValueError, msgpack.UnpackException) as exc:
        raise SentsegError(f"Corrupt model file {_MODEL_FILE}: {exc}") from exc

    if not isinstance(raw, dict):
        raise SentsegError(f"{_MODEL_FILE} must contain a map at top level")
    missing = [key for key in _PARAM_KEYS if key not in raw]
    if missing:
        raise SentsegError(f"{_MODEL_FILE} is missing keys: {', '.join(missing)}")

    params = {
        "abbrev_types": _str_set(raw, "abbrev_types"),
        "collocations": _collocations(raw),
        "sent_starters": _str_set(raw, "sent_starters"),
        "ortho_context": _ortho_context(raw),
    }
    logger.debug("Loaded punkt model from %s", model_dir)
    return params


def save_model(params: dict[str, Any], model_dir: Path | str) -> Path:
    """Write Punkt parameters and a matching manifest into ``model_dir``."""
    model_dir = Path(model_dir)
    model_dir.mkdir(parents=True, exist_ok=True)

    payload = {
        "abbrev_types": sorted(params.get("abbrev_types", ())),
        "collocations": sorted(list(pair) for pair in params.get("collocations", ())),
        "sent_starters": sorted(params.get("sent_starters", ())),
        "ortho_context": dict(params.get("ortho_context", {})),
    }
    model_path = model_dir / _MODEL_FILE
    model_path.write_bytes(msgpack.packb(payload, use_bin_type=True))

    manifest = {
        "version": _EXPECTED_VERSION,
        "files": {_MODEL_FILE: _file_digest(model_path)},
    }
    (model_dir / _MANIFEST_FILE).write_text(
        json.dumps(manifest, indent=2), encoding="utf-8"
    )

    logger.debug("Saved punkt model to %s", model_dir)
    return model_dir
