"""Shared fixtures for sentseg tests."""

import pytest

from sentseg import ENV_MODEL_DIR, ENV_SPLITTER, save_model


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep operator overrides in the environment from leaking into tests."""
    monkeypatch.delenv(ENV_MODEL_DIR, raising=False)
    monkeypatch.delenv(ENV_SPLITTER, raising=False)


@pytest.fixture
def punkt_params():
    return {
        "abbrev_types": {"dr", "mr", "prof"},
        "collocations": set(),
        "sent_starters": set(),
        "ortho_context": {},
    }


@pytest.fixture
def model_dir(tmp_path, punkt_params):
    """A valid punkt model directory."""
    return save_model(punkt_params, tmp_path / "punkt")
