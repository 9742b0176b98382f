"""Shared fixtures: keep every test away from the real application-data directory."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from rekompenco.core.logging import ROOT_LOGGER
from rekompenco.core.store import reset_default_store


@pytest.fixture(autouse=True)
def isolated_app_data(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    data_home = tmp_path / "app-data"
    monkeypatch.setenv("XDG_DATA_HOME", str(data_home))
    monkeypatch.setenv("APPDATA", str(data_home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    for var in ("REKOMPENCO_CONFIG", "REKOMPENCO_STORE_PATH", "REKOMPENCO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_default_store()
    yield data_home
    reset_default_store()


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo configure_logging() so caplog keeps seeing rekompenco records."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
