# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from vtodo.config import Settings

WORDS = ["apple", "badger", "candle", "dune", "ember", "fjord", "grape", "harbor"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's own settings out of the tests and reset logging afterwards."""
    for name in (
        "VTODO_DIR",
        "VTODO_DATA_FILE",
        "VTODO_WORDS_FILE",
        "VTODO_NAME_ATTEMPTS",
        "VTODO_LOG_LEVEL",
        "VTODO_LOG_FILE",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    # Drop the handlers setup_logging() installed; pytest's own are subclasses.
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def now() -> datetime:
    """A fixed, timezone-aware 'now' (Wednesday 15 April 2026, 10:20:30 at UTC+2)."""
    return datetime(2026, 4, 15, 10, 20, 30, 123456, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    d = tmp_path / "todo.d"
    d.mkdir()
    (d / "nouns.txt").write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return d


@pytest.fixture()
def settings(data_dir: Path) -> Settings:
    return Settings(data_dir=data_dir, color=False)
