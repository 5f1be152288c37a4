"""Shared fixtures. Settings are pointed at a scratch directory before any app import."""

import os
import tempfile
from pathlib import Path

import pytest

_SCRATCH = Path(tempfile.mkdtemp(prefix="liftsweep-tests-"))
TRAINING_PATH = _SCRATCH / "training.txt"
DB_PATH = _SCRATCH / "liftsweep.db"

os.environ["LIFTSWEEP_DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["LIFTSWEEP_DATABASE_URL_SYNC"] = f"sqlite:///{DB_PATH}"
os.environ["LIFTSWEEP_TRAINING_DATA_PATH"] = str(TRAINING_PATH)
os.environ["LIFTSWEEP_STORE_CLASSIFICATIONS"] = "true"

from helpers import make_record, repeat  # noqa: E402


@pytest.fixture
def training_file() -> Path:
    TRAINING_PATH.write_text(
        "\n".join([
            make_record(repeat((1.0, 1.0, 1.0)), "lift"),
            make_record(repeat((10.0, 10.0, 10.0)), "sweep"),
            make_record(repeat((5.0, 5.0, 5.0)), "unknown"),
        ]) + "\n",
        encoding="utf-8"
    )
    return TRAINING_PATH


@pytest.fixture
def fresh_db():
    """Empty database file; engines are disposed so no stale connection survives."""
    from liftsweep.database import sync_engine

    sync_engine.dispose()
    if DB_PATH.exists():
        DB_PATH.unlink()
    yield DB_PATH
    sync_engine.dispose()


@pytest.fixture
def client(training_file, fresh_db):
    from fastapi.testclient import TestClient
    from liftsweep.main import app

    with TestClient(app) as c:
        yield c
