"""Pytest configuration.

Every test gets its own data directory (via ``BOEKHOUDING_DATA_DIR``) and
freshly built settings and repositories, so no test sees another test's
ledger or sheets.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from boekhouding.config import get_settings
from boekhouding.services.ledger import TransactionRepository, get_ledger
from boekhouding.services.sheets import SheetRepository, get_sheets
from main import app


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_ledger.cache_clear()
    get_sheets.cache_clear()


@pytest.fixture(autouse=True)
def _isolate_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    data_dir = tmp_path / "data"
    monkeypatch.setenv("BOEKHOUDING_DATA_DIR", os.fspath(data_dir))
    monkeypatch.delenv("BOEKHOUDING_STRICT_WRITES", raising=False)
    monkeypatch.delenv("BOEKHOUDING_MAX_BODY_BYTES", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    _clear_caches()
    yield data_dir
    app.dependency_overrides.clear()
    _clear_caches()


@pytest.fixture
def data_dir(_isolate_data_dir: Path) -> Path:
    return _isolate_data_dir


@pytest.fixture
def ledger(data_dir: Path) -> TransactionRepository:
    repo = TransactionRepository(data_dir / "transactions.json")
    repo.init_storage()
    return repo


@pytest.fixture
def sheets(data_dir: Path) -> SheetRepository:
    return SheetRepository(data_dir / "sheets")


@pytest.fixture
def client() -> TestClient:
    # No context manager: the lifespan (logging setup, storage init) stays out
    # of the way, repositories create their files on first write.
    return TestClient(app)
