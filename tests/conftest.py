"""Pytest configuration for the receipt bridge tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from receipt_bridge.config import Settings  # noqa: E402
from receipt_bridge.main import create_app  # noqa: E402


@pytest.fixture()
def device_file(tmp_path: Path) -> Path:
    """Stand-in for the printer port: an existing, writable file."""
    path = tmp_path / "lp0"
    path.write_bytes(b"")
    return path


@pytest.fixture()
def settings(device_file: Path) -> Settings:
    return Settings(
        _env_file=None,
        device_paths=[str(device_file)],
        write_timeout=2.0,
        log_level="DEBUG",
    )


@pytest.fixture()
def client(settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(settings=settings)
    with TestClient(app) as test_client:
        yield test_client
