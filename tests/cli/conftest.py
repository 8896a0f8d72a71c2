"""CLI test fixtures."""

import json

from loguru import logger
import pytest
from typer.testing import CliRunner

from libview.config import settings


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Keep log files out of the working tree and log lines out of stdout."""
    monkeypatch.setattr(settings.logging, "log_file", tmp_path / "libview.log")
    monkeypatch.setattr(settings.logging, "console_level", "ERROR")
    yield
    logger.remove()


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


@pytest.fixture
def albums_file(tmp_path, albums):
    """Albums page saved as the API returns it."""
    path = tmp_path / "albums.json"
    path.write_text(
        json.dumps({"items": albums, "total": 50, "offset": 0, "limit": 5}),
        encoding="utf-8",
    )
    return path
