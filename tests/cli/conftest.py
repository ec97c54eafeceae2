"""CLI test fixtures."""

import json

from loguru import logger
import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop sinks bound to the runner's captured streams."""
    yield
    logger.remove()


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps({
            "results": [
                {"id": "1", "name": "Flowers", "artist": "Miley Cyrus", "album": "Endless", "popularity": 93},
                {"id": "2", "name": "Levitating", "artist": "Dua Lipa", "album": "Nostalgia"},
                {"id": "3", "name": "Wildflowers", "artist": "Tom Petty", "album": "Wild"},
            ]
        }),
        encoding="utf-8",
    )
    return path
