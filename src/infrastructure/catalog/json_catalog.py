"""JSON catalog loader for offline and demo-mode search."""

import json
from pathlib import Path
from typing import Any

from src.config import get_logger
from src.domain.entities import CatalogTrack

logger = get_logger(__name__)


class CatalogLoadError(Exception):
    """Raised when a catalog file cannot be read or decoded."""


def _extract_records(data: Any) -> list[Any]:
    # Either a bare list or the proxy's {"results": [...]} envelope
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("results"), list):
        return data["results"]
    raise CatalogLoadError(
        "Catalog must be a list of tracks or an object with a 'results' list"
    )


def parse_catalog(data: Any) -> list[CatalogTrack]:
    """Convert decoded JSON into tracks, skipping entries that are not objects."""
    tracks = []
    for index, item in enumerate(_extract_records(data)):
        if not isinstance(item, dict):
            logger.warning(f"Skipping catalog entry {index}: not an object")
            continue
        tracks.append(CatalogTrack.from_mapping(item))
    return tracks


def load_catalog(file_path: Path) -> list[CatalogTrack]:
    """Load a catalog snapshot from a JSON file."""
    logger.info(f"Loading catalog file: {file_path}")

    try:
        with Path(file_path).open(encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog {file_path}: {e}") from e
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogLoadError(f"Invalid JSON in catalog {file_path}: {e}") from e

    tracks = parse_catalog(data)
    logger.info(f"Loaded {len(tracks)} catalog tracks")
    return tracks
