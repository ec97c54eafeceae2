"""Application layer fixtures - catalog snapshots as CatalogTrack entities."""

import pytest

from src.domain.entities import CatalogTrack


@pytest.fixture
def catalog_tracks():
    """Catalog snapshot used by use case and session tests."""
    return [
        CatalogTrack(
            id="1",
            spotify_id="sp-weeknd",
            name="Blinding Lights",
            artist="The Weeknd",
            album="After Hours",
            genre="synthpop",
            year=2019,
            popularity=95,
        ),
        CatalogTrack(
            id="2",
            name="Save Your Tears",
            artist="The Weeknd",
            album="After Hours",
            year=2020,
            popularity=89,
        ),
        CatalogTrack(
            id="3",
            name="Levitating",
            artist="Dua Lipa",
            album="Future Nostalgia",
            genre="dance pop",
            year=2020,
        ),
    ]


@pytest.fixture
def many_matching_tracks():
    """Twelve tracks that all match the query 'song'."""
    return [CatalogTrack(id=str(n), name=f"Song {n}") for n in range(12)]
