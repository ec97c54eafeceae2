"""Domain layer test fixtures - plain catalog data with no I/O.

Tracks are plain dicts, the shape the upstream music API proxy delivers.
"""

import pytest


@pytest.fixture
def catalog():
    """Small mixed catalog for ranking tests."""
    return [
        {
            "id": "1",
            "name": "Blinding Lights",
            "artist": "The Weeknd",
            "album": "After Hours",
            "genre": "Synthpop",
            "year": 2019,
            "popularity": 95,
            "overview": "Retro synth-driven anthem",
        },
        {
            "id": "2",
            "name": "Levitating",
            "artist": "Dua Lipa",
            "album": "Future Nostalgia",
            "genre": "Dance Pop",
            "year": 2020,
            "popularity": 88,
        },
        {
            "id": "3",
            "name": "Sicko Mode",
            "artist": "Travis Scott",
            "album": "Astroworld",
            "genre": "Hip-Hop",
            "year": 2018,
            "popularity": 82,
        },
        {
            "id": "4",
            "name": "Mr. Brightside",
            "artist": "The Killers",
            "album": "Hot Fuss",
            "genre": "Alternative Rock",
            "year": 2004,
            "popularity": 91,
        },
        {
            "id": "5",
            "name": "Flowers",
            "artist": "Miley Cyrus",
            "album": "Endless Summer Vacation",
            "genre": "Pop",
            "year": 2023,
            "popularity": 93,
        },
        {
            "id": "6",
            "name": "Paint The Town Red",
            "artist": "Doja Cat",
            "album": "Scarlet",
            "genre": "Rap",
            "year": 2023,
            "popularity": 90,
        },
        {"id": "7", "name": "Untitled Demo"},
        {},
    ]


@pytest.fixture
def queries():
    """Queries exercising exact, partial, year and genre paths."""
    return [
        "blinding lights",
        "the",
        "dua lipa",
        "2023",
        "hip hop",
        "pop",
        "rock hits 2004",
        "x",
        "nothing matches this",
    ]
