"""Protocols for searchable track data.

Search accepts plain mappings (decoded API payloads) as well as any object
exposing the attributes below, such as CatalogTrack.
"""

from collections.abc import Mapping
from typing import Any, Protocol


class SearchableTrack(Protocol):
    """Protocol for track objects that can be ranked."""

    @property
    def name(self) -> str | None: ...

    @property
    def title(self) -> str | None: ...

    @property
    def original_title(self) -> str | None: ...

    @property
    def artist(self) -> str | None: ...

    @property
    def album(self) -> str | None: ...

    @property
    def overview(self) -> str | None: ...

    @property
    def genre(self) -> str | None: ...

    @property
    def year(self) -> int | None: ...

    @property
    def popularity(self) -> int | float | None: ...


TrackInput = SearchableTrack | Mapping[str, Any]

SEARCHABLE_FIELDS = (
    "name",
    "title",
    "original_title",
    "artist",
    "album",
    "overview",
    "genre",
    "year",
    "popularity",
)
