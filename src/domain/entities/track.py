"""Track-related domain entities.

Pure track representations with zero external dependencies beyond attrs.
"""

from collections.abc import Mapping
from typing import Any

from attrs import define, field, validators

from .shared import coerce_number, coerce_text, coerce_year

UNKNOWN_TRACK = "Unknown Track"
UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


@define(frozen=True, slots=True)
class CatalogTrack:
    """Immutable catalog track as delivered by the upstream music API.

    Every field is optional: the catalog proxy returns whatever the third-party
    service knows about a recording, so search treats missing text as empty
    and missing year/popularity as absent.
    """

    name: str | None = field(default=None)
    title: str | None = field(default=None)
    original_title: str | None = field(default=None)
    artist: str | None = field(default=None)
    album: str | None = field(default=None)
    overview: str | None = field(default=None)
    genre: str | None = field(default=None)
    year: int | None = field(
        default=None,
        validator=validators.optional(validators.instance_of(int)),
    )
    popularity: int | float | None = field(
        default=None,
        validator=validators.optional(validators.instance_of((int, float))),
    )

    # Identity and presentation
    id: str | None = field(default=None)
    spotify_id: str | None = field(default=None)
    poster_path: str | None = field(default=None)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CatalogTrack":
        """Build a track from a loosely-typed mapping without ever failing on shape."""
        raw_id = data.get("id")
        return cls(
            name=_optional_str(data.get("name")),
            title=_optional_str(data.get("title")),
            original_title=_optional_str(data.get("original_title")),
            artist=_optional_str(data.get("artist")),
            album=_optional_str(data.get("album")),
            overview=_optional_str(data.get("overview")),
            genre=_optional_str(data.get("genre")),
            year=coerce_year(data.get("year")),
            popularity=coerce_number(data.get("popularity")),
            id=None if raw_id is None or isinstance(raw_id, bool) else str(raw_id),
            spotify_id=_optional_str(data.get("spotify_id")),
            poster_path=_optional_str(data.get("poster_path")),
        )

    @property
    def item_id(self) -> str:
        """Identifier used for selection history: spotify id first, then id."""
        return self.spotify_id or self.id or self.display_title

    @property
    def display_title(self) -> str:
        return coerce_text(self.title) or coerce_text(self.name) or UNKNOWN_TRACK

    @property
    def subtitle(self) -> str:
        artist = coerce_text(self.artist) or UNKNOWN_ARTIST
        album = coerce_text(self.album) or UNKNOWN_ALBUM
        return f"{artist} • {album}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize, dropping absent fields."""
        values = {
            "id": self.id,
            "spotify_id": self.spotify_id,
            "name": self.name,
            "title": self.title,
            "original_title": self.original_title,
            "artist": self.artist,
            "album": self.album,
            "overview": self.overview,
            "genre": self.genre,
            "year": self.year,
            "popularity": self.popularity,
            "poster_path": self.poster_path,
        }
        return {key: value for key, value in values.items() if value is not None}
