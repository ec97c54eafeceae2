"""Pure domain types for catalog relevance scoring."""

from types import MappingProxyType
from typing import Any

from attrs import define, field, validators

_positive_int = [validators.instance_of(int), validators.gt(0)]


@define(frozen=True, slots=True)
class ScoringWeights:
    """Point value of every relevance signal.

    Exact-match weights sit well above any single partial weight, and the
    exact/non-exact split is applied before score when results are sorted.
    """

    # Exact matches against the whole normalized query
    exact_name: int = field(default=100, validator=_positive_int)
    exact_artist: int = field(default=90, validator=_positive_int)
    exact_album: int = field(default=80, validator=_positive_int)
    exact_genre: int = field(default=70, validator=_positive_int)

    # Applied regardless of exactness
    year_match: int = field(default=85, validator=_positive_int)
    genre_alias: int = field(default=75, validator=_positive_int)

    # Per-term substring matches
    partial_name: int = field(default=50, validator=_positive_int)
    partial_original_title: int = field(default=45, validator=_positive_int)
    partial_artist: int = field(default=40, validator=_positive_int)
    partial_genre: int = field(default=35, validator=_positive_int)
    partial_album: int = field(default=30, validator=_positive_int)
    partial_year: int = field(default=25, validator=_positive_int)
    partial_word_bonus: int = field(default=20, validator=_positive_int)
    partial_overview: int = field(default=15, validator=_positive_int)

    # Popularity boosts, stacked above the very-high threshold
    popularity_high: int = field(default=10, validator=_positive_int)
    popularity_very_high: int = field(default=5, validator=_positive_int)


DEFAULT_WEIGHTS = ScoringWeights()

POPULARITY_HIGH_THRESHOLD = 85
POPULARITY_VERY_HIGH_THRESHOLD = 90

# Minimum term length that earns the partial word bonus
PARTIAL_WORD_MIN_LENGTH = 3

# Canonical genre mentioned in a query -> genre labels treated as equivalent.
# Declaration order matters: the first key that applies wins.
GENRE_ALIASES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "pop": ("pop", "alternative pop", "dance pop", "synthpop"),
    "rock": ("rock", "pop rock", "alternative rock", "classic rock"),
    "hip hop": ("hip hop", "hip-hop", "rap", "latin trap"),
    "r&b": ("r&b", "rnb", "soul"),
    "electronic": ("electronic", "dance", "edm", "synthpop"),
    "country": ("country",),
    "indie": ("indie", "indie folk", "indie rock"),
    "folk": ("folk", "indie folk"),
    "punk": ("punk", "pop punk"),
    "garage": ("garage", "uk garage"),
    "k-pop": ("k-pop", "kpop"),
    "latin": ("latin", "latin trap"),
})


@define(frozen=True, slots=True)
class SearchResult:
    """A scored track. `track` is the caller's object, not a copy."""

    track: Any
    score: int
    is_exact_match: bool = False
