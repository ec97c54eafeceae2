"""Catalog relevance ranking: scoring algorithm, weights and genre aliases."""

from .algorithms import (
    detect_search_year,
    normalize_query,
    partition_results,
    score_track,
    search,
    split_terms,
)
from .protocols import SEARCHABLE_FIELDS, SearchableTrack, TrackInput
from .types import DEFAULT_WEIGHTS, GENRE_ALIASES, ScoringWeights, SearchResult

__all__ = [
    "DEFAULT_WEIGHTS",
    "GENRE_ALIASES",
    "SEARCHABLE_FIELDS",
    "ScoringWeights",
    "SearchResult",
    "SearchableTrack",
    "TrackInput",
    "detect_search_year",
    "normalize_query",
    "partition_results",
    "score_track",
    "search",
    "split_terms",
]
