"""NextSound domain layer - pure search logic with no I/O."""

from . import entities, search

from .entities import CatalogTrack, HistoryEntry, SearchHistory
from .search import (
    DEFAULT_WEIGHTS,
    GENRE_ALIASES,
    ScoringWeights,
    SearchResult,
    partition_results,
)

__all__ = [
    # Modules
    "entities",
    "search",
    # Key domain types
    "CatalogTrack",
    "HistoryEntry",
    "SearchHistory",
    # Search types
    "DEFAULT_WEIGHTS",
    "GENRE_ALIASES",
    "ScoringWeights",
    "SearchResult",
    "partition_results",
]
