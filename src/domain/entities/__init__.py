"""Core domain entities representing catalog search concepts."""

from .history import HistoryEntry, SearchHistory
from .shared import coerce_number, coerce_text, coerce_year, read_field
from .track import CatalogTrack

__all__ = [
    # Track entities
    "CatalogTrack",
    # History entities
    "HistoryEntry",
    "SearchHistory",
    # Shared utilities
    "coerce_number",
    "coerce_text",
    "coerce_year",
    "read_field",
]
