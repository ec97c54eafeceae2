"""Pure algorithms for catalog relevance ranking.

Scores every track against a free-text query, flags exact matches and
returns results ordered exact-first, then by score. Matching is plain
case-insensitive substring containment over whitespace-split terms.
"""

from collections.abc import Iterable, Mapping, Sequence
import re

from attrs import define

from src.config import get_logger
from src.domain.entities.shared import (
    coerce_number,
    coerce_text,
    coerce_year,
    read_field,
)

from .protocols import TrackInput
from .types import (
    DEFAULT_WEIGHTS,
    GENRE_ALIASES,
    PARTIAL_WORD_MIN_LENGTH,
    POPULARITY_HIGH_THRESHOLD,
    POPULARITY_VERY_HIGH_THRESHOLD,
    ScoringWeights,
    SearchResult,
)

logger = get_logger(__name__)

YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")


@define(frozen=True, slots=True)
class _TrackText:
    """Lower-cased searchable fields of one track, computed once per search."""

    name: str
    title: str
    original_title: str
    artist: str
    album: str
    overview: str
    genre: str
    year: int | None
    year_text: str
    popularity: int | float | None

    @classmethod
    def from_track(cls, track: TrackInput) -> "_TrackText":
        year = coerce_year(read_field(track, "year"))
        return cls(
            name=coerce_text(read_field(track, "name")).lower(),
            title=coerce_text(read_field(track, "title")).lower(),
            original_title=coerce_text(read_field(track, "original_title")).lower(),
            artist=coerce_text(read_field(track, "artist")).lower(),
            album=coerce_text(read_field(track, "album")).lower(),
            overview=coerce_text(read_field(track, "overview")).lower(),
            genre=coerce_text(read_field(track, "genre")).lower(),
            year=year,
            year_text="" if year is None else str(year),
            popularity=coerce_number(read_field(track, "popularity")),
        )


def normalize_query(query: str | None) -> str:
    """Trim and lower-case a raw query. Non-strings normalize to ''."""
    return coerce_text(query).strip().lower()


def split_terms(query: str) -> list[str]:
    """Split a normalized query on runs of whitespace."""
    return query.split()


def detect_search_year(query: str) -> int | None:
    """Return the first 19xx/20xx token in the query, if any."""
    match = YEAR_PATTERN.search(query)
    return int(match.group(0)) if match else None


def _exact_match_score(
    text: _TrackText, query: str, weights: ScoringWeights
) -> int | None:
    """Score of the highest-priority exact match, or None when nothing matches."""
    if query in (text.name, text.title, text.original_title):
        return weights.exact_name
    if text.artist == query:
        return weights.exact_artist
    if text.album == query:
        return weights.exact_album
    if text.genre == query:
        return weights.exact_genre
    return None


def _genre_alias_score(
    text: _TrackText,
    query: str,
    weights: ScoringWeights,
    genre_aliases: Mapping[str, Sequence[str]],
) -> int:
    for canonical, aliases in genre_aliases.items():
        if canonical in query and any(alias in text.genre for alias in aliases):
            return weights.genre_alias
    return 0


def _partial_match_score(
    text: _TrackText, terms: list[str], weights: ScoringWeights
) -> int:
    score = 0

    # 1. Field-specific substring matches per term
    for term in terms:
        if term in text.name or term in text.title:
            score += weights.partial_name
        if term in text.original_title:
            score += weights.partial_original_title
        if term in text.artist:
            score += weights.partial_artist
        if term in text.album:
            score += weights.partial_album
        if term in text.genre:
            score += weights.partial_genre
        if term in text.overview:
            score += weights.partial_overview
        if term in text.year_text:
            score += weights.partial_year

    # 2. Longer terms hitting name or artist score again on top of step 1
    for term in terms:
        if len(term) >= PARTIAL_WORD_MIN_LENGTH and (
            term in text.name or term in text.artist
        ):
            score += weights.partial_word_bonus

    # 3. Popularity boosts stack
    if text.popularity:
        if text.popularity > POPULARITY_HIGH_THRESHOLD:
            score += weights.popularity_high
        if text.popularity > POPULARITY_VERY_HIGH_THRESHOLD:
            score += weights.popularity_very_high

    return score


def score_track(
    track: TrackInput,
    query: str,
    terms: list[str],
    search_year: int | None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    genre_aliases: Mapping[str, Sequence[str]] = GENRE_ALIASES,
) -> SearchResult:
    """Score a single track against an already-normalized query.

    Args:
        track: Mapping or track object; missing fields contribute nothing
        query: Normalized (trimmed, lower-cased) query
        terms: Whitespace-split terms of the query
        search_year: Year detected in the query, if any
        weights: Point value per signal
        genre_aliases: Canonical genre -> equivalent genre labels

    Returns:
        SearchResult referencing the given track (score may be 0)
    """
    text = _TrackText.from_track(track)

    exact_score = _exact_match_score(text, query, weights)
    is_exact_match = exact_score is not None
    score = exact_score or 0

    if search_year is not None and text.year == search_year:
        score += weights.year_match

    score += _genre_alias_score(text, query, weights, genre_aliases)

    # Exact matches rely on the signals above only
    if not is_exact_match:
        score += _partial_match_score(text, terms, weights)

    return SearchResult(track=track, score=score, is_exact_match=is_exact_match)


def search(
    tracks: Iterable[TrackInput],
    query: str | None,
    limit: int | None = None,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    genre_aliases: Mapping[str, Sequence[str]] = GENRE_ALIASES,
) -> list[SearchResult]:
    """Rank tracks by relevance to a free-text query.

    Exact matches (whole query equals name/title/original title, artist,
    album or genre) always come before partial matches; each bucket is
    ordered by descending score. Tracks scoring 0 are dropped.

    Args:
        tracks: Track mappings or objects to rank
        query: Raw user query; empty or whitespace-only matches nothing
        limit: Maximum number of results. None returns every match,
            zero or negative returns nothing
        weights: Point value per signal
        genre_aliases: Canonical genre -> equivalent genre labels

    Returns:
        Ordered list of SearchResult
    """
    normalized = normalize_query(query)
    if not normalized:
        return []

    if limit is not None and limit <= 0:
        return []

    track_list = list(tracks)
    if not track_list:
        return []

    terms = split_terms(normalized)
    search_year = detect_search_year(normalized)

    scored = [
        result
        for result in (
            score_track(track, normalized, terms, search_year, weights, genre_aliases)
            for track in track_list
        )
        if result.score > 0
    ]

    # Stable: equal (flag, score) pairs keep input order
    scored.sort(key=lambda r: (not r.is_exact_match, -r.score))

    logger.debug(
        "Ranked {} of {} tracks for '{}' (year={})",
        len(scored),
        len(track_list),
        normalized,
        search_year,
    )

    return scored if limit is None else scored[:limit]


def partition_results(
    results: Iterable[SearchResult],
) -> tuple[list[SearchResult], list[SearchResult]]:
    """Split ordered results into (exact matches, related results), keeping order."""
    exact: list[SearchResult] = []
    related: list[SearchResult] = []
    for result in results:
        (exact if result.is_exact_match else related).append(result)
    return exact, related
