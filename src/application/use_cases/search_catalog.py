"""Catalog search use case.

Wraps the pure relevance scorer with command/result objects, splits the
ranked output into exact and related buckets and records timing.
"""

from collections.abc import Mapping
import time
from typing import Any

from attrs import define, field, validators

from src.config import get_logger
from src.domain.entities.shared import read_field
from src.domain.search import (
    DEFAULT_WEIGHTS,
    SEARCHABLE_FIELDS,
    ScoringWeights,
    SearchResult,
    partition_results,
    search,
)

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class SearchCatalogCommand:
    """Command for a single catalog search.

    `limit` of None returns every match; zero or negative returns nothing.
    """

    tracks: list[Any] = field(converter=list)
    query: str = field(validator=validators.instance_of(str))
    limit: int | None = field(
        default=None,
        validator=validators.optional(validators.instance_of(int)),
    )


@define(frozen=True, slots=True)
class SearchCatalogResult:
    """Ranked results plus the exact/related split used for display."""

    query: str
    results: list[SearchResult] = field(factory=list)
    exact_matches: list[SearchResult] = field(factory=list)
    related: list[SearchResult] = field(factory=list)
    candidate_count: int = 0
    execution_time_ms: int = 0

    @property
    def tracks(self) -> list[Any]:
        """Ranked track references, for callers that only need a listing."""
        return [result.track for result in self.results]

    def to_dict(self) -> dict[str, Any]:
        def _serialize(result: SearchResult) -> dict[str, Any]:
            track = result.track
            if hasattr(track, "to_dict"):
                payload = track.to_dict()
            elif isinstance(track, Mapping):
                payload = dict(track)
            else:
                payload = {
                    name: value
                    for name in SEARCHABLE_FIELDS
                    if (value := read_field(track, name)) is not None
                }
            return {
                "track": payload,
                "score": result.score,
                "is_exact_match": result.is_exact_match,
            }

        return {
            "query": self.query,
            "candidate_count": self.candidate_count,
            "exact_matches": [_serialize(r) for r in self.exact_matches],
            "related": [_serialize(r) for r in self.related],
        }


@define(slots=True)
class SearchCatalogUseCase:
    """Rank a catalog snapshot against a query."""

    weights: ScoringWeights = DEFAULT_WEIGHTS

    def execute(self, command: SearchCatalogCommand) -> SearchCatalogResult:
        """Execute the search.

        Args:
            command: Tracks, query and optional limit.

        Returns:
            Result with ranked results and the exact/related buckets.
        """
        start_time = time.perf_counter()

        with logger.contextualize(operation="search_catalog"):
            results = search(
                command.tracks, command.query, command.limit, weights=self.weights
            )
            exact, related = partition_results(results)
            execution_time_ms = int((time.perf_counter() - start_time) * 1000)

            logger.info(
                f"Search '{command.query.strip()}' matched {len(results)} of "
                f"{len(command.tracks)} tracks ({len(exact)} exact) in {execution_time_ms}ms"
            )

        return SearchCatalogResult(
            query=command.query,
            results=results,
            exact_matches=exact,
            related=related,
            candidate_count=len(command.tracks),
            execution_time_ms=execution_time_ms,
        )
