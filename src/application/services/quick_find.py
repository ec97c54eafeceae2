"""Quick-find session for the command-palette search box.

Callers debounce keystrokes, then `begin` a request for the latest query and
`complete` it against the current catalog snapshot. Each request carries a
monotonically increasing sequence number; completing anything but the newest
request yields None so stale results never replace fresh ones.
"""

from collections.abc import Sequence
from typing import Any

from attrs import define, field

from src.application.use_cases.search_catalog import (
    SearchCatalogCommand,
    SearchCatalogResult,
    SearchCatalogUseCase,
)
from src.config import get_logger, settings
from src.domain.entities import HistoryEntry, SearchHistory

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class QuickFindResponse:
    """Results for one completed quick-find request."""

    sequence: int
    query: str
    result: SearchCatalogResult

    @property
    def exact_matches(self) -> list[Any]:
        return [r.track for r in self.result.exact_matches]

    @property
    def recommendations(self) -> list[Any]:
        return [r.track for r in self.result.related]

    @property
    def all_results(self) -> list[Any]:
        return self.exact_matches + self.recommendations


@define(slots=True)
class QuickFindSession:
    """Stateful quick-find over a fixed catalog snapshot."""

    tracks: Sequence[Any]
    limit: int | None = field(factory=lambda: settings.search.quick_find_limit)
    history: SearchHistory = field(
        factory=lambda: SearchHistory(
            max_queries=settings.search.max_recent_queries,
            max_items=settings.search.max_recent_items,
        )
    )
    use_case: SearchCatalogUseCase = field(factory=SearchCatalogUseCase)
    query: str = ""
    _sequence: int = field(default=0, init=False)
    _pending: dict[int, str] = field(factory=dict, init=False)

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    @property
    def pending_count(self) -> int:
        """Requests begun but not yet completed."""
        return len(self._pending)

    def begin(self, query: str) -> int:
        """Register a new request for `query` and return its sequence number."""
        self._sequence += 1
        self.query = query
        self._pending[self._sequence] = query
        return self._sequence

    def complete(self, sequence: int) -> QuickFindResponse | None:
        """Run the request `sequence`; None when a newer request superseded it."""
        query = self._pending.pop(sequence, None)
        if query is None and not 0 < sequence < self._sequence:
            raise KeyError(f"Unknown quick-find request: {sequence}")

        if query is None or sequence != self._sequence:
            logger.debug(
                f"Discarding stale quick-find request {sequence} "
                f"(latest is {self._sequence})"
            )
            return None

        # Older requests can no longer win; forget the ones never completed.
        self._pending.clear()
        result = self.use_case.execute(
            SearchCatalogCommand(tracks=self.tracks, query=query, limit=self.limit)
        )
        return QuickFindResponse(sequence=sequence, query=query, result=result)

    def search(self, query: str) -> QuickFindResponse | None:
        """Begin and immediately complete a request."""
        return self.complete(self.begin(query))

    def select(self, entry: HistoryEntry) -> SearchHistory:
        """Record the selected entry against the current query."""
        self.history = self.history.with_selection(self.query, entry)
        return self.history

    def recent_items(self) -> list[HistoryEntry]:
        """History shown while the search box is empty."""
        if self.query.strip():
            return []
        return self.history.recent_items(settings.search.recent_items_shown)

    def clear_history(self) -> None:
        self.history = self.history.cleared()
