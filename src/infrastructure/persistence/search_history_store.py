"""File-backed storage for quick-find search history."""

import json
from pathlib import Path

from attrs import define

from src.config import get_logger, settings
from src.domain.entities import HistoryEntry, SearchHistory

logger = get_logger(__name__)


@define(slots=True)
class SearchHistoryStore:
    """Reads and writes SearchHistory as a small JSON document.

    A missing or unreadable file is treated as empty history.
    """

    path: Path

    def _empty(self) -> SearchHistory:
        return SearchHistory(
            max_queries=settings.search.max_recent_queries,
            max_items=settings.search.max_recent_items,
        )

    def load(self) -> SearchHistory:
        if not self.path.exists():
            return self._empty()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading search history from {self.path}: {e}")
            return self._empty()

        raw_queries = data.get("queries") if isinstance(data, dict) else None
        raw_items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(raw_queries, list) or not isinstance(raw_items, list):
            logger.warning(f"Unexpected search history layout in {self.path}")
            return self._empty()

        queries = [q for q in raw_queries if isinstance(q, str)]
        items = [
            HistoryEntry(
                item_id=str(item["item_id"]),
                label=str(item.get("label", "")),
                subtitle=str(item.get("subtitle", "")),
            )
            for item in raw_items
            if isinstance(item, dict) and "item_id" in item
        ]

        empty = self._empty()
        return SearchHistory(
            queries=queries[: empty.max_queries],
            items=items[: empty.max_items],
            max_queries=empty.max_queries,
            max_items=empty.max_items,
        )

    def save(self, history: SearchHistory) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(history.to_dict(), indent=2), encoding="utf-8")
        logger.debug(f"Saved search history to {self.path}")

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            logger.info(f"Cleared search history at {self.path}")
