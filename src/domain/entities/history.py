"""Quick-find history entities.

Immutable record of recent queries and selected items, most recent first.
"""

from typing import Any

import attrs
from attrs import define, field, validators

DEFAULT_MAX_QUERIES = 10
DEFAULT_MAX_ITEMS = 20


@define(frozen=True, slots=True)
class HistoryEntry:
    """A previously selected search result."""

    item_id: str = field(validator=validators.instance_of(str))
    label: str = field(default="", validator=validators.instance_of(str))
    subtitle: str = field(default="", validator=validators.instance_of(str))

    @classmethod
    def from_track(cls, track: Any) -> "HistoryEntry":
        """Create an entry from a CatalogTrack-like object."""
        return cls(
            item_id=track.item_id,
            label=track.display_title,
            subtitle=track.subtitle,
        )

    def to_dict(self) -> dict[str, str]:
        return {"item_id": self.item_id, "label": self.label, "subtitle": self.subtitle}


@define(frozen=True, slots=True)
class SearchHistory:
    """Recent queries and selections, deduplicated and capped."""

    queries: tuple[str, ...] = field(default=(), converter=tuple)
    items: tuple[HistoryEntry, ...] = field(default=(), converter=tuple)
    max_queries: int = field(
        default=DEFAULT_MAX_QUERIES,
        validator=[validators.instance_of(int), validators.ge(1)],
    )
    max_items: int = field(
        default=DEFAULT_MAX_ITEMS,
        validator=[validators.instance_of(int), validators.ge(1)],
    )

    def with_selection(self, query: str, entry: HistoryEntry) -> "SearchHistory":
        """Record that `entry` was picked while `query` was active.

        Blank queries leave the history untouched.
        """
        query = query.strip()
        if not query:
            return self

        queries = (query, *(q for q in self.queries if q != query))
        items = (entry, *(i for i in self.items if i.item_id != entry.item_id))
        return attrs.evolve(
            self,
            queries=queries[: self.max_queries],
            items=items[: self.max_items],
        )

    def recent_items(self, count: int = 5) -> list[HistoryEntry]:
        return list(self.items[:count])

    def cleared(self) -> "SearchHistory":
        return attrs.evolve(self, queries=(), items=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "queries": list(self.queries),
            "items": [item.to_dict() for item in self.items],
        }
