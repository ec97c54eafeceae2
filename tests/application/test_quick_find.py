"""Tests for the quick-find session."""

import pytest

from src.application.services import QuickFindSession
from src.domain.entities import HistoryEntry, SearchHistory


class TestRequestSequencing:
    """Stale requests are discarded in favour of the latest one."""

    def test_sequences_increase(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)

        assert session.begin("b") == 1
        assert session.begin("bl") == 2
        assert session.latest_sequence == 2

    def test_stale_request_discarded(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        stale = session.begin("weeknd")
        latest = session.begin("levitating")

        assert session.complete(stale) is None

        response = session.complete(latest)
        assert response is not None
        assert response.sequence == latest
        assert [t.id for t in response.exact_matches] == ["3"]

    def test_unknown_request(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        with pytest.raises(KeyError):
            session.complete(99)

    def test_request_completes_once(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        sequence = session.begin("weeknd")
        session.complete(sequence)

        with pytest.raises(KeyError):
            session.complete(sequence)

    def test_completing_latest_drops_superseded_requests(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        for query in ("w", "we", "wee", "weeknd"):
            latest = session.begin(query)

        assert session.pending_count == 4
        assert session.complete(latest) is not None
        assert session.pending_count == 0

    def test_late_stale_completion_is_discarded(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        stale = session.begin("w")
        latest = session.begin("weeknd")
        session.complete(latest)

        assert session.complete(stale) is None


class TestQuickFindResults:
    """Result shaping for the palette."""

    def test_default_limit_from_settings(self, many_matching_tracks):
        session = QuickFindSession(tracks=many_matching_tracks)
        response = session.search("song")

        assert len(response.all_results) == 8

    def test_explicit_limit(self, many_matching_tracks):
        session = QuickFindSession(tracks=many_matching_tracks, limit=3)
        assert len(session.search("song").all_results) == 3

    def test_exact_matches_listed_before_recommendations(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        response = session.search("after hours")

        assert response.exact_matches == catalog_tracks[:2]
        assert response.recommendations == []
        assert response.all_results == catalog_tracks[:2]

    def test_empty_query(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        assert session.search("").all_results == []


class TestHistory:
    """Selections feed recent searches and recent items."""

    def test_select_records_current_query(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        response = session.search("  weeknd ")

        history = session.select(HistoryEntry.from_track(response.all_results[0]))

        assert history.queries == ("weeknd",)
        assert history.items[0].item_id == "sp-weeknd"

    def test_recent_items_only_when_query_blank(self, catalog_tracks):
        history = SearchHistory(items=[HistoryEntry(item_id="1", label="Blinding Lights")])
        session = QuickFindSession(tracks=catalog_tracks, history=history)

        session.begin("weeknd")
        assert session.recent_items() == []

        session.begin("")
        assert [e.item_id for e in session.recent_items()] == ["1"]

    def test_clear_history(self, catalog_tracks):
        session = QuickFindSession(tracks=catalog_tracks)
        session.search("weeknd")
        session.select(HistoryEntry(item_id="1"))

        session.clear_history()

        assert session.history.queries == ()
        assert session.history.items == ()
