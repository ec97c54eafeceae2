"""Tests for settings and flat-key configuration access."""

from src.config import get_config, settings
from src.config.settings import Settings


def test_search_defaults():
    assert settings.search.default_limit is None
    assert get_config("SEARCH_QUICK_FIND_LIMIT") == 8
    assert get_config("SEARCH_MAX_RECENT_ITEMS") == 20


def test_unknown_key_returns_default():
    assert get_config("NOT_A_SETTING", "fallback") == "fallback"


def test_flat_keywords_map_to_nested_groups():
    custom = Settings(search_quick_find_limit=3, console_log_level="WARNING")

    assert custom.search.quick_find_limit == 3
    assert custom.logging.console_level == "WARNING"


def test_nested_environment_variables(monkeypatch):
    monkeypatch.setenv("SEARCH__MAX_RECENT_QUERIES", "4")
    assert Settings().search.max_recent_queries == 4
