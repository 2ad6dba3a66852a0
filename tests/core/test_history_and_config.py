"""Tests for the in-memory history and configuration loading."""

import pytest
from pydantic import ValidationError

from narrow.core.config import EngineConfig, SessionOptions, load_engine_config
from narrow.core.history import InMemoryHistory


class TestInMemoryHistory:
    """Tests for InMemoryHistory."""

    def test_most_recent_first(self):
        history = InMemoryHistory(["a", "b"])
        history.append("c")
        assert history.entries() == ["c", "b", "a"]

    def test_reappended_value_moves_to_front(self):
        history = InMemoryHistory(["a", "b", "c"])
        history.append("a")
        assert history.entries() == ["a", "c", "b"]

    def test_max_length(self):
        history = InMemoryHistory(["a", "b", "c"], max_length=2)
        assert history.entries() == ["c", "b"]

    def test_empty_values_ignored(self):
        history = InMemoryHistory()
        history.append("")
        assert len(history) == 0

    def test_invalid_max_length(self):
        with pytest.raises(ValueError):
            InMemoryHistory(max_length=0)


class TestConfig:
    """Tests for EngineConfig, SessionOptions and environment loading."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.sort_enabled is True
        assert config.page_size == 10
        assert config.ignore_case is False

    def test_page_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            EngineConfig(page_size=0)

    def test_count_format_is_validated(self):
        with pytest.raises(ValidationError):
            EngineConfig(count_format="{missing}")

    def test_config_is_frozen(self):
        with pytest.raises(ValidationError):
            EngineConfig().page_size = 3

    def test_session_page_size_override(self):
        config = EngineConfig(page_size=7)
        assert SessionOptions().effective_page_size(config) == 7
        assert SessionOptions(page_size=3).effective_page_size(config) == 3

    def test_load_from_environment(self, monkeypatch):
        monkeypatch.setenv("NARROW_SORT_ENABLED", "false")
        monkeypatch.setenv("NARROW_PAGE_SIZE", "5")
        monkeypatch.setenv("NARROW_IGNORE_CASE", "yes")
        monkeypatch.setenv("NARROW_COUNT_FORMAT", "[{shown}]")
        monkeypatch.setenv("NARROW_LOG_LEVEL", "debug")

        config = load_engine_config()

        assert config == EngineConfig(
            sort_enabled=False,
            page_size=5,
            ignore_case=True,
            count_format="[{shown}]",
            log_level="DEBUG",
        )
