"""Unit tests for configuration getters."""

import os

import pytest

from healthmetrics.config import (
    get_gravity,
    get_log_level,
    get_match_threshold,
    get_name_similarity_threshold,
    load_environment,
)


class TestConfigGetters:
    """Test environment-backed settings."""

    def test_defaults(self):
        """Test defaults when nothing is set."""
        assert get_match_threshold() == 0.7
        assert get_name_similarity_threshold() == 0.8
        assert get_gravity() == 9.81
        assert get_log_level() == "INFO"

    def test_values_from_environment(self, monkeypatch):
        """Test values are read from HEALTHMETRICS_* variables."""
        monkeypatch.setenv("HEALTHMETRICS_MATCH_THRESHOLD", "0.85")
        monkeypatch.setenv("HEALTHMETRICS_GRAVITY", "1.62")
        monkeypatch.setenv("HEALTHMETRICS_LOG_LEVEL", "debug")

        assert get_match_threshold() == pytest.approx(0.85)
        assert get_gravity() == pytest.approx(1.62)
        assert get_log_level() == "DEBUG"

    def test_malformed_number_falls_back_to_default(self, monkeypatch):
        """Test malformed numeric values use the default."""
        monkeypatch.setenv("HEALTHMETRICS_MATCH_THRESHOLD", "high")

        assert get_match_threshold() == 0.7

    def test_blank_value_uses_default(self, monkeypatch):
        """Test blank values use the default."""
        monkeypatch.setenv("HEALTHMETRICS_GRAVITY", "  ")

        assert get_gravity() == 9.81


class TestLoadEnvironment:
    """Test .env loading."""

    def test_missing_file_returns_false(self, tmp_path):
        """Test a missing file is reported, not raised."""
        assert load_environment(tmp_path / "nope.env") is False

    def test_file_values_loaded(self, tmp_path):
        """Test values from the file become visible to getters."""
        env_file = tmp_path / ".env"
        env_file.write_text("HEALTHMETRICS_NAME_SIMILARITY_THRESHOLD=0.9\n")

        try:
            assert load_environment(env_file) is True
            assert get_name_similarity_threshold() == pytest.approx(0.9)
        finally:
            os.environ.pop("HEALTHMETRICS_NAME_SIMILARITY_THRESHOLD", None)

    def test_process_environment_wins(self, tmp_path, monkeypatch):
        """Test existing variables are not overridden by the file."""
        env_file = tmp_path / ".env"
        env_file.write_text("HEALTHMETRICS_GRAVITY=3.7\n")
        monkeypatch.setenv("HEALTHMETRICS_GRAVITY", "9.8")

        load_environment(env_file)

        assert os.environ["HEALTHMETRICS_GRAVITY"] == "9.8"
        assert get_gravity() == pytest.approx(9.8)
