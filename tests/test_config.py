"""
Unit tests for Settings and the date-time helpers.
"""
from datetime import timedelta

import pytest

from job_posting_ld.config import Settings
from job_posting_ld.dates import format_instant, parse_instant


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        """Unset environment falls back to US/en and emitting unset fields."""
        settings = Settings.from_env()
        assert settings.default_country == "US"
        assert settings.default_language == "en"
        assert settings.include_unset is True

    def test_from_env(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("JOB_POSTING_DEFAULT_COUNTRY", "FR")
        monkeypatch.setenv("JOB_POSTING_DEFAULT_LANGUAGE", "fr")
        monkeypatch.setenv("JOB_POSTING_INCLUDE_UNSET", "false")
        settings = Settings.from_env()
        assert settings.default_country == "FR"
        assert settings.default_language == "fr"
        assert settings.include_unset is False

    @pytest.mark.parametrize("raw, expected", [("0", False), ("no", False), ("true", True), ("1", True), ("", True)])
    def test_include_unset_parsing(self, monkeypatch, raw, expected):
        """Only 0/false/no disable emitting unset fields."""
        monkeypatch.setenv("JOB_POSTING_INCLUDE_UNSET", raw)
        assert Settings.from_env().include_unset is expected


class TestInstants:
    """Tests for parse_instant/format_instant."""

    def test_parse_keeps_offset(self):
        """The parsed value is offset-aware with the given offset."""
        value = parse_instant("2024-01-15T09:00:00-07:00")
        assert value.utcoffset() == timedelta(hours=-7)

    def test_format_round_trip(self):
        """Formatting reproduces the accepted input."""
        assert format_instant(parse_instant("2024-01-15T09:00:00+00:00")) == "2024-01-15T09:00:00+00:00"

    @pytest.mark.parametrize("value", ["not-a-date", "2024-01-15T09:00:00Z", "2024-13-01T00:00:00+00:00"])
    def test_rejects(self, value):
        """Bad shapes and impossible values raise ValueError."""
        with pytest.raises(ValueError):
            parse_instant(value)
