"""Tests for environment-driven settings."""

from datetime import UTC, time
from zoneinfo import ZoneInfo

from daylayout.config.settings import Settings, resolve_timezone


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DAYLAYOUT_LOG_LEVEL", "DAYLAYOUT_TIMEZONE", "DAYLAYOUT_DEFAULT_START_TIME"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.timezone == "UTC"
        assert settings.default_start_time == time(9, 0)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DAYLAYOUT_LOG_LEVEL", "debug")
        monkeypatch.setenv("DAYLAYOUT_DEFAULT_START_TIME", "08:30")
        monkeypatch.setenv("DAYLAYOUT_DEFAULT_BREAK_MINUTES", "5")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.default_start_time == time(8, 30)
        assert settings.default_break_minutes == 5

    def test_invalid_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("DAYLAYOUT_LOG_LEVEL", "verbose")
        assert Settings(_env_file=None).log_level == "INFO"

    def test_unknown_timezone_falls_back(self, monkeypatch):
        monkeypatch.setenv("DAYLAYOUT_TIMEZONE", "Mars/Olympus_Mons")
        assert Settings(_env_file=None).timezone == "UTC"

    def test_malformed_timezone_key_falls_back(self, monkeypatch):
        monkeypatch.setenv("DAYLAYOUT_TIMEZONE", "../etc")
        assert Settings(_env_file=None).timezone == "UTC"


class TestResolveTimezone:
    def test_utc_needs_no_database(self):
        assert resolve_timezone("UTC") is UTC
        assert resolve_timezone(None) is UTC

    def test_named_zone(self):
        assert resolve_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")
