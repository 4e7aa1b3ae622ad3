"""Tests for environment configuration."""

import logging

import pytest
from pydantic import ValidationError

from resdiary_notifier.config import Settings, get_config, setup_logging


class TestSettingsDefaults:
    """Tests for default values."""

    def test_defaults(self, required_env):
        """Test defaults applied when only required variables are set."""
        settings = Settings()

        assert settings.disable_pushover is False
        assert settings.pushover_api_key == "app-token"
        assert settings.pushover_recipient == "user-key"
        assert settings.reservation_date == "2024-12-21"
        assert settings.restaurant_names == ["ChesilRectory"]
        assert settings.restaurant_covers == "2"
        assert settings.reservation_ignore_threshold_hour == 21
        assert settings.reservation_ignore_threshold_minute == 0
        assert settings.log_level == "INFO"

    def test_settings_immutable(self, required_env):
        """Test that settings are frozen."""
        settings = Settings()

        with pytest.raises(ValidationError):
            settings.restaurant_covers = "4"


class TestSettingsFromEnvironment:
    """Tests for reading each variable."""

    def test_all_variables(self, required_env, monkeypatch):
        """Test that every recognised variable is read."""
        monkeypatch.setenv("DISABLE_PUSHOVER", "true")
        monkeypatch.setenv("RESERVATION_DATE", "2025-02-14")
        monkeypatch.setenv("RESTAURANT_NAME", "SomewhereElse")
        monkeypatch.setenv("RESTAURANT_COVERS", "4")
        monkeypatch.setenv("RESERVATION_IGNORE_THRESHOLD_HOUR", "20")
        monkeypatch.setenv("RESERVATION_IGNORE_THRESHOLD_MINUTE", "30")

        settings = Settings()

        assert settings.disable_pushover is True
        assert settings.reservation_date == "2025-02-14"
        assert settings.restaurant_names == ["SomewhereElse"]
        assert settings.restaurant_covers == "4"
        assert settings.reservation_ignore_threshold_hour == 20
        assert settings.reservation_ignore_threshold_minute == 30

    def test_minute_threshold_reads_its_own_variable(self, required_env, monkeypatch):
        """Test that the hour variable does not leak into the minute."""
        monkeypatch.setenv("RESERVATION_IGNORE_THRESHOLD_HOUR", "19")

        settings = Settings()

        assert settings.reservation_ignore_threshold_hour == 19
        assert settings.reservation_ignore_threshold_minute == 0

    def test_restaurant_list_is_split_and_trimmed(self, required_env, monkeypatch):
        """Test parsing a comma separated restaurant list."""
        monkeypatch.setenv("RESTAURANT_NAMES", " ChesilRectory ,TheOther,  , Third ")

        settings = Settings()

        assert settings.restaurant_names == ["ChesilRectory", "TheOther", "Third"]

    def test_restaurant_names_preferred_over_name(self, required_env, monkeypatch):
        """Test that RESTAURANT_NAMES wins when both are set."""
        monkeypatch.setenv("RESTAURANT_NAME", "Single")
        monkeypatch.setenv("RESTAURANT_NAMES", "First,Second")

        settings = Settings()

        assert settings.restaurant_names == ["First", "Second"]

    def test_covers_passed_through(self, required_env, monkeypatch):
        """Test that covers are not validated or converted."""
        monkeypatch.setenv("RESTAURANT_COVERS", "two")

        assert Settings().restaurant_covers == "two"


class TestSettingsErrors:
    """Tests for configuration failures."""

    @pytest.mark.parametrize("missing", ["PUSHOVER_API_KEY", "PUSHOVER_RECIPIENT"])
    def test_missing_required(self, required_env, monkeypatch, missing):
        """Test that each required variable is enforced."""
        monkeypatch.delenv(missing)

        with pytest.raises(ValidationError):
            Settings()

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("DISABLE_PUSHOVER", "maybe"),
            ("RESERVATION_IGNORE_THRESHOLD_HOUR", "nine"),
            ("RESERVATION_IGNORE_THRESHOLD_HOUR", "24"),
            ("RESERVATION_IGNORE_THRESHOLD_MINUTE", "60"),
            ("RESERVATION_IGNORE_THRESHOLD_MINUTE", "-1"),
            ("RESERVATION_DATE", "21/12/2024"),
            ("RESERVATION_DATE", "2024-02-30"),
            ("RESTAURANT_NAMES", " , "),
        ],
    )
    def test_malformed_values(self, required_env, monkeypatch, name, value):
        """Test that values failing coercion are rejected."""
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            Settings()


class TestGetConfig:
    """Tests for the cached config accessor."""

    def test_get_config_caches(self, required_env):
        """Test that get_config returns the same instance."""
        assert get_config() is get_config()

    def test_setup_logging(self, required_env, monkeypatch):
        """Test that setup_logging quiets httpx."""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        setup_logging(Settings())

        assert logging.getLogger("httpx").level == logging.WARNING
