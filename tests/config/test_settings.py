"""Tests for Settings configuration helpers."""

import pytest

from flavors.config.settings import (
    DEFAULT_API_KEY,
    LogLevel,
    Settings,
    build_settings,
    resolve_log_level,
)
from flavors.domain.environment import Environment
from flavors.domain.flavors import settings_for


@pytest.fixture
def default_settings():
    """Provide default Settings for comparison."""
    return Settings()


class TestSettingsDefaults:
    def test_defaults(self, default_settings):
        assert default_settings.environment == Environment.PRODUCTION
        assert default_settings.log_level is None
        assert default_settings.api_key == DEFAULT_API_KEY
        assert default_settings.connection_timeout == 30.0
        assert default_settings.receive_timeout == 30.0


class TestBuildSettings:
    """Test our build_settings helper logic."""

    def test_filters_none_values(self, default_settings):
        """build_settings ignores None overrides."""
        settings = build_settings(
            environment=None,
            log_level=LogLevel.DEBUG,
        )

        assert settings.environment == default_settings.environment
        assert settings.log_level == LogLevel.DEBUG

    def test_applies_all_overrides(self):
        """build_settings applies all non-None overrides."""
        settings = build_settings(
            environment=Environment.STAGING,
            log_level=LogLevel.ERROR,
            api_key="abc",
            receive_timeout=5.0,
        )

        assert settings.environment == Environment.STAGING
        assert settings.log_level == LogLevel.ERROR
        assert settings.api_key == "abc"
        assert settings.receive_timeout == 5.0

    def test_rejects_unknown_fields(self):
        with pytest.raises(TypeError, match="max_workers"):
            build_settings(max_workers=3)


class TestResolveLogLevel:
    """Test log level derivation from flavor flags."""

    @pytest.mark.parametrize(
        "environment, expected",
        [
            (Environment.DEVELOPMENT, LogLevel.DEBUG),
            (Environment.STAGING, LogLevel.INFO),
            (Environment.PRODUCTION, LogLevel.WARNING),
        ],
    )
    def test_derived_from_flavor(self, environment, expected):
        settings = Settings(environment=environment)
        assert resolve_log_level(settings, settings_for(environment)) == expected

    def test_explicit_level_wins(self):
        settings = Settings(
            environment=Environment.DEVELOPMENT, log_level=LogLevel.ERROR
        )
        flavor = settings_for(Environment.DEVELOPMENT)
        assert resolve_log_level(settings, flavor) == LogLevel.ERROR
