"""Pytest configuration and fixtures for flavors tests."""

import loguru
import pytest
from typer.testing import CliRunner

from flavors.app import create_app
from flavors.cli.app import create_cli_app
from flavors.config.settings import LogLevel, Settings
from flavors.domain.environment import Environment
from flavors.endpoints import EndpointBuilder, MovieApi
from flavors.environment import ActiveEnvironment, EnvironmentRegistry, get_registry
from flavors.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_global_state():
    """Reset logging and the process-wide registry around each test."""
    reset_logging()
    get_registry().reset()
    yield
    get_registry().reset()
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def registry(mock_logger):
    """Provide an unset EnvironmentRegistry with a mocked logger."""
    return EnvironmentRegistry(logger=mock_logger)


@pytest.fixture
def production():
    return ActiveEnvironment.select(Environment.PRODUCTION)


@pytest.fixture
def builder(production):
    """Provide an EndpointBuilder bound to the production environment."""
    return EndpointBuilder(production, api_key="test-key")


@pytest.fixture
def apis(builder):
    return MovieApi(builder)


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.STAGING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        api_key="test-key",
    )


@pytest.fixture
def test_app(test_settings, registry):
    """Provide a wired App using a private registry."""
    return create_app(settings=test_settings, registry=registry)


# CLI-specific fixtures


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
