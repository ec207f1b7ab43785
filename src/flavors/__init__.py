"""Environment flavors and API endpoint URL construction."""

from .app import App, create_app
from .config.settings import LogLevel, Settings, build_settings
from .domain import (
    Environment,
    FlavorSettings,
    FlavorsError,
    InvalidArgumentError,
    UnconfiguredError,
)
from .endpoints import EndpointBuilder, MovieApi
from .environment import ActiveEnvironment, EnvironmentRegistry, select_environment

__all__ = [
    # Wiring
    "App",
    "create_app",
    # Configuration
    "LogLevel",
    "Settings",
    "build_settings",
    # Environments
    "Environment",
    "FlavorSettings",
    "ActiveEnvironment",
    "EnvironmentRegistry",
    "select_environment",
    # Endpoints
    "EndpointBuilder",
    "MovieApi",
    # Exceptions
    "FlavorsError",
    "InvalidArgumentError",
    "UnconfiguredError",
]
