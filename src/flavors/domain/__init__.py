"""Domain layer - environments, settings table and exceptions."""

from .environment import Environment
from .exceptions import (
    ConfigurationError,
    FlavorsError,
    InvalidArgumentError,
    UnconfiguredError,
)
from .flavors import FLAVOR_SETTINGS, FlavorSettings, settings_for

__all__ = [
    # Models
    "Environment",
    "FlavorSettings",
    "FLAVOR_SETTINGS",
    "settings_for",
    # Exceptions
    "ConfigurationError",
    "FlavorsError",
    "InvalidArgumentError",
    "UnconfiguredError",
]
