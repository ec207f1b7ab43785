"""Environment selection and read access to the selected settings."""

from .registry import (
    ActiveEnvironment,
    EnvironmentRegistry,
    base_url,
    current_environment,
    display_name,
    get_registry,
    is_debug_mode,
    is_development,
    is_logging_enabled,
    is_production,
    is_staging,
    select_environment,
)

__all__ = [
    # Classes
    "ActiveEnvironment",
    "EnvironmentRegistry",
    # Default registry
    "get_registry",
    "select_environment",
    "current_environment",
    "base_url",
    "display_name",
    "is_logging_enabled",
    "is_debug_mode",
    "is_development",
    "is_staging",
    "is_production",
]
