from dataclasses import dataclass, fields
from enum import Enum

from ..domain.environment import Environment
from ..domain.flavors import FlavorSettings

DEFAULT_API_KEY = "your_api_key_here"


class LogLevel(str, Enum):
    """Log levels understood by the logging setup."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Startup settings for the host application.

    `environment` picks the flavor. `log_level` left as None means the level
    is derived from the flavor's logging and debug flags.
    """

    environment: Environment = Environment.PRODUCTION
    log_level: LogLevel | None = None
    api_key: str = DEFAULT_API_KEY
    connection_timeout: float = 30.0  # seconds
    receive_timeout: float = 30.0  # seconds


def build_settings(**overrides) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets CLI options that were not given fall back to the defaults.

    Raises:
        TypeError: If an override does not name a Settings field
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)


def resolve_log_level(settings: Settings, flavor: FlavorSettings) -> LogLevel:
    """Pick the effective log level.

    An explicit `settings.log_level` wins. Otherwise debug flavors log at
    DEBUG, flavors with logging enabled at INFO, and the rest at WARNING.
    """
    if settings.log_level is not None:
        return settings.log_level
    if flavor.debug_mode:
        return LogLevel.DEBUG
    if flavor.logging_enabled:
        return LogLevel.INFO
    return LogLevel.WARNING
