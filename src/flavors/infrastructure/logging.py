"""Loguru-based logging setup.

The global loguru logger is configured once; modules obtain a logger bound
to their name through `get_logger`. Code the host application calls
directly uses `bind_logger`, which leaves the host's handlers alone.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel, Settings, resolve_log_level
from ..domain.environment import Environment
from ..domain.flavors import FlavorSettings, settings_for

if t.TYPE_CHECKING:
    from loguru import Logger

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
_PRODUCTION_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}"

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru's handlers with a single stderr sink.

    Production gets a plain, uncoloured format; other environments get
    colours and millisecond timestamps.
    """
    global _configured

    is_production = environment == Environment.PRODUCTION
    logger.remove()
    logger.configure(extra={"name": "flavors"})
    logger.add(
        sys.stderr,
        level=level.value,
        format=_PRODUCTION_FORMAT if is_production else _DEVELOPMENT_FORMAT,
        colorize=not is_production,
        backtrace=not is_production,
        diagnose=not is_production,
    )
    _configured = True


def setup_logging(settings: Settings, flavor: FlavorSettings | None = None) -> None:
    """Configure logging from application settings.

    Args:
        settings: Application settings
        flavor: Settings record of the selected environment, looked up from
            `settings.environment` when omitted
    """
    flavor = flavor or settings_for(settings.environment)
    configure_logger(
        level=resolve_log_level(settings, flavor),
        environment=settings.environment,
    )


def get_logger(name: str) -> "Logger":
    """Return a logger bound to `name`, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def bind_logger(name: str) -> "Logger":
    """Return a logger bound to `name` without touching handlers.

    For code the host application calls directly; messages go to whatever
    sinks the host has configured.
    """
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all handlers and mark logging as unconfigured."""
    global _configured
    logger.remove()
    _configured = False
