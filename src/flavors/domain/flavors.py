"""Fixed per-environment settings table."""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .environment import Environment
from .exceptions import ConfigurationError


class FlavorSettings(BaseModel):
    """Settings record attached to one environment.

    Records are defined once in ``FLAVOR_SETTINGS`` and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        description="Common prefix for every API endpoint, ends with '/'",
    )
    display_name: str = Field(description="Human-readable environment label")
    logging_enabled: bool = Field(
        default=False,
        description="Whether the application should emit informational logs",
    )
    debug_mode: bool = Field(
        default=False,
        description="Whether debug behaviour (verbose logs) is enabled",
    )

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        if not value.endswith("/"):
            raise ValueError(f"base_url must end with '/', got {value!r}")
        return value


def _build_table(
    records: Mapping[Environment, FlavorSettings],
) -> Mapping[Environment, FlavorSettings]:
    """Freeze the table after checking every environment has a record.

    Raises:
        ConfigurationError: If an environment has no settings record
    """
    missing = [env.name for env in Environment if env not in records]
    if missing:
        raise ConfigurationError(
            f"No flavor settings defined for: {', '.join(missing)}"
        )
    return MappingProxyType(dict(records))


FLAVOR_SETTINGS: Mapping[Environment, FlavorSettings] = _build_table(
    {
        Environment.DEVELOPMENT: FlavorSettings(
            base_url="https://dev-api.example.com/api/",
            display_name="🔵 Development",
            logging_enabled=True,
            debug_mode=True,
        ),
        Environment.STAGING: FlavorSettings(
            base_url="https://staging-api.example.com/api/",
            display_name="🟡 Staging",
            logging_enabled=True,
            debug_mode=False,
        ),
        Environment.PRODUCTION: FlavorSettings(
            base_url="https://api.example.com/api/",
            display_name="🟢 Production",
            logging_enabled=False,
            debug_mode=False,
        ),
    }
)


def settings_for(environment: Environment) -> FlavorSettings:
    """Return the settings record for an environment."""
    return FLAVOR_SETTINGS[environment]
