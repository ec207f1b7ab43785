"""Selected-environment registry.

The host application selects its environment once at startup. Selection
produces an immutable `ActiveEnvironment`; the registry only holds a
reference to it, so readers always see one complete settings record.
"""

import typing as t
from dataclasses import dataclass

from ..domain.environment import Environment
from ..domain.exceptions import UnconfiguredError
from ..domain.flavors import FlavorSettings, settings_for
from ..infrastructure.logging import bind_logger

if t.TYPE_CHECKING:
    from loguru import Logger


@dataclass(frozen=True)
class ActiveEnvironment:
    """A selected environment together with its settings record.

    Build one with `ActiveEnvironment.select` (or `EnvironmentRegistry.select`)
    so `settings` always matches `environment`.
    """

    environment: Environment
    settings: FlavorSettings

    @classmethod
    def select(cls, environment: Environment) -> "ActiveEnvironment":
        return cls(environment=environment, settings=settings_for(environment))

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def display_name(self) -> str:
        return self.settings.display_name

    @property
    def logging_enabled(self) -> bool:
        return self.settings.logging_enabled

    @property
    def debug_mode(self) -> bool:
        return self.settings.debug_mode

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_staging(self) -> bool:
        return self.environment == Environment.STAGING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


class EnvironmentRegistry:
    """Holds the environment selected for this process.

    Accessors raise `UnconfiguredError` until `select` is called. The
    `is_development`/`is_staging`/`is_production` predicates never raise and
    report False while nothing is selected.

    Re-selection is allowed and replaces the previous selection; switching to
    a different environment is logged as a warning.
    """

    def __init__(self, logger: t.Optional["Logger"] = None) -> None:
        self._active: ActiveEnvironment | None = None
        self._logger = logger or bind_logger(__name__)

    def select(self, environment: Environment) -> ActiveEnvironment:
        """Select `environment` and return the resulting ActiveEnvironment."""
        active = ActiveEnvironment.select(environment)
        previous = self._active

        if previous is not None and previous.environment != environment:
            self._logger.warning(
                f"Environment re-selected: {previous.environment.value} -> "
                f"{environment.value}"
            )
        elif previous is not None:
            self._logger.debug(f"Environment {environment.value} selected again")
        else:
            self._logger.debug(f"Environment selected: {environment.value}")

        self._active = active
        return active

    def reset(self) -> None:
        """Forget the current selection."""
        self._active = None

    @property
    def is_configured(self) -> bool:
        return self._active is not None

    @property
    def current(self) -> ActiveEnvironment:
        """The active environment.

        Raises:
            UnconfiguredError: If no environment has been selected
        """
        if self._active is None:
            raise UnconfiguredError(
                "No environment selected; call select_environment() at startup"
            )
        return self._active

    @property
    def current_environment(self) -> Environment:
        return self.current.environment

    @property
    def settings(self) -> FlavorSettings:
        return self.current.settings

    @property
    def base_url(self) -> str:
        return self.current.base_url

    @property
    def display_name(self) -> str:
        return self.current.display_name

    @property
    def is_logging_enabled(self) -> bool:
        return self.current.logging_enabled

    @property
    def is_debug_mode(self) -> bool:
        return self.current.debug_mode

    @property
    def is_development(self) -> bool:
        return self._active is not None and self._active.is_development

    @property
    def is_staging(self) -> bool:
        return self._active is not None and self._active.is_staging

    @property
    def is_production(self) -> bool:
        return self._active is not None and self._active.is_production

    def __repr__(self) -> str:
        selected = self._active.environment.value if self._active else None
        return f"<EnvironmentRegistry environment={selected!r}>"


_default_registry = EnvironmentRegistry()


def get_registry() -> EnvironmentRegistry:
    """Return the process-wide registry."""
    return _default_registry


def select_environment(environment: Environment) -> ActiveEnvironment:
    return _default_registry.select(environment)


def current_environment() -> Environment:
    return _default_registry.current_environment


def base_url() -> str:
    return _default_registry.base_url


def display_name() -> str:
    return _default_registry.display_name


def is_logging_enabled() -> bool:
    return _default_registry.is_logging_enabled


def is_debug_mode() -> bool:
    return _default_registry.is_debug_mode


def is_development() -> bool:
    return _default_registry.is_development


def is_staging() -> bool:
    return _default_registry.is_staging


def is_production() -> bool:
    return _default_registry.is_production
