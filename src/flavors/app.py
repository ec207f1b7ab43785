from dataclasses import dataclass

from .config.settings import Settings
from .endpoints import EndpointBuilder, MovieApi
from .environment import ActiveEnvironment, EnvironmentRegistry, get_registry
from .infrastructure.logging import get_logger, setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Created once at startup by `create_app` and handed to whatever needs
    configuration or endpoint URLs, instead of reading globals.
    """

    settings: Settings
    environment: ActiveEnvironment
    endpoints: EndpointBuilder
    apis: MovieApi


def create_app(
    settings: Settings | None = None,
    registry: EnvironmentRegistry | None = None,
) -> App:
    """Select the configured environment and wire the application.

    Args:
        settings: Startup settings, defaults to `Settings()`
        registry: Registry to record the selection in, defaults to the
            process-wide one

    Returns:
        The wired App
    """
    settings = settings or Settings()
    registry = registry or get_registry()

    active = registry.select(settings.environment)
    setup_logging(settings, active.settings)

    endpoints = EndpointBuilder(active, api_key=settings.api_key)
    app = App(
        settings=settings,
        environment=active,
        endpoints=endpoints,
        apis=MovieApi(endpoints),
    )

    get_logger(__name__).info(
        f"Running {active.display_name} against {active.base_url}"
    )
    return app
