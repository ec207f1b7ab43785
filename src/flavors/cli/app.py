"""CLI application factory."""

from typing import Optional

import typer

from ..config.settings import LogLevel, Settings, build_settings
from ..domain.environment import Environment
from ..domain.exceptions import InvalidArgumentError
from .commands.environments import environments
from .commands.show import show
from .commands.url import url
from .state import CLIState


def parse_environment(value: Optional[str]) -> Optional[Environment]:
    """Typer callback turning an environment name into an Environment."""
    if value is None:
        return None
    try:
        return Environment.parse(value)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e))


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional pre-built CLIState for testing (wins over settings)

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="flavors",
        help="Inspect environment flavors and build API endpoint URLs",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        env: Optional[str] = typer.Option(
            None,
            "--env",
            "-e",
            envvar="FLAVORS_ENV",
            help="Environment to use: dev, staging or prod",
        ),
        api_key: Optional[str] = typer.Option(
            None,
            "--api-key",
            envvar="FLAVORS_API_KEY",
            help="API key appended by --with-key",
        ),
        log_level: Optional[LogLevel] = typer.Option(
            None,
            "--log-level",
            envvar="FLAVORS_LOG_LEVEL",
            case_sensitive=False,
            help="Override the environment's default log level",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            ctx.obj = state
            return

        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                environment=parse_environment(env),
                api_key=api_key,
                log_level=LogLevel.DEBUG if verbose else log_level,
            )

        ctx.obj = CLIState(resolved_settings)

    app.command()(show)
    app.command()(url)
    app.command()(environments)

    return app
