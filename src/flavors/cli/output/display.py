"""Display functions for CLI output."""

import typer

from ...domain.environment import Environment
from ...domain.flavors import FlavorSettings
from ...environment import ActiveEnvironment


def _flag(value: bool) -> str:
    return "on" if value else "off"


def display_environment(active: ActiveEnvironment) -> None:
    """Display the selected environment and its settings.

    Args:
        active: Selected environment
    """
    typer.secho(active.display_name, bold=True)
    typer.echo(f"  Base URL:  {active.base_url}")
    typer.echo(f"  Logging:   {_flag(active.logging_enabled)}")
    typer.echo(f"  Debug:     {_flag(active.debug_mode)}")


def display_timeouts(connection_timeout: float, receive_timeout: float) -> None:
    """Display the HTTP timeouts the host client should use."""
    typer.echo(f"  Timeouts:  connect {connection_timeout:g}s, receive {receive_timeout:g}s")


def display_sample_urls(urls: dict[str, str]) -> None:
    """Display a labelled list of endpoint URLs."""
    typer.echo("")
    for label, value in urls.items():
        typer.echo(f"  {label}: {value}")


def display_environment_row(environment: Environment, flavor: FlavorSettings) -> None:
    typer.echo(
        f"{environment.value:<8} {flavor.display_name:<16} {flavor.base_url}  "
        f"logging={_flag(flavor.logging_enabled)} debug={_flag(flavor.debug_mode)}"
    )


def display_error(error: Exception) -> None:
    """Display an error message in red on stderr."""
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
