"""Show command implementation."""

import typer

from ..output.display import (
    display_environment,
    display_sample_urls,
    display_timeouts,
)
from ..state import CLIState


def show(ctx: typer.Context) -> None:
    """Show the selected environment, client timeouts and sample endpoint URLs.

    Examples:
        flavors show
        flavors --env dev show
    """
    state: CLIState = ctx.obj
    app = state.app

    display_environment(app.environment)
    display_timeouts(
        app.settings.connection_timeout, app.settings.receive_timeout
    )
    display_sample_urls(
        {
            "Now playing": app.apis.movies_now_playing,
            "Popular": app.apis.movies_popular,
        }
    )
