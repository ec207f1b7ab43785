"""URL command implementation."""

from typing import List, Optional

import typer

from ...domain.exceptions import FlavorsError
from ..output.display import display_error
from ..state import CLIState


def parse_param(param: str) -> tuple[str, str]:
    """Split a ``key=value`` option into its parts.

    Raises:
        typer.BadParameter: If the option has no '=' or an empty key
    """
    key, sep, value = param.partition("=")
    if not sep or not key:
        raise typer.BadParameter(
            f"{param!r} is not in key=value form", param_hint="'--param'"
        )
    return key, value


def url(
    ctx: typer.Context,
    segments: Optional[List[str]] = typer.Argument(
        None, help="Path segments, e.g. movie popular"
    ),
    resource_id: Optional[int] = typer.Option(
        None, "--id", help="Resource id appended after the segments"
    ),
    after: Optional[List[str]] = typer.Option(
        None, "--after", help="Segments appended after --id (repeatable)"
    ),
    params: Optional[List[str]] = typer.Option(
        None, "--param", "-p", help="Query parameter as key=value (repeatable)"
    ),
    with_key: bool = typer.Option(
        False, "--with-key", help="Append the configured API key"
    ),
) -> None:
    """Build an endpoint URL for the selected environment.

    Examples:
        flavors url movie popular
        flavors url movie --id 550 --after videos
        flavors url search movie -p "query=sci-fi & fantasy" --with-key
    """
    state: CLIState = ctx.obj
    query = dict(parse_param(param) for param in params or [])

    try:
        builder = state.app.endpoints
        if resource_id is not None:
            result = builder.build_resource_path(
                segments or [], resource_id, trailing=after or []
            )
        else:
            result = builder.build_path([*(segments or []), *(after or [])])
        result = builder.with_query_params(result, query)
        if with_key:
            result = builder.with_api_key(result)
    except FlavorsError as e:
        display_error(e)
        raise typer.Exit(code=1)

    typer.echo(result)
