"""Command-line interface for inspecting flavors and building endpoint URLs."""

from .app import create_cli_app

__all__ = ["cli", "create_cli_app"]


def cli() -> None:
    """Entry point of the ``flavors`` console script and ``python -m flavors``."""
    create_cli_app()(prog_name="flavors")
