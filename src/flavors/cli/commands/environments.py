"""Environments command implementation."""

from ...domain.flavors import FLAVOR_SETTINGS
from ..output.display import display_environment_row


def environments() -> None:
    """List every environment with its base URL and flags."""
    for environment, flavor in FLAVOR_SETTINGS.items():
        display_environment_row(environment, flavor)
