"""Custom exceptions for the flavors package."""


class FlavorsError(Exception):
    """Base exception for flavors errors."""

    pass


class UnconfiguredError(FlavorsError):
    """Raised when environment settings are read before an environment is selected.

    The host application must call ``select_environment`` (or ``create_app``)
    once at startup before reading any configuration value.
    """

    pass


class InvalidArgumentError(FlavorsError, ValueError):
    """Raised when a caller passes a malformed argument.

    Covers malformed path segments, negative resource identifiers,
    URLs that cannot be parsed and unknown environment names.
    """

    pass


class ConfigurationError(FlavorsError):
    """Raised when the static flavor table is incomplete."""

    pass
