"""Deployment environments (flavors) the application can be built for."""

from enum import Enum

from .exceptions import InvalidArgumentError

_ALIASES = {
    "development": "dev",
    "production": "prod",
}


class Environment(Enum):
    """Named deployment target.

    Values are the short names accepted on the command line and in the
    ``FLAVORS_ENV`` environment variable.
    """

    DEVELOPMENT = "dev"
    STAGING = "staging"
    PRODUCTION = "prod"

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """Resolve an environment from its value, member name or alias.

        Matching is case-insensitive.

        Examples:
            >>> Environment.parse("dev")
            <Environment.DEVELOPMENT: 'dev'>
            >>> Environment.parse("Production")
            <Environment.PRODUCTION: 'prod'>

        Raises:
            InvalidArgumentError: If the name matches no environment
        """
        normalized = value.strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        choices = ", ".join(member.value for member in cls)
        raise InvalidArgumentError(
            f"Unknown environment {value!r} (expected one of: {choices})"
        )
