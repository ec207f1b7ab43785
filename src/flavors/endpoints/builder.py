"""URL construction on top of the selected environment's base URL."""

import typing as t
from urllib.parse import quote, unquote_plus, urlencode, urlsplit, urlunsplit

from ..domain.exceptions import InvalidArgumentError

API_KEY_PARAM = "api_key"

_FORBIDDEN_SEGMENT_CHARS = frozenset("?#")
_DOT_COMPONENTS = frozenset({".", ".."})


class BaseUrlSource(t.Protocol):
    """Anything exposing the current base URL (registry or ActiveEnvironment)."""

    @property
    def base_url(self) -> str: ...


def _clean_segment(segment: object) -> str:
    """Strip outer separators from a path segment, validate and percent-encode it.

    Raises:
        InvalidArgumentError: If the segment is not a usable path component
    """
    if not isinstance(segment, str):
        raise InvalidArgumentError(
            f"Path segment must be a string, got {type(segment).__name__}"
        )

    cleaned = segment.strip("/")
    if not cleaned:
        raise InvalidArgumentError(f"Empty path segment: {segment!r}")
    if "//" in cleaned:
        raise InvalidArgumentError(f"Path segment has an empty component: {segment!r}")
    if any(ch.isspace() or ch in _FORBIDDEN_SEGMENT_CHARS for ch in cleaned):
        raise InvalidArgumentError(
            f"Path segment contains whitespace, '?' or '#': {segment!r}"
        )
    if any(part in _DOT_COMPONENTS for part in cleaned.split("/")):
        raise InvalidArgumentError(f"Path segment must not be . or ..: {segment!r}")
    return quote(cleaned, safe="/")


def _render_resource_id(resource_id: object) -> str:
    # bool is an int subclass but never a valid identifier
    if isinstance(resource_id, bool) or not isinstance(resource_id, int):
        raise InvalidArgumentError(
            f"Resource id must be an integer, got {type(resource_id).__name__}"
        )
    if resource_id < 0:
        raise InvalidArgumentError(f"Resource id must not be negative: {resource_id}")
    return str(resource_id)


class EndpointBuilder:
    """Builds request URLs from the current base URL.

    The base URL is read from `source` on every call, so a builder wired to
    an `EnvironmentRegistry` raises `UnconfiguredError` until an environment
    is selected. Builders hold no other state and are safe to share between
    threads.

    Example:
        >>> from flavors.domain import Environment
        >>> from flavors.environment import ActiveEnvironment
        >>> builder = EndpointBuilder(ActiveEnvironment.select(Environment.PRODUCTION))
        >>> builder.build_path(["movie", "popular"])
        'https://api.example.com/api/movie/popular'
        >>> builder.build_resource_path(["movie"], 550)
        'https://api.example.com/api/movie/550'
    """

    def __init__(self, source: BaseUrlSource, api_key: str | None = None) -> None:
        self._source = source
        self._api_key = api_key

    @property
    def base_url(self) -> str:
        return self._source.base_url

    def build_path(self, segments: t.Sequence[str]) -> str:
        """Join the base URL and `segments` with single '/' separators.

        An empty sequence returns the base URL unchanged.

        Raises:
            InvalidArgumentError: If any segment is malformed
            UnconfiguredError: If the source has no environment selected
        """
        if isinstance(segments, str):
            raise InvalidArgumentError(
                "segments must be a sequence of strings, not a single string"
            )

        cleaned = [_clean_segment(segment) for segment in segments]
        base = self.base_url
        if not cleaned:
            return base
        return f"{base.rstrip('/')}/{'/'.join(cleaned)}"

    def build_resource_path(
        self,
        segments: t.Sequence[str],
        resource_id: int,
        trailing: t.Sequence[str] = (),
    ) -> str:
        """Build a path ending in a resource id, optionally followed by `trailing`.

        Examples:
            ``build_resource_path(["movie"], 550)`` -> ``.../movie/550``
            ``build_resource_path(["movie"], 550, ["videos"])`` -> ``.../movie/550/videos``

        Raises:
            InvalidArgumentError: If the id is negative or not an integer, or a
                segment is malformed
        """
        rendered_id = _render_resource_id(resource_id)
        return self.build_path([*segments, rendered_id, *trailing])

    def with_query_params(
        self, url: str, params: t.Mapping[str, str | int | float]
    ) -> str:
        """Merge `params` into the query string of `url`.

        New values replace existing parameters of the same name and are
        appended after the others. Unrelated parameters (repeated ones
        included) and the fragment are kept as written. New keys and values
        are percent-encoded (space becomes ``%20``). Applying the same
        params again yields the same URL.

        Raises:
            InvalidArgumentError: If `url` has no scheme or host, or a key is empty
        """
        try:
            parts = urlsplit(url)
        except ValueError as exc:
            raise InvalidArgumentError(f"Malformed URL: {url!r}") from exc
        if not parts.scheme or not parts.netloc:
            raise InvalidArgumentError(f"URL must be absolute: {url!r}")

        if not params:
            return url

        new_pairs = []
        for key, value in params.items():
            if not key:
                raise InvalidArgumentError("Query parameter names must not be empty")
            new_pairs.append((str(key), str(value)))
        replaced = {key for key, _ in new_pairs}

        # Unrelated pairs are kept byte-for-byte, repeated keys included
        kept = [
            pair
            for pair in parts.query.split("&")
            if pair and unquote_plus(pair.partition("=")[0]) not in replaced
        ]
        kept.append(urlencode(new_pairs, quote_via=quote, safe=""))
        return urlunsplit(parts._replace(query="&".join(kept)))

    def with_api_key(self, url: str) -> str:
        """Add the configured API key as the ``api_key`` query parameter.

        Raises:
            InvalidArgumentError: If the builder has no API key
        """
        if not self._api_key:
            raise InvalidArgumentError("No API key configured for this builder")
        return self.with_query_params(url, {API_KEY_PARAM: self._api_key})
