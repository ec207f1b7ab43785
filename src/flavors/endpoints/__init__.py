"""Endpoint URL construction."""

from . import segments
from .builder import API_KEY_PARAM, BaseUrlSource, EndpointBuilder
from .catalog import MovieApi

__all__ = [
    "API_KEY_PARAM",
    "BaseUrlSource",
    "EndpointBuilder",
    "MovieApi",
    "segments",
]
