"""Application configuration."""

from .settings import LogLevel, Settings, build_settings, resolve_log_level

__all__ = ["LogLevel", "Settings", "build_settings", "resolve_log_level"]
