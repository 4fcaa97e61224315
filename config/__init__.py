"""Application configuration utilities."""

from .settings import DEFAULT_TRIP_PATH, Settings, get_settings

__all__ = [
    "DEFAULT_TRIP_PATH",
    "Settings",
    "get_settings",
]
