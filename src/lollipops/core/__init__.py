"""Core components shared by the lollipops font subsystem."""

from .exceptions import (
    ConfigurationError,
    FontDownloadError,
    FontError,
    FontNotFoundError,
    FontParseError,
    FontReadError,
    LollipopsError,
)

__all__ = [
    "ConfigurationError",
    "FontDownloadError",
    "FontError",
    "FontNotFoundError",
    "FontParseError",
    "FontReadError",
    "LollipopsError",
]
