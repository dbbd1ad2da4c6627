"""Custom exceptions for the lollipops font subsystem."""

from typing import Any


class LollipopsError(Exception):
    """Base exception for all lollipops errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(LollipopsError):
    """Exception raised for configuration errors."""


class FontError(LollipopsError):
    """Exception raised for font loading and resolution errors."""


class FontReadError(FontError):
    """Exception raised when a font file cannot be read."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to read font file {path}: {error}", details={"path": path})


class FontParseError(FontError):
    """Exception raised when font data cannot be parsed."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to parse font file {path}: {error}", details={"path": path})


class FontNotFoundError(FontError):
    """Exception raised when no usable font could be found."""

    def __init__(self, font_file: str = "Arial.ttf"):
        super().__init__(f"unable to find {font_file}")


class FontDownloadError(FontError):
    """Exception raised when the fallback font download fails."""


class FontDownloadNetworkError(FontDownloadError):
    """Exception raised when the download request never got a response."""

    def __init__(self, url: str, error: str):
        super().__init__(f"Failed to fetch font from {url}: {error}", details={"url": url})


class EmptyFontDownloadError(FontDownloadError):
    """Exception raised when the download produced no data."""

    def __init__(self, url: str):
        super().__init__(f"Downloaded font from {url} is empty", details={"url": url})


class FontDownloadWriteError(FontDownloadError):
    """Exception raised when the downloaded font cannot be written to disk."""

    def __init__(self, path: str, error: str):
        super().__init__(
            f"Failed to write downloaded font to {path}: {error}", details={"path": path}
        )


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")
