"""Configuration management for the lollipops font subsystem."""

from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..fonts.models import (
    DEFAULT_FONT_URL,
    DEFAULT_SYSTEM_CANDIDATES,
    FALLBACK_CANDIDATE,
    FontCandidate,
)
from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    EmptyConfigFileError,
    InvalidYamlError,
)


class FontConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font resolution configuration."""

    # Search order
    system_candidates: list[FontCandidate] = Field(
        default_factory=lambda: list(DEFAULT_SYSTEM_CANDIDATES),
        description="System font locations, tried in order",
    )
    fallback_name: str = Field(FALLBACK_CANDIDATE.name, description="Fallback font name")
    cache_path: str = Field(FALLBACK_CANDIDATE.path, description="Cached fallback font file")

    # Download
    download_enabled: bool = Field(True, description="Download the fallback font if missing")
    download_url: str = Field(DEFAULT_FONT_URL, description="Fallback font URL")
    download_timeout: float | None = Field(
        None, gt=0.0, description="Download timeout in seconds (None waits indefinitely)"
    )
    license_name: str = Field("Apache Licensed", description="Fallback font license")
    project_url: str = Field(
        "https://github.com/googlefonts/opensans", description="Fallback font project page"
    )

    @field_validator("download_url")
    @classmethod
    def validate_download_url(cls, v):
        """Validate download URL format."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("Download URL must start with https:// or http://")
        return v

    @property
    def fallback_candidate(self) -> FontCandidate:
        """Candidate for the cached fallback font."""
        return FontCandidate(self.fallback_name, self.cache_path)


class DrawingConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DRAWING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Diagram drawing configuration."""

    dpi: int = Field(72, ge=1, description="Output resolution in dots per inch")


class AppConfig(BaseSettings):
    """Main application configuration that loads from multiple sources."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Application log level")

    fonts: FontConfig = Field(default_factory=FontConfig)
    drawing: DrawingConfig = Field(default_factory=DrawingConfig)

    @classmethod
    def load_from_env(cls, env_file: str | Path | None = ".env") -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        if env_file:
            env_file = Path(env_file)
            if env_file.exists():
                return cls(_env_file=env_file)
        return cls()


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with config_path.open() as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e

    if config_data is None:
        raise EmptyConfigFileError(str(config_path))

    # YAML values win over the .env file
    class YamlConfig(config_class):
        model_config = SettingsConfigDict(
            env_file=None,
            case_sensitive=False,
            extra="ignore",
        )

    try:
        return YamlConfig(**config_data)
    except Exception as e:
        raise ConfigLoadError(str(e)) from e


def load_config(yaml_path: str | Path | None = None, env_file: str = ".env") -> AppConfig:
    """Load the application configuration from YAML if given, else from the environment."""
    if yaml_path:
        return load_config_from_yaml(yaml_path, AppConfig)
    return AppConfig.load_from_env(env_file)


def _add_yaml_methods():
    """Add YAML loading methods to configuration classes."""

    @classmethod
    def from_yaml(cls, config_path: str | Path):
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(cls, yaml_path: str | Path | None = None, env_file: str = ".env"):
        """Load configuration from YAML if it exists, else from environment variables."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)

    for config_class in [FontConfig, DrawingConfig, AppConfig]:
        config_class.from_yaml = from_yaml
        config_class.from_env_and_yaml = from_env_and_yaml


_add_yaml_methods()
