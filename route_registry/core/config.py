"""
Configuration management using Pydantic Settings.

Two layers:
- SpecConfig: explicit document metadata passed to RouteRegistry at
  construction. The registry never reads package metadata or files.
- Settings: optional environment-driven application settings (logging,
  environment, default document metadata) for applications that want
  to configure the registry from the environment.

Usage:
    from route_registry.core.config import SpecConfig, get_settings

    # Explicit
    config = SpecConfig(title="Pets API", version="1.2.0")

    # From environment (ROUTE_REGISTRY_SPEC_TITLE, ...)
    config = get_settings().spec_config()
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from route_registry.core.enums import Environment

SWAGGER_VERSION = "2.0"

INTERNAL_API_KEY = "internalApiKey"


def _default_security_definitions() -> dict[str, dict[str, Any]]:
    return {
        INTERNAL_API_KEY: {
            "type": "apiKey",
            "in": "header",
            "name": "api_key",
        }
    }


@dataclass(frozen=True, kw_only=True)
class SpecConfig:
    """Top-level document metadata.

    Attributes:
        title: API title (info.title)
        description: API description (info.description)
        version: API version (info.version)
        contact: Contact object (info.contact), e.g. {"name": "..."}
        license: License object (info.license), e.g. {"name": "MIT"}
        host: Host serving the API; omitted from the document when None
        base_path: Base path; also prefixed to authorization resources
        schemes: Transfer protocols
        produces: MIME types the API can produce
        security_definitions: Swagger securityDefinitions object

    Examples:
        >>> SpecConfig(title="Pets API", version="1.0.0")
        >>> SpecConfig(title="Pets API", base_path="/api", schemes=("https",))
    """

    title: str = "API"
    description: str = ""
    version: str = "0.1.0"
    contact: dict[str, str] = field(default_factory=dict)
    license: dict[str, str] = field(default_factory=dict)
    host: str | None = None
    base_path: str = "/"
    schemes: tuple[str, ...] = ("http", "https")
    produces: tuple[str, ...] = ("application/json",)
    security_definitions: dict[str, dict[str, Any]] = field(
        default_factory=_default_security_definitions
    )

    @property
    def resource_prefix(self) -> str:
        """Prefix for authorization resources ('' when base path is '/')."""
        return self.base_path.rstrip("/")


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Loads configuration from environment variables prefixed with
    ``ROUTE_REGISTRY_``.

    Returns:
        Settings: Application configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Document metadata
    spec_title: str = Field(default="API", description="Document info.title")
    spec_description: str = Field(default="", description="Document info.description")
    spec_version: str = Field(default="0.1.0", description="Document info.version")
    spec_host: str | None = Field(default=None, description="Document host")
    api_prefix: str = Field(default="/", description="Document basePath")

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_REGISTRY_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """
        Ensure the prefix is absolute.

        Args:
            v: Prefix string.

        Returns:
            str: Prefix starting with '/'.
        """
        return v if v.startswith("/") else f"/{v}"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def uses_json_logs(self) -> bool:
        """JSON log rendering for testing and CI."""
        return self.environment in {Environment.TESTING, Environment.CI}

    def spec_config(self) -> SpecConfig:
        """Build an explicit SpecConfig from these settings.

        Returns:
            SpecConfig: Document metadata for RouteRegistry.
        """
        return SpecConfig(
            title=self.spec_title,
            description=self.spec_description,
            version=self.spec_version,
            host=self.spec_host,
            base_path=self.api_prefix,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Returns:
        Settings: Application settings singleton.
    """
    return Settings()
