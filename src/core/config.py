"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a default so the service starts with no environment
at all; deployments override what they need.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    # Access config
    namespace = settings.media_type_namespace
    base = settings.greeting_base_path

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from datetime import date
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=8080,
        description="Server bind port",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    instance_id: str | None = Field(
        default=None,
        description="Instance identifier added to log lines. Defaults to hostname if not set.",
    )

    # Application metadata
    app_name: str = Field(
        default="Flip Greeting Service",
        description="Application name",
    )
    app_version: str = Field(
        default="1.3.0",
        description="Application version",
    )
    docs_enabled: bool = Field(
        default=False,
        description="Serve OpenAPI docs at /docs and /redoc",
    )

    # OpenAPI document metadata
    api_description: str = Field(
        default="Greeting service with media-type versioned endpoints",
        description="Description shown in the OpenAPI document",
    )
    terms_of_service_url: str | None = Field(
        default=None,
        description="Terms of service URL",
    )
    contact_name: str | None = Field(
        default="FlipFoundry",
        description="API contact name",
    )
    contact_url: str | None = Field(
        default=None,
        description="API contact URL",
    )
    contact_email: str | None = Field(
        default=None,
        description="API contact email",
    )
    license_name: str | None = Field(
        default=None,
        description="License name (license URL is ignored without it)",
    )
    license_url: str | None = Field(
        default=None,
        description="License URL",
    )
    external_docs_description: str | None = Field(
        default=None,
        description="Description of the external documentation link",
    )
    external_docs_url: str | None = Field(
        default=None,
        description="External documentation URL",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:8080",
        description="Public base URL of the service",
    )
    media_type_namespace: str = Field(
        default="flipfoundry",
        description="Vendor namespace in application/vnd.<namespace>.<resource>.v<N>+json",
    )
    greeting_base_path: str = Field(
        default="/flip/greeting",
        description="Route prefix of the greeting resource",
    )
    departing_base_path: str = Field(
        default="/flip/departing",
        description="Route prefix of the departing resource",
    )
    correlation_header: str = Field(
        default="X-Correlation-ID",
        description="Request/response header carrying the correlation id",
    )

    # Deprecation lifecycle
    legacy_depart_sunset: date | None = Field(
        default=None,
        description="Sunset date announced for the legacy greeting depart route",
    )

    model_config = SettingsConfigDict(
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
            v: Log level name (any case).

        Returns:
            str: Upper-case log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("api_base_url", "greeting_base_path", "departing_base_path")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs and route prefixes.

        Args:
            v: URL or path string.

        Returns:
            str: Value without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("media_type_namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """
        Validate the vendor namespace is a single lower-case token.

        Args:
            v: Namespace string.

        Returns:
            str: Lower-cased namespace.

        Raises:
            ValueError: If the namespace is empty or contains separators.
        """
        namespace = v.strip().lower()
        if not namespace or any(c in namespace for c in "/+;, "):
            raise ValueError("media_type_namespace must be a single token")
        return namespace

    @property
    def openapi_contact(self) -> dict[str, str] | None:
        """
        Contact object for the OpenAPI info section.

        Returns:
            dict[str, str] | None: Set contact fields, or None when none are set.
        """
        fields = {
            "name": self.contact_name,
            "url": self.contact_url,
            "email": self.contact_email,
        }
        contact = {key: value for key, value in fields.items() if value}
        return contact or None

    @property
    def openapi_license(self) -> dict[str, str] | None:
        """License object for the OpenAPI info section, None without a name."""
        if not self.license_name:
            return None
        license_info = {"name": self.license_name}
        if self.license_url:
            license_info["url"] = self.license_url
        return license_info

    @property
    def openapi_external_docs(self) -> dict[str, str] | None:
        """External documentation object, None without a URL."""
        if not self.external_docs_url:
            return None
        external_docs = {"url": self.external_docs_url}
        if self.external_docs_description:
            external_docs["description"] = self.external_docs_description
        return external_docs

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
