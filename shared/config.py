"""
Shared configuration management for the club site service.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
        populate_by_name=True,
    )

    # Environment
    env: str = Field(default="local", validation_alias="SITE_ENV")
    log_level: str = Field(default="info", validation_alias="SITE_LOG_LEVEL")

    # Headless CMS
    wordpress_graphql_url: str = Field(default="", validation_alias="WORDPRESS_GRAPHQL_URL")
    wordpress_url: str = Field(default="", validation_alias="WORDPRESS_URL")
    content_cache_ttl: int = Field(default=60, validation_alias="SITE_CONTENT_CACHE_TTL")
    http_timeout: float = Field(default=10.0, validation_alias="SITE_HTTP_TIMEOUT")

    # Webhook
    revalidation_secret: str = Field(default="", validation_alias="REVALIDATION_SECRET")

    # Contact Form 7
    cf7_form_id: str = Field(default="", validation_alias="CF7_FORM_ID")

    def wordpress_base_url(self) -> str:
        """Return the WordPress site root, derived from the GraphQL URL when unset."""
        if self.wordpress_url:
            return self.wordpress_url.rstrip("/")
        return self.wordpress_graphql_url.replace("/graphql", "").rstrip("/")


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port, **overrides)
