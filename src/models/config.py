"""Configuration models for the admin tooling."""

from typing import Literal

from pydantic import BaseModel, Field

from src.constants import (
    DEFAULT_WEBHOOK_HOST,
    DEFAULT_WEBHOOK_PORT,
    PAGE_PREVIEW_LENGTH,
    SLUG_FALLBACK_PREFIX,
    SLUG_MAX_LENGTH,
)


class SlugConfig(BaseModel):
    """Slug generation configuration."""

    max_length: int = Field(default=SLUG_MAX_LENGTH, ge=1, description="Maximum slug length")
    fallback_prefix: str = Field(
        default=SLUG_FALLBACK_PREFIX,
        min_length=1,
        pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$",
        description="Prefix for slugs of titles without letters or digits",
    )


class StoreConfig(BaseModel):
    """Content store configuration."""

    data_dir: str = Field(default="data", description="Directory holding table files")


class ListingConfig(BaseModel):
    """Page listing configuration."""

    preview_length: int = Field(
        default=PAGE_PREVIEW_LENGTH, ge=0, description="Characters of content to preview"
    )


class WebhookConfig(BaseModel):
    """Webhook server configuration."""

    host: str = Field(default=DEFAULT_WEBHOOK_HOST)
    port: int = Field(default=DEFAULT_WEBHOOK_PORT, ge=1, le=65535)


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=False, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str = Field(default="logs/bookshelf.log")
    rotation: str = Field(default="50 MB", description="Log rotation size/time")
    retention: str = Field(default="30 days", description="Log retention period")
    compression: str = Field(default="zip", description="Compression format for rotated logs")


class AppConfig(BaseModel):
    """Complete application configuration."""

    slug: SlugConfig = Field(default_factory=SlugConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    listing: ListingConfig = Field(default_factory=ListingConfig)
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
