"""Pydantic data models for the admin tooling."""

from src.models.config import (
    AppConfig,
    ListingConfig,
    LoggingConfig,
    SlugConfig,
    StoreConfig,
    WebhookConfig,
)
from src.models.content import (
    Article,
    BackfillResult,
    Book,
    ContentRecord,
    Page,
    WebhookAck,
)

__all__ = [
    # Content
    "ContentRecord",
    "Book",
    "Article",
    "Page",
    "BackfillResult",
    "WebhookAck",
    # Config
    "SlugConfig",
    "StoreConfig",
    "ListingConfig",
    "WebhookConfig",
    "LoggingConfig",
    "AppConfig",
]
