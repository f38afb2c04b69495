"""Admin operations built on the content store."""

from src.services.backfill import TABLE_MODELS, backfill_slugs
from src.services.listing import format_page_listing, list_pages
from src.services.webhook import create_app, handle_new_review

__all__ = [
    "TABLE_MODELS",
    "backfill_slugs",
    "list_pages",
    "format_page_listing",
    "create_app",
    "handle_new_review",
]
