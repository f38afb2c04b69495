"""Application-wide constants.

Contains configuration constants used across the codebase to avoid magic numbers
and maintain consistency.
"""

# Slug Generation
SLUG_FALLBACK_PREFIX = "article"  # Prefix used when a title yields no slug characters
SLUG_MAX_LENGTH = 200  # Identifier length limit of the content store
SLUG_SEPARATOR = "-"

# Content Store
DATA_DIR_ENV_VAR = "BOOKSHELF_DATA_DIR"

# Page Listing
PAGE_PREVIEW_LENGTH = 50  # Characters of page content shown in listings

# Webhooks
NEW_REVIEW_WEBHOOK_PATH = "/api/webhooks/new-review"
DEFAULT_WEBHOOK_HOST = "127.0.0.1"
DEFAULT_WEBHOOK_PORT = 8080
