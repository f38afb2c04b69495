"""Page listing for the console."""

from src.constants import PAGE_PREVIEW_LENGTH
from src.models.content import Page
from src.utils.logging import get_logger
from src.utils.store import ContentStore

logger = get_logger(__name__)

SEPARATOR_LINE = "-------------"


def list_pages(store: ContentStore) -> list[Page]:
    """Return every stored page."""
    pages = store.list_records("pages", Page)
    logger.info("Pages loaded", count=len(pages))
    return pages


def format_page_listing(pages: list[Page], preview_length: int = PAGE_PREVIEW_LENGTH) -> str:
    """
    Render pages as a console listing with a short content preview.

    Args:
        pages: Pages to render
        preview_length: Characters of content shown per page

    Returns:
        Multi-line listing, one block per page

    Examples:
        >>> print(format_page_listing([Page(id=1, title="About", slug="about", content="Hi")]))
        --- Pages ---
        Title: "About" | Slug: "about"
        Content Preview: Hi...
        -------------
    """
    lines = ["--- Pages ---"]

    for page in pages:
        preview = (page.content or "")[:preview_length]
        lines.append(f'Title: "{page.title}" | Slug: "{page.slug or ""}"')
        lines.append(f"Content Preview: {preview}...")
        lines.append(SEPARATOR_LINE)

    return "\n".join(lines)
