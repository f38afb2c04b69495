"""Unit tests for the page listing."""

from src.models.content import Page
from src.services.listing import format_page_listing, list_pages
from src.utils.store import ContentStore


class TestListPages:
    """Test list_pages function."""

    def test_empty_store(self, content_store: ContentStore) -> None:
        """Test listing without a pages table."""
        assert list_pages(content_store) == []

    def test_returns_stored_pages(
        self, content_store: ContentStore, sample_pages: list[Page]
    ) -> None:
        """Test stored pages are returned."""
        content_store.save_records("pages", sample_pages)
        assert [page.slug for page in list_pages(content_store)] == ["about", "privacy-policy"]


class TestFormatPageListing:
    """Test format_page_listing function."""

    def test_header_only_when_empty(self) -> None:
        """Test listing with no pages."""
        assert format_page_listing([]) == "--- Pages ---"

    def test_page_block(self, sample_pages: list[Page]) -> None:
        """Test each page renders title, slug, preview and separator."""
        lines = format_page_listing(sample_pages).splitlines()

        assert lines[1] == 'Title: "About" | Slug: "about"'
        assert lines[2] == "Content Preview: We review books so you don't have to...."
        assert lines[3] == "-------------"
        assert lines[4] == 'Title: "Privacy Policy" | Slug: "privacy-policy"'
        assert lines[5] == "Content Preview: ..."

    def test_preview_truncated(self) -> None:
        """Test content preview is cut at the preview length."""
        page = Page(id=1, title="Terms", slug="terms", content="x" * 80)
        lines = format_page_listing([page]).splitlines()
        assert lines[2] == f"Content Preview: {'x' * 50}..."

    def test_custom_preview_length(self) -> None:
        """Test preview length is configurable."""
        page = Page(id=1, title="FAQ", slug="faq", content="Questions and answers")
        lines = format_page_listing([page], preview_length=9).splitlines()
        assert lines[2] == "Content Preview: Questions..."

    def test_missing_slug_rendered_empty(self) -> None:
        """Test pages without slug still render."""
        page = Page(id=7, title="Draft", slug=None, content="")
        assert 'Title: "Draft" | Slug: ""' in format_page_listing([page])
