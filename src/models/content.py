"""Content data models stored in the content store."""

from datetime import datetime

from pydantic import BaseModel, Field


class ContentRecord(BaseModel):
    """Base record: every table row has an id, a title and an optional slug."""

    id: int = Field(ge=1, description="Primary key")
    title: str = Field(description="Human-readable title")
    slug: str | None = Field(default=None, description="URL slug, derived from the title")


class Book(ContentRecord):
    """A reviewed book."""

    author: str | None = Field(default=None, description="Book author")
    summary: str | None = Field(default=None, description="Short review summary")
    published: bool = Field(default=False)


class Article(ContentRecord):
    """A blog article."""

    content: str | None = Field(default=None, description="Article body")
    published_at: datetime | None = Field(default=None, description="Publication date")


class Page(ContentRecord):
    """A static site page (about, privacy policy, ...)."""

    content: str | None = Field(default=None, description="Page body")


class BackfillResult(BaseModel):
    """Result of a slug backfill run over one table."""

    success: bool = Field(description="Whether every record was processed")
    table: str = Field(description="Table that was processed")
    records_total: int = Field(ge=0, description="Records found in the table")
    records_updated: int = Field(ge=0, description="Records given a new slug")
    records_skipped: int = Field(ge=0, description="Records that already had a valid slug")
    updated: dict[int, str] = Field(
        default_factory=dict, description="New slug per record id"
    )
    dry_run: bool = Field(default=False, description="Whether changes were left unsaved")
    errors: list[str] = Field(default_factory=list, description="Error messages if any")


class WebhookAck(BaseModel):
    """Acknowledgement returned by webhook endpoints."""

    success: bool
    message: str
