"""Slug backfill: give every record of a table a valid, unique slug."""

from src.models.config import SlugConfig
from src.models.content import Article, BackfillResult, Book, ContentRecord, Page
from src.utils.logging import get_logger
from src.utils.slug import MonotonicSuffix, SuffixProvider, generate_unique_slug, is_valid_slug
from src.utils.store import ContentStore

logger = get_logger(__name__)

TABLE_MODELS: dict[str, type[ContentRecord]] = {
    "books": Book,
    "articles": Article,
    "pages": Page,
}


def backfill_slugs(
    store: ContentStore,
    table: str,
    config: SlugConfig | None = None,
    dry_run: bool = False,
    suffix_provider: SuffixProvider | None = None,
) -> BackfillResult:
    """
    Generate slugs for records whose slug is missing or degenerate.

    Records that already carry a valid slug keep it, and their slugs are
    reserved before any new slug is generated so existing URLs never change.
    Degenerate slugs such as ``"------"`` (left behind by ASCII-only slug
    generators on non-Latin titles) are regenerated. The table is written
    once, after all records are processed.

    Args:
        store: Content store
        table: Table name ('books', 'articles' or 'pages')
        config: Slug configuration (defaults apply when None)
        dry_run: Compute new slugs without saving them
        suffix_provider: Unique suffix source for titles without slug characters;
            defaults to a MonotonicSuffix so fallbacks within one run never repeat

    Returns:
        BackfillResult with per-record outcome

    Raises:
        KeyError: If the table is unknown
        ContentStoreError: If the table file cannot be read
    """
    config = config or SlugConfig()
    suffix_provider = suffix_provider or MonotonicSuffix()
    model_class = TABLE_MODELS[table]

    logger.info("Starting slug backfill", table=table, dry_run=dry_run)
    records = store.list_records(table, model_class)

    taken = {record.slug for record in records if is_valid_slug(record.slug)}
    seen: set[str] = set()
    updated: dict[int, str] = {}
    errors: list[str] = []
    skipped = 0

    for record in records:
        # Only the first record keeps a duplicated slug
        if is_valid_slug(record.slug) and record.slug not in seen:
            seen.add(record.slug)
            skipped += 1
            logger.debug("Record already has slug", table=table, id=record.id, slug=record.slug)
            continue

        try:
            slug = generate_unique_slug(
                record.title,
                taken,
                max_length=config.max_length,
                fallback_prefix=config.fallback_prefix,
                suffix_provider=suffix_provider,
            )
        except ValueError as e:
            error_msg = f"No slug generated for {table} record {record.id}: {e}"
            logger.error(error_msg)
            errors.append(error_msg)
            continue

        logger.info("Generated slug", table=table, id=record.id, title=record.title, slug=slug)
        taken.add(slug)
        seen.add(slug)
        updated[record.id] = slug
        record.slug = slug

    if updated and not dry_run:
        try:
            store.save_records(table, records)
        except OSError as e:
            error_msg = f"Failed to save {table}: {e}"
            logger.error(error_msg)
            errors.append(error_msg)

    result = BackfillResult(
        success=not errors,
        table=table,
        records_total=len(records),
        records_updated=len(updated),
        records_skipped=skipped,
        updated=updated,
        dry_run=dry_run,
        errors=errors,
    )

    logger.info(
        "Slug backfill completed",
        table=table,
        updated=result.records_updated,
        skipped=result.records_skipped,
        errors=len(errors),
    )
    return result
