#!/usr/bin/env python3
"""Command-line entry point for the bookshelf admin tooling.

Commands:
- slug: Print the slug generated for a title
- list-pages: Print every stored page with a content preview
- backfill-slugs: Give records without a valid slug a new one
- serve-webhooks: Run the webhook server

Usage:
    python -m src.main slug "Hello World"
    python -m src.main list-pages
    python -m src.main backfill-slugs --table books --dry-run
    python -m src.main serve-webhooks --port 8080
"""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from aiohttp import web
from dotenv import load_dotenv
from loguru import logger

from src.models.config import AppConfig
from src.models.content import BackfillResult
from src.services.backfill import TABLE_MODELS, backfill_slugs
from src.services.listing import format_page_listing, list_pages
from src.services.webhook import create_app
from src.utils.config_loader import load_app_config
from src.utils.logging import setup_logging
from src.utils.slug import generate_slug
from src.utils.store import ContentStore, ContentStoreError

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Admin tooling for the bookshelf site.")


# Tables that carry slugs
Table = Enum("Table", {name: name for name in TABLE_MODELS}, type=str)


ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to application configuration file"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging"),
]


def print_header(title: str) -> None:
    """Print a formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60 + "\n")


def print_stats(label: str, value: Any) -> None:
    """Print a formatted stat line."""
    print(f"  • {label}: {value}")


def print_backfill_summary(result: BackfillResult) -> None:
    """Print the outcome of a backfill run."""
    print_header(f"Slug Backfill: {result.table}")
    print_stats("Status", "✅ Success" if result.success else "❌ Failed")
    print_stats("Records", result.records_total)
    print_stats("Updated", result.records_updated)
    print_stats("Already had slug", result.records_skipped)
    for record_id, slug in result.updated.items():
        print(f"    - {record_id}: {slug}")
    for error in result.errors:
        print(f"  ❌ {error}")
    if result.dry_run:
        print("\n🔍 DRY RUN MODE - No changes saved")


def _bootstrap(config_file: Path, verbose: bool) -> AppConfig:
    config = load_app_config(config_file)
    setup_logging(config.logging, verbose=verbose)
    return config


@contextmanager
def cli_errors(action: str) -> Iterator[None]:
    """Turn unexpected failures into exit code 1 and Ctrl-C into 130."""
    try:
        yield
    except (typer.Exit, typer.Abort):
        raise
    except KeyboardInterrupt:
        logger.warning(f"{action} interrupted by user")
        sys.exit(130)  # Standard exit code for SIGINT
    except Exception as e:
        logger.exception(f"{action} failed: {e}")
        print(f"\n❌ {action} failed: {e}")
        sys.exit(1)


@app.command()
def slug(
    title: Annotated[str, typer.Argument(help="Title to turn into a slug")],
    max_length: Annotated[
        int | None,
        typer.Option("--max-length", min=1, help="Maximum slug length"),
    ] = None,
    config_file: ConfigOption = Path("config/app.yaml"),
    verbose: VerboseOption = False,
) -> None:
    """Print the slug generated for TITLE."""
    with cli_errors("Slug generation"):
        config = _bootstrap(config_file, verbose)
        typer.echo(
            generate_slug(
                title,
                max_length=max_length or config.slug.max_length,
                fallback_prefix=config.slug.fallback_prefix,
            )
        )


@app.command("list-pages")
def list_pages_command(
    config_file: ConfigOption = Path("config/app.yaml"),
    verbose: VerboseOption = False,
) -> None:
    """Print every stored page with a content preview."""
    with cli_errors("Page listing"):
        config = _bootstrap(config_file, verbose)

        try:
            store = ContentStore(config.store.data_dir)
            pages = list_pages(store)
        except ContentStoreError as e:
            logger.error(f"Failed to list pages: {e}")
            print(f"Error: {e}")
            raise typer.Exit(code=1) from e

        print(format_page_listing(pages, preview_length=config.listing.preview_length))


@app.command("backfill-slugs")
def backfill_slugs_command(
    table: Annotated[
        Table,
        typer.Option("--table", "-t", help="Table to backfill"),
    ] = Table.books,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show new slugs without saving them"),
    ] = False,
    config_file: ConfigOption = Path("config/app.yaml"),
    verbose: VerboseOption = False,
) -> None:
    """Generate slugs for records that have none or a degenerate one."""
    with cli_errors("Slug backfill"):
        config = _bootstrap(config_file, verbose)

        try:
            store = ContentStore(config.store.data_dir)
            result = backfill_slugs(store, table.value, config=config.slug, dry_run=dry_run)
        except ContentStoreError as e:
            logger.error(f"Slug backfill failed: {e}")
            print(f"\n❌ Slug backfill failed: {e}")
            raise typer.Exit(code=1) from e

        print_backfill_summary(result)

        if not result.success:
            raise typer.Exit(code=1)


@app.command("serve-webhooks")
def serve_webhooks(
    host: Annotated[str | None, typer.Option("--host", help="Interface to bind")] = None,
    port: Annotated[int | None, typer.Option("--port", "-p", help="Port to bind")] = None,
    config_file: ConfigOption = Path("config/app.yaml"),
    verbose: VerboseOption = False,
) -> None:
    """Run the webhook server."""
    with cli_errors("Webhook server"):
        config = _bootstrap(config_file, verbose)
        bind_host = host or config.webhook.host
        bind_port = port or config.webhook.port

        logger.info(f"Starting webhook server on {bind_host}:{bind_port}")
        web.run_app(create_app(), host=bind_host, port=bind_port, print=None)


if __name__ == "__main__":
    app()
