"""JSON-file content store for books, articles and pages."""

import json
from datetime import datetime
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from src.models.content import ContentRecord
from src.utils.logging import get_logger

logger = get_logger(__name__)

R = TypeVar("R", bound=ContentRecord)


class ContentStoreError(Exception):
    """Raised when a table file cannot be read."""

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(message)


class ContentStore:
    """Stores each table as a JSON file of records."""

    def __init__(self, data_dir: Path | str = "data") -> None:
        """
        Initialize content store.

        Args:
            data_dir: Directory holding one ``<table>.json`` file per table
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Content store initialized", data_dir=str(self.data_dir))

    def _get_table_path(self, table: str) -> Path:
        return self.data_dir / f"{table}.json"

    def list_records(self, table: str, model_class: type[R]) -> list[R]:
        """
        Load all records of a table.

        Args:
            table: Table name (e.g., 'books', 'pages')
            model_class: Pydantic model class to deserialize into

        Returns:
            Records in stored order, empty if the table has no file yet

        Raises:
            ContentStoreError: If the table file is not valid JSON or a record
                does not match the model
        """
        table_path = self._get_table_path(table)

        if not table_path.exists():
            logger.debug("Table not found, treating as empty", table=table)
            return []

        try:
            content = json.loads(table_path.read_text(encoding="utf-8"))
            records = [model_class.model_validate(item) for item in content["data"]]
        except (json.JSONDecodeError, KeyError, TypeError, ValidationError) as e:
            logger.error("Failed to read table", table=table, path=str(table_path), error=str(e))
            raise ContentStoreError(f"Corrupted table file: {table_path}", table_path) from e

        logger.debug("Table loaded", table=table, count=len(records))
        return records

    def save_records(self, table: str, records: list[ContentRecord]) -> None:
        """
        Replace the contents of a table.

        Args:
            table: Table name
            records: Records to store
        """
        table_path = self._get_table_path(table)

        content = {
            "data": [record.model_dump(mode="json") for record in records],
            "updated_at": datetime.now().isoformat(),
        }

        try:
            table_path.write_text(
                json.dumps(content, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            logger.error("Failed to save table", table=table, error=str(e))
            raise

        logger.info("Table saved", table=table, count=len(records), path=str(table_path))

    def get_by_slug(self, table: str, slug: str, model_class: type[R]) -> R | None:
        """
        Find a record by slug, falling back to its id for numeric keys.

        Records created before slugs existed are still reachable through
        their numeric id.

        Args:
            table: Table name
            slug: Slug or numeric id
            model_class: Pydantic model class to deserialize into

        Returns:
            Matching record or None
        """
        records = self.list_records(table, model_class)

        for record in records:
            if record.slug == slug:
                return record

        if slug.isascii() and slug.isdigit():
            record_id = int(slug)
            for record in records:
                if record.id == record_id:
                    logger.debug("Record resolved by id", table=table, id=record_id)
                    return record

        logger.debug("Record not found", table=table, slug=slug)
        return None
