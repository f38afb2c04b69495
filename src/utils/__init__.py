"""Utility functions and helpers."""

from src.utils.config_loader import load_app_config, load_yaml_config
from src.utils.logging import get_logger, setup_logging
from src.utils.slug import (
    MonotonicSuffix,
    generate_slug,
    generate_unique_slug,
    is_slug_char,
    is_valid_slug,
    normalize_title,
    timestamp_suffix,
)
from src.utils.store import ContentStore, ContentStoreError

__all__ = [
    "ContentStore",
    "ContentStoreError",
    "setup_logging",
    "get_logger",
    "generate_slug",
    "generate_unique_slug",
    "is_slug_char",
    "is_valid_slug",
    "normalize_title",
    "timestamp_suffix",
    "MonotonicSuffix",
    "load_yaml_config",
    "load_app_config",
]
