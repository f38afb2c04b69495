"""URL slug generation utilities.

Slugs keep letters and digits from every script, so titles written entirely in
Arabic, Chinese or Cyrillic produce readable identifiers instead of collapsing
to an empty string. When a title has no letters or digits at all, a fallback
identifier built from a prefix and a unique suffix is returned.
"""

import re
import threading
import time
import unicodedata
from collections.abc import Callable

from src.constants import SLUG_FALLBACK_PREFIX, SLUG_MAX_LENGTH, SLUG_SEPARATOR
from src.utils.logging import get_logger

logger = get_logger(__name__)

SuffixProvider = Callable[[], int | str]

_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RUN_RE = re.compile(f"{re.escape(SLUG_SEPARATOR)}{{2,}}")


def is_slug_char(char: str) -> bool:
    """
    Check whether a character may appear in a slug.

    Letters and numbers are recognised by Unicode general category, so any
    script qualifies. The separator is also allowed.

    Args:
        char: A single character

    Returns:
        True if the character is a letter, a number or the separator

    Examples:
        >>> is_slug_char("ك")
        True
        >>> is_slug_char("!")
        False
    """
    if char == SLUG_SEPARATOR:
        return True
    return unicodedata.category(char)[0] in ("L", "N")


def timestamp_suffix() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class MonotonicSuffix:
    """Millisecond timestamps that never repeat within a process.

    Two calls landing in the same millisecond get consecutive values.
    """

    def __init__(self, clock: Callable[[], int] = timestamp_suffix) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            value = max(self._clock(), self._last + 1)
            self._last = value
            return value


def _truncate(slug: str, max_length: int) -> str:
    if len(slug) <= max_length:
        return slug

    truncated = slug[:max_length]
    # Prefer cutting at a word boundary when one exists
    if slug[max_length] != SLUG_SEPARATOR and SLUG_SEPARATOR in truncated:
        truncated = truncated.rsplit(SLUG_SEPARATOR, 1)[0]
    return truncated.strip(SLUG_SEPARATOR)


def _build_fallback(prefix: str, suffix: str, max_length: int) -> str:
    # The prefix gives way first, the suffix carries the uniqueness
    suffix = suffix.strip(SLUG_SEPARATOR)
    if not suffix:
        return prefix[:max_length].strip(SLUG_SEPARATOR)
    room = max_length - len(suffix) - len(SLUG_SEPARATOR)
    head = prefix[:room].strip(SLUG_SEPARATOR) if room > 0 else ""
    if not head:
        return suffix[-max_length:].strip(SLUG_SEPARATOR)
    return f"{head}{SLUG_SEPARATOR}{suffix}"


def normalize_title(title: str) -> str:
    """
    Apply the deterministic part of slug generation.

    The result may be empty when the title carries no letters or digits.

    Args:
        title: Input text (e.g., book or article title)

    Returns:
        Normalized slug candidate

    Examples:
        >>> normalize_title("  Multiple   Spaces  ")
        'multiple-spaces'
        >>> normalize_title("!!!???")
        ''
    """
    text = unicodedata.normalize("NFC", title).lower().strip()
    text = _WHITESPACE_RE.sub(SLUG_SEPARATOR, text)
    text = "".join(char for char in text if is_slug_char(char))
    # Removed characters can leave neighbours that compose
    text = unicodedata.normalize("NFC", text)
    text = _SEPARATOR_RUN_RE.sub(SLUG_SEPARATOR, text)
    return text.strip(SLUG_SEPARATOR)


def generate_slug(
    title: str,
    *,
    max_length: int = SLUG_MAX_LENGTH,
    fallback_prefix: str = SLUG_FALLBACK_PREFIX,
    suffix_provider: SuffixProvider = timestamp_suffix,
) -> str:
    """
    Generate a URL-safe slug from a title.

    Args:
        title: Input text (e.g., book or article title)
        max_length: Maximum slug length
        fallback_prefix: Prefix of the identifier used for degenerate titles;
            shortened first when the fallback does not fit max_length
        suffix_provider: Callable returning the unique part of the fallback

    Returns:
        Non-empty slug

    Raises:
        ValueError: If max_length is not positive or fallback_prefix is empty

    Examples:
        >>> generate_slug("Hello World")
        'hello-world'
        >>> generate_slug("Café Münchën")
        'café-münchën'
        >>> generate_slug("!!!", suffix_provider=lambda: 42)
        'article-42'
    """
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")
    if not fallback_prefix:
        raise ValueError("fallback_prefix must not be empty")

    slug = _truncate(normalize_title(title), max_length)
    if slug:
        return slug

    fallback = _build_fallback(fallback_prefix, str(suffix_provider()), max_length)
    logger.debug("Title has no slug characters, using fallback", title=title, slug=fallback)
    return fallback


def generate_unique_slug(
    title: str,
    existing_slugs: set[str],
    *,
    max_length: int = SLUG_MAX_LENGTH,
    fallback_prefix: str = SLUG_FALLBACK_PREFIX,
    suffix_provider: SuffixProvider = timestamp_suffix,
) -> str:
    """
    Generate a slug that is not in ``existing_slugs`` by appending a counter.

    Args:
        title: Input text (e.g., book title)
        existing_slugs: Set of already used slugs
        max_length: Maximum slug length, counter included
        fallback_prefix: Prefix of the identifier used for degenerate titles
        suffix_provider: Callable returning the unique part of the fallback

    Returns:
        Unique slug

    Raises:
        ValueError: If every counter that fits within max_length is taken

    Examples:
        >>> generate_unique_slug("Test Book", {"test-book"})
        'test-book-2'
    """
    base_slug = generate_slug(
        title,
        max_length=max_length,
        fallback_prefix=fallback_prefix,
        suffix_provider=suffix_provider,
    )

    if base_slug not in existing_slugs:
        return base_slug

    counter = 2
    while True:
        suffix = f"{SLUG_SEPARATOR}{counter}"
        if len(suffix) >= max_length:
            raise ValueError(
                f"No unique slug of at most {max_length} characters left for {base_slug!r}"
            )
        head = base_slug[: max_length - len(suffix)].rstrip(SLUG_SEPARATOR)
        unique_slug = f"{head}{suffix}"
        if unique_slug not in existing_slugs:
            return unique_slug
        counter += 1


def is_valid_slug(value: str | None) -> bool:
    """
    Check whether a stored slug is usable as a lookup key.

    Args:
        value: Stored slug, possibly missing

    Returns:
        True if the slug is non-empty, lower-case, NFC-normalized, made of slug
        characters and free of leading, trailing or doubled separators

    Examples:
        >>> is_valid_slug("hello-world")
        True
        >>> is_valid_slug("------")
        False
    """
    if not value:
        return False
    if value != value.lower() or not unicodedata.is_normalized("NFC", value):
        return False
    if value.startswith(SLUG_SEPARATOR) or value.endswith(SLUG_SEPARATOR):
        return False
    if SLUG_SEPARATOR * 2 in value:
        return False
    return all(is_slug_char(char) for char in value)
