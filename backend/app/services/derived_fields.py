"""Derived-field computation for articles and event registrations.

All functions here are pure and total: they never raise and never touch
the database. Services call them explicitly on create/update; there are
no ORM hooks.
"""

import re
import unicodedata
from datetime import datetime
from typing import Any

SLUG_MAX_LENGTH = 160

READ_TIME_MIN = 1
READ_TIME_MAX = 120
WPM_MIN = 60
WPM_MAX = 1200
DEFAULT_WPM = 200

_SLUG_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")
# hyphen-minus, hyphen, en dash, em dash, minus sign
_DASH_RUN_RE = re.compile("[-‐–—−]+")


def slugify(title: str | None) -> str:
    """Turn a title into a URL slug.

    >>> slugify("Hello, World!  Foo--Bar")
    'hello-world-foo-bar'
    """
    if not title:
        return ""
    slug = title.lower().strip()
    slug = _SLUG_STRIP_RE.sub("", slug)
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug[:SLUG_MAX_LENGTH]


def word_count(text: str | None) -> int:
    """Count whitespace-delimited non-empty tokens."""
    if not text:
        return 0
    return len(text.split())


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def estimate_read_time(text: str | None, words_per_minute: int = DEFAULT_WPM) -> int:
    """Estimate reading time in whole minutes, always within [1, 120].

    Half minutes round up (2.5 -> 3), unlike Python's banker's rounding.
    """
    wpm = _clamp(int(words_per_minute), WPM_MIN, WPM_MAX)
    words = word_count(text)
    minutes = int(words / wpm + 0.5)
    return _clamp(minutes or 1, READ_TIME_MIN, READ_TIME_MAX)


def clamp_read_time(value: int) -> int:
    """Clamp an explicitly supplied read time to [1, 120]."""
    return _clamp(int(value), READ_TIME_MIN, READ_TIME_MAX)


def event_key(title: str | None) -> str:
    """Normalise an event title for registration lookups.

    Case, surrounding/inner whitespace and dash variants do not matter:
    ``"AI  Summit — 2025 "`` and ``"ai summit - 2025"`` give the same key.
    """
    if not title:
        return ""
    key = unicodedata.normalize("NFKD", title.lower())
    key = _DASH_RUN_RE.sub("-", key)
    key = _WHITESPACE_RE.sub(" ", key)
    return key.strip()


def apply_article_fields(
    current: Any | None,
    changes: dict[str, Any],
    now: datetime,
    words_per_minute: int = DEFAULT_WPM,
) -> dict[str, Any]:
    """Compute the article fields to persist for a create or update.

    Args:
        current: The stored article, or None on create.
        changes: Fields supplied by the caller (already validated).
        now: Timestamp to use if this write publishes the article.
        words_per_minute: Reading speed for the read-time estimate.

    Returns:
        A copy of ``changes`` with slug, word_count, read_time_minutes and
        published_at filled in according to the write policy.
    """
    result = dict(changes)

    # Slug: only generated on create, never regenerated from a new title
    if current is None and not result.get("slug"):
        result["slug"] = slugify(result.get("title"))

    # A zero read time counts as not supplied
    read_time_requested = "read_time_minutes" in result
    explicit_read_time = result.pop("read_time_minutes", None) or None
    if explicit_read_time is not None:
        result["read_time_minutes"] = clamp_read_time(explicit_read_time)

    if "content" in result:
        result["word_count"] = word_count(result["content"])

    if explicit_read_time is None:
        if "content" in result:
            result["read_time_minutes"] = estimate_read_time(result["content"], words_per_minute)
        elif read_time_requested and current is not None:
            result["read_time_minutes"] = estimate_read_time(current.content, words_per_minute)

    # published_at: set once, on the first transition into "published"
    new_status = result.get("status")
    if new_status == "published":
        already_published_at = current.published_at if current is not None else None
        if already_published_at is None:
            result["published_at"] = now
        else:
            result.pop("published_at", None)
    else:
        result.pop("published_at", None)

    return result
