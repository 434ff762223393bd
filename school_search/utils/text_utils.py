"""
Text utility functions for the school content search.

Provides case-insensitive matching helpers, truncation for display,
date parsing for sorting and locale-like collation keys.
"""

import unicodedata
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Tuple


def normalize_for_match(text: Any) -> str:
    """
    Lower-case a value for substring comparison.

    Non-string values (None, numbers, lists) normalize to "" so that
    missing fields never match.

    Args:
        text: Raw field value.

    Returns:
        Lower-cased string, or "" when the value is not a string.
    """
    if not isinstance(text, str):
        return ""
    return text.lower()


def contains_text(value: Any, needle: str) -> bool:
    """
    Literal, case-insensitive substring test.

    Args:
        value: Field value to search in.
        needle: Already-normalized query text. Must be non-empty.

    Returns:
        True if the value is a string containing the needle.
    """
    if not needle:
        return False
    return needle in normalize_for_match(value)


def any_contains_text(values: Optional[Iterable[Any]], needle: str) -> bool:
    """True if any element of values contains the needle."""
    if not values:
        return False
    return any(contains_text(value, needle) for value in values)


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to maximum length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length including suffix.
        suffix: String to append when truncated.

    Returns:
        Truncated text or original if within limit.
    """
    if not text or len(text) <= max_length:
        return text

    truncate_at = max_length - len(suffix)
    if truncate_at <= 0:
        return suffix[:max_length]

    # Try to break at word boundary
    truncated = text[:truncate_at]
    last_space = truncated.rfind(" ")

    if last_space > truncate_at * 0.7:
        truncated = truncated[:last_space]

    return truncated + suffix


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime into an aware UTC datetime.

    Accepts datetime objects, "2024-01-15", "2024-01-15T10:00:00" and
    the "Z" suffix produced by JavaScript's toISOString(). Naive values
    are taken as UTC.

    Returns:
        Parsed datetime, or None if the value is missing or unparseable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_date_only(value: Any) -> bool:
    """True for a bare calendar day such as "2024-01-15", with no time part."""
    if not isinstance(value, str):
        return False
    try:
        datetime.strptime(value.strip(), "%Y-%m-%d")
    except ValueError:
        return False
    return True


def date_timestamp(value: Any) -> float:
    """Seconds since the epoch for a date value; missing or invalid is 0."""
    parsed = parse_date(value)
    if parsed is None:
        return 0.0
    return parsed.timestamp()


def to_iso_string(value: Any) -> Optional[str]:
    """Render a datetime as an ISO string; strings pass through unchanged."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, str):
        return value
    return None


def collation_key(text: Optional[str]) -> Tuple[str, str]:
    """
    Sort key approximating locale-aware comparison.

    Primary key ignores accents and case ("Écriture" sorts with "ecriture").
    Ties break on the case-swapped raw string, so lower case sorts before
    upper case ("apple" before "Apple") and the ordering stays total.
    """
    raw = text or ""
    decomposed = unicodedata.normalize("NFKD", raw)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), raw.swapcase()


def compare_text(left: Optional[str], right: Optional[str]) -> int:
    """Three-way comparison of two strings using collation_key."""
    left_key = collation_key(left)
    right_key = collation_key(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


if __name__ == "__main__":
    print(contains_text("Mathematics Lesson Plan - Addition", "math"))
    print(any_contains_text(["Count to ten", "Add numbers"], "add"))
    print(truncate_text("Introduction to English grammar for intermediate students", 30))
    print(parse_date("2024-01-15T08:30:00.000Z"))
    print(sorted(["Zebra", "écriture", "Apple"], key=collation_key))
