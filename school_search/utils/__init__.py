"""
Utility module providing shared helper functions.

Contains text matching, truncation, date parsing and collation helpers
used across the application. Has no internal dependencies.
"""

from .text_utils import (
    normalize_for_match,
    contains_text,
    any_contains_text,
    truncate_text,
    parse_date,
    is_date_only,
    date_timestamp,
    to_iso_string,
    collation_key,
    compare_text
)

__all__ = [
    "normalize_for_match",
    "contains_text",
    "any_contains_text",
    "truncate_text",
    "parse_date",
    "is_date_only",
    "date_timestamp",
    "to_iso_string",
    "collation_key",
    "compare_text"
]
