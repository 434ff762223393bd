"""
Post-filters and sorting applied to scored results.

Filters run in a fixed order (level, subject, system, author, date range).
A result lacking the filtered field is dropped as soon as that filter is
non-empty; it is never passed through.
"""

from functools import cmp_to_key
from typing import Callable, List

from ..core import get_logger
from ..utils import compare_text, date_timestamp, is_date_only, parse_date
from .display_names import level_display_name, subject_display_name
from .models import SearchQuery, SearchResult, SortBy, SortOrder

logger = get_logger(__name__)


def _keep(
    results: List[SearchResult],
    predicate: Callable[[SearchResult], bool],
    stage: str,
    log_stages: bool
) -> List[SearchResult]:
    kept = [result for result in results if predicate(result)]
    if log_stages:
        logger.debug(f"{stage} filter: {len(results)} -> {len(kept)} results")
    return kept


def apply_filters(
    results: List[SearchResult],
    query: SearchQuery,
    log_stages: bool = False
) -> List[SearchResult]:
    """
    Apply the query's level, subject, system, author and date filters.

    Args:
        results: Scored results, in scan order.
        query: Query holding the filter sets.
        log_stages: Log the before/after count of each active filter at DEBUG.

    Returns:
        New list with the surviving results, original order kept.
    """
    filtered = results

    if query.levels:
        filtered = _keep(
            filtered,
            lambda r: bool(r.level) and level_display_name(r.level) in query.levels,
            "Level",
            log_stages
        )

    if query.subjects:
        filtered = _keep(
            filtered,
            lambda r: bool(r.subject) and subject_display_name(r.subject) in query.subjects,
            "Subject",
            log_stages
        )

    if query.systems:
        filtered = _keep(
            filtered,
            lambda r: bool(r.system) and r.system in query.systems,
            "System",
            log_stages
        )

    if query.authors:
        filtered = _keep(
            filtered,
            lambda r: bool(r.author) and r.author in query.authors,
            "Author",
            log_stages
        )

    if query.date_from or query.date_to:
        filtered = _keep(
            filtered,
            lambda r: _within_date_range(r, query.date_from, query.date_to),
            "Date",
            log_stages
        )

    return filtered


def _within_date_range(result: SearchResult, date_from: str, date_to: str) -> bool:
    """Inclusive range check; a result without a parseable date is outside any range."""
    parsed = parse_date(result.date)
    if parsed is None:
        return False

    lower = parse_date(date_from)
    if lower is not None and parsed < lower:
        return False

    upper = parse_date(date_to)
    if upper is not None:
        # A bare day as upper bound covers that whole day
        if is_date_only(date_to):
            return parsed.date() <= upper.date()
        if parsed > upper:
            return False

    return True


def _compare(a: SearchResult, b: SearchResult, sort_by: SortBy) -> float:
    """Default-direction comparison: relevance and date descending, title and author ascending."""
    if sort_by is SortBy.RELEVANCE:
        return b.relevance_score - a.relevance_score
    if sort_by is SortBy.DATE:
        return date_timestamp(b.date) - date_timestamp(a.date)
    if sort_by is SortBy.TITLE:
        return compare_text(a.title, b.title)
    if sort_by is SortBy.AUTHOR:
        return compare_text(a.author or "", b.author or "")
    return 0


def sort_results(
    results: List[SearchResult],
    sort_by: SortBy = SortBy.RELEVANCE,
    sort_order: SortOrder = SortOrder.DESC
) -> List[SearchResult]:
    """
    Stable sort of results.

    ASC negates the comparator of every key, including the keys that are
    already ascending by default: title with ASC comes out Z to A.

    Returns:
        New sorted list.
    """
    sign = -1 if sort_order is SortOrder.ASC else 1

    def comparator(a: SearchResult, b: SearchResult) -> float:
        return sign * _compare(a, b, sort_by)

    return sorted(results, key=cmp_to_key(comparator))
