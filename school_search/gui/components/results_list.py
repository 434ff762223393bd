"""
Results list component for displaying search results.

Renders one card per result with its type label, metadata, relevance,
matched fields, date and tags, plus pagination.
"""

import streamlit as st
from typing import List

from ...search import SearchResult, SourceType
from ...utils import parse_date, truncate_text
from ..state import get_state, set_state


TYPE_LABELS = {
    SourceType.CONTENT: "[Content]",
    SourceType.CURRICULUM: "[Curriculum]",
    SourceType.FILE: "[File]",
    SourceType.LESSON: "[Lesson]",
    SourceType.QUIZ: "[Quiz]",
    SourceType.SCHEME: "[Scheme]",
    SourceType.WEEKLY_PLAN: "[Weekly plan]",
}


def type_label(source_type: SourceType) -> str:
    """Short bracketed label for a source type."""
    return TYPE_LABELS.get(source_type, "[Other]")


def format_metadata(result: SearchResult) -> str:
    """Join category, level, subject, system and author with bullets, skipping blanks."""
    parts = [result.category, result.level, result.subject, result.system, result.author]
    return " • ".join(part for part in parts if part)


def format_date(value: str) -> str:
    """Render an ISO date as YYYY-MM-DD; unparseable values are shown as given."""
    parsed = parse_date(value)
    if parsed is None:
        return value or ""
    return parsed.strftime("%Y-%m-%d")


def render_results(
    results: List[SearchResult],
    description_length: int = 200,
    show_matched_fields: bool = True
) -> None:
    """
    Render the list of search results.

    Args:
        results: Results to display, already sorted and paginated.
        description_length: Maximum description characters shown.
        show_matched_fields: Whether to list the fields that matched.
    """
    for result in results:
        _render_result_card(result, description_length, show_matched_fields)


def _render_result_card(result: SearchResult, description_length: int, show_matched_fields: bool) -> None:
    """Render a single result card."""
    with st.container(border=True):
        st.markdown(f"{type_label(result.source_type)} **{result.title}**")

        metadata = format_metadata(result)
        if metadata:
            st.caption(metadata)

        st.write(truncate_text(result.description, description_length))

        details = [f"Relevance: {result.relevance_score}"]
        if show_matched_fields and result.matched_fields:
            details.append(f"Matched: {', '.join(result.matched_fields)}")
        if result.date:
            details.append(format_date(result.date))
        st.caption(" | ".join(details))

        if result.tags:
            st.caption(" ".join(f"`{tag}`" for tag in result.tags))


def paginate(results: List[SearchResult], page: int, per_page: int) -> List[SearchResult]:
    """Slice out one page of results (pages are 1-indexed)."""
    if per_page <= 0:
        return results
    start = (max(page, 1) - 1) * per_page
    return results[start:start + per_page]


def render_pagination(total_results: int, results_per_page: int) -> None:
    """
    Render pagination controls.

    Args:
        total_results: Total number of matching results.
        results_per_page: Number of results per page.
    """
    if total_results <= results_per_page:
        return

    total_pages = (total_results + results_per_page - 1) // results_per_page
    current_page = min(get_state("current_page", 1), total_pages)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if st.button("Previous", disabled=current_page <= 1):
            set_state("current_page", current_page - 1)
            st.rerun()

    with col2:
        st.markdown(
            f"<div style='text-align:center'>Page {current_page} of {total_pages}</div>",
            unsafe_allow_html=True
        )

    with col3:
        if st.button("Next", disabled=current_page >= total_pages):
            set_state("current_page", current_page + 1)
            st.rerun()
