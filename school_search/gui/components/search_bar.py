"""
Search bar component for the global search page.

Provides the search input, the results header, and the welcome and
no-results states.
"""

import streamlit as st

from ...search import SearchQuery, SearchStats
from ..state import clear_filters_state


def render_search_bar() -> str:
    """
    Render the search input bar.

    The value is kept in session state under "search_text"; every change
    reruns the page and therefore the search.

    Returns:
        The current query text.
    """
    return st.text_input(
        "Search",
        placeholder="Search across all content...",
        key="search_text",
        label_visibility="collapsed"
    )


def render_search_header(stats: SearchStats, query: SearchQuery) -> None:
    """
    Render search results header with stats.

    Args:
        stats: SearchStats of the search just run.
        query: The query that produced them.
    """
    col1, col2, col3 = st.columns([2, 2, 1])

    with col1:
        st.markdown(f"**{stats.summary}**")

    with col2:
        st.caption(f"Sorted by {query.sort_by.value} · {query.sort_order.value}")

    with col3:
        st.caption(f"{stats.execution_time_ms:.0f} ms")

    if stats.counts_by_type:
        st.caption(" · ".join(f"{tag}: {n}" for tag, n in sorted(stats.counts_by_type.items())))

    active = _active_filters(query)
    if active:
        st.caption("Active filters: " + " | ".join(active))


def _active_filters(query: SearchQuery) -> list:
    parts = []
    if query.types:
        parts.append("Types: " + ", ".join(sorted(getattr(t, "value", str(t)) for t in query.types)))
    if query.levels:
        parts.append("Levels: " + ", ".join(sorted(query.levels)))
    if query.subjects:
        parts.append("Subjects: " + ", ".join(sorted(query.subjects)))
    if query.systems:
        parts.append("Systems: " + ", ".join(sorted(query.systems)))
    if query.authors:
        parts.append("Authors: " + ", ".join(sorted(query.authors)))
    return parts


def render_no_results(query: SearchQuery) -> None:
    """Display no results message with a way out."""
    label = f" for \"{query.text.strip()}\"" if query.has_text else ""
    st.info(f"No results found{label}")
    st.caption("Try adjusting your search terms or filters to find what you're looking for.")
    st.button("Clear Filters", on_click=clear_filters_state, key="clear_filters_no_results")


def render_welcome() -> None:
    """Render the empty state shown before any search."""
    st.markdown("""
    ### Global Search

    Enter a search term to find content across all libraries, curriculum,
    files, lesson plans, and quizzes.

    **Tips:**
    - Matching ignores case and finds words inside longer words
    - Titles and topics weigh more than tags
    - Pick a content type, level, subject or system in the sidebar to browse without typing
    """)
