"""
Sidebar component for the global search page.

Displays source statistics and the filter and sort controls.
"""

import streamlit as st
from typing import List

from ...search import LEVELS, SUBJECTS, SYSTEMS, SourceCollections
from ...search.scoring import CURRICULUM_AUTHOR
from ..state import clear_filters_state, get_state, set_state


TYPE_OPTIONS = {
    "content": "Content",
    "scheme": "Scheme",
    "weekly-plan": "Weekly plan",
    "file": "File",
    "lesson": "Lesson",
    "quiz": "Quiz",
}

SORT_OPTIONS = {
    "relevance": "Relevance",
    "date": "Date",
    "title": "Title",
    "author": "Author",
}

ORDER_OPTIONS = {
    "desc": "Descending",
    "asc": "Ascending",
}


def render_sidebar(sources: SourceCollections) -> None:
    """
    Render the sidebar with source stats, filters and sort options.

    Widget values are written to session state; the page builds its
    query from there.

    Args:
        sources: Collections being searched, used for stats and author options.
    """
    with st.sidebar:
        st.title("Filters")

        st.subheader("Sources")
        _render_statistics(sources)

        st.divider()

        _render_filters(sources)

        st.divider()

        st.subheader("Sort")
        _render_sort()

        st.divider()

        st.button("Clear All Filters", on_click=clear_filters_state, use_container_width=True)


def _render_statistics(sources: SourceCollections) -> None:
    """Display record counts per source."""
    counts = sources.counts()

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Records", f"{sources.total:,}")

    with col2:
        st.metric("Sources", f"{sum(1 for n in counts.values() if n):,}")

    st.caption(" · ".join(f"{TYPE_OPTIONS[tag]}: {n}" for tag, n in counts.items()))


def available_authors(sources: SourceCollections) -> List[str]:
    """Distinct author names across the sources, sorted."""
    authors = set()
    authors.update(item.author for item in sources.content if item.author)
    authors.update(file.uploaded_by for file in sources.files if file.uploaded_by)
    authors.update(lesson.author for lesson in sources.lessons if lesson.author)
    authors.update(quiz.author for quiz in sources.quizzes if quiz.author)
    if sources.schemes or sources.weekly_plans:
        authors.add(CURRICULUM_AUTHOR)
    return sorted(authors)


def _render_filters(sources: SourceCollections) -> None:
    """Render the multiselect filters and the date range."""
    st.multiselect(
        "Content types",
        options=list(TYPE_OPTIONS.keys()),
        format_func=TYPE_OPTIONS.get,
        key="filter_types"
    )

    st.multiselect("Levels", options=list(LEVELS), key="filter_levels")

    st.multiselect("Subjects", options=list(SUBJECTS), key="filter_subjects")

    st.multiselect(
        "Systems",
        options=list(SYSTEMS),
        format_func=str.capitalize,
        key="filter_systems"
    )

    st.multiselect(
        "Authors",
        options=available_authors(sources),
        key="filter_authors",
        help="Author alone does not start a search; combine it with text or another filter"
    )

    with st.expander("Date range", expanded=False):
        st.date_input("From", value=None, key="date_from")
        st.date_input("To", value=None, key="date_to")


def _render_sort() -> None:
    """Render sort key and order selectors."""
    sort_keys = list(SORT_OPTIONS.keys())
    current_sort = get_state("sort_by", "relevance")
    sort_by = st.selectbox(
        "Sort by",
        options=sort_keys,
        index=sort_keys.index(current_sort) if current_sort in sort_keys else 0,
        format_func=SORT_OPTIONS.get
    )
    set_state("sort_by", sort_by)

    orders = list(ORDER_OPTIONS.keys())
    current_order = get_state("sort_order", "desc")
    sort_order = st.selectbox(
        "Sort order",
        options=orders,
        index=orders.index(current_order) if current_order in orders else 0,
        format_func=ORDER_OPTIONS.get
    )
    set_state("sort_order", sort_order)
