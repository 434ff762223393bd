"""
Streamlit session state management.

Provides helpers for initializing, reading, and updating the session
state behind the global search page, and for turning it into a query.
"""

import streamlit as st
from typing import Any

from ..core import get_config
from ..search import SearchQuery


FILTER_KEYS = (
    "filter_types",
    "filter_levels",
    "filter_subjects",
    "filter_systems",
    "filter_authors",
)

DEFAULT_STATE = {
    "search_text": "",
    "filter_types": [],
    "filter_levels": [],
    "filter_subjects": [],
    "filter_systems": [],
    "filter_authors": [],
    "sort_by": "relevance",
    "sort_order": "desc",
    "current_page": 1,
}


def init_state() -> None:
    """
    Initialize session state with default values.

    Only sets values that don't already exist, preserving state across
    reruns. Sort defaults come from config.search.
    """
    config = get_config()
    defaults = dict(DEFAULT_STATE)
    defaults["sort_by"] = config.search.default_sort_by
    defaults["sort_order"] = config.search.default_sort_order

    for key, default_value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


def get_state(key: str, default: Any = None) -> Any:
    """
    Get a value from session state.

    Args:
        key: State key to retrieve.
        default: Default value if key doesn't exist.

    Returns:
        The stored value or default.
    """
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """
    Set a value in session state.

    Args:
        key: State key to set.
        value: Value to store.
    """
    st.session_state[key] = value


def clear_filters_state() -> None:
    """Empty the search text and every filter, keeping sort settings."""
    set_state("search_text", "")
    for key in FILTER_KEYS:
        set_state(key, [])
    # Dropping the keys resets the date widgets to empty
    st.session_state.pop("date_from", None)
    st.session_state.pop("date_to", None)
    set_state("current_page", 1)


def query_from_state() -> SearchQuery:
    """Build the SearchQuery described by the current widgets."""
    date_from = get_state("date_from")
    date_to = get_state("date_to")

    return SearchQuery.build(
        text=get_state("search_text", ""),
        types=get_state("filter_types", []),
        levels=get_state("filter_levels", []),
        subjects=get_state("filter_subjects", []),
        systems=get_state("filter_systems", []),
        authors=get_state("filter_authors", []),
        sort_by=get_state("sort_by", "relevance"),
        sort_order=get_state("sort_order", "desc"),
        date_from=date_from.isoformat() if date_from else None,
        date_to=date_to.isoformat() if date_to else None
    )
