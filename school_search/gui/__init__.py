"""
GUI module providing the Streamlit global search page.

Contains the main application, session state management,
and reusable UI components.
"""

from .state import init_state, get_state, set_state, query_from_state

__all__ = [
    "init_state",
    "get_state",
    "set_state",
    "query_from_state"
]
