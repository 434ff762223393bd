"""
Reusable UI components for the Streamlit application.

Contains modular components for the sidebar filters, search bar,
and results display.
"""

from .sidebar import render_sidebar
from .search_bar import render_search_bar, render_search_header, render_no_results, render_welcome
from .results_list import render_results, render_pagination, paginate

__all__ = [
    "render_sidebar",
    "render_search_bar",
    "render_search_header",
    "render_no_results",
    "render_welcome",
    "render_results",
    "render_pagination",
    "paginate"
]
