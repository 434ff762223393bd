"""
Main Streamlit application for the global search page.

Assembles the sidebar filters, search bar and results list. The search
reruns on every widget change, as Streamlit reruns the script.

Note: This file is run directly by Streamlit, so it needs to
set up the Python path before importing other modules.
"""

import sys
from pathlib import Path

# Add project root to path for imports when run directly by Streamlit
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st  # noqa: E402

from school_search.core import get_config, get_logger, CatalogError, SearchError  # noqa: E402
from school_search.search import SearchEngine, SourceCollections  # noqa: E402
from school_search.sources import load_sources  # noqa: E402

from school_search.gui.state import init_state, get_state, set_state, query_from_state  # noqa: E402
from school_search.gui.components import (  # noqa: E402
    render_sidebar,
    render_search_bar,
    render_search_header,
    render_no_results,
    render_welcome,
    render_results,
    render_pagination,
    paginate,
)

logger = get_logger(__name__)


def load_css(css_path: Path) -> None:
    """
    Load and inject custom CSS into Streamlit.

    Args:
        css_path: Path to the CSS file.
    """
    if css_path.exists():
        with open(css_path, "r", encoding="utf-8") as f:
            css_content = f.read()
        st.markdown(f"<style>{css_content}</style>", unsafe_allow_html=True)


@st.cache_resource
def _cached_sources() -> SourceCollections:
    """Load the catalog once per server process."""
    return load_sources()


def main():
    """Main application entry point."""
    config = get_config()

    st.set_page_config(
        page_title=config.gui.page_title,
        layout="wide",
        initial_sidebar_state="expanded"
    )

    load_css(config.assets.css_path)

    init_state()

    try:
        sources = _cached_sources()
    except CatalogError as e:
        st.error(f"Could not load the catalog: {e.message}")
        logger.error(f"Catalog error ({e.path}): {e.message}")
        sources = SourceCollections()

    render_sidebar(sources)

    st.title(config.gui.page_title)
    st.caption("Search across all content libraries, curriculum, file manager, lesson plans, and quizzes")

    previous_text = get_state("last_search_text", "")
    text = render_search_bar()
    if text != previous_text:
        set_state("current_page", 1)
        set_state("last_search_text", text)

    _render_results_section(sources, config)


def _render_results_section(sources: SourceCollections, config) -> None:
    """Run the search for the current widgets and render the outcome."""
    try:
        query = query_from_state()
    except SearchError as e:
        st.error(e.message)
        return

    if query.is_blank:
        render_welcome()
        return

    engine = SearchEngine.from_config(config)
    results, stats = engine.search_with_stats(query, sources)

    logger.info(f"Search '{query.text}': {stats.total_results} results")

    if not results:
        render_no_results(query)
        return

    render_search_header(stats, query)

    st.divider()

    per_page = config.gui.results_per_page
    render_results(
        paginate(results, get_state("current_page", 1), per_page),
        description_length=config.search.description_length,
        show_matched_fields=config.gui.show_matched_fields
    )

    st.divider()

    render_pagination(stats.total_results, per_page)


if __name__ == "__main__":
    main()
