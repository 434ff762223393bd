"""
Integration tests for the catalog-to-results pipeline.

Loads the temporary catalog through the configured sources, runs searches
through the engine, and drives the command-line search script.

All tests use the `configured` fixture, which points the config singleton
at a temporary directory; no real data directory is touched.
"""

import importlib.util
from pathlib import Path

import pytest

from school_search.search import SearchEngine, SearchQuery, SortBy, SourceType
from school_search.sources import load_sources

SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "search_catalog.py"


@pytest.fixture
def search_cli():
    """Import scripts/search_catalog.py as a module."""
    spec = importlib.util.spec_from_file_location("search_catalog", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSearchPipeline:
    """
    Integration tests for loading, searching, filtering and sorting.

    These tests verify that:
    1. Catalog records of every source come back as results
    2. Curriculum identifiers are filterable by display name
    3. Samples merge with catalog records
    """

    @pytest.fixture
    def engine(self, configured):
        return SearchEngine.from_config(configured)

    def test_addition_across_sources(self, engine):
        results = engine.search(SearchQuery(text="addition"), load_sources())

        assert [(r.id, r.relevance_score) for r in results] == [
            ("content-1", 23),
            ("file-f1", 10),
            ("quiz-q1", 10),
        ]

    def test_curriculum_filters(self, engine):
        results = engine.search(
            SearchQuery(levels={"Level I"}, subjects={"Science and Technology"}),
            load_sources()
        )

        assert [r.id for r in results] == ["weekly-w1"]
        assert results[0].author == "Ministry of Education"

    def test_samples_join_the_search(self, engine):
        sources = load_sources(include_samples=True)

        results = engine.search(SearchQuery(text="addition", types={SourceType.QUIZ}), sources)

        assert [r.id for r in results] == ["quiz-quiz-1", "quiz-q1"]

    def test_author_browse_sorted_by_date(self, engine):
        results = engine.search(
            SearchQuery(types={SourceType.CONTENT, SourceType.FILE, SourceType.QUIZ},
                        authors={"Teacher John"},
                        sort_by=SortBy.DATE),
            load_sources()
        )

        assert [r.id for r in results] == ["file-f1", "quiz-q1", "content-1"]


class TestSearchCli:
    """Tests for scripts/search_catalog.py."""

    def test_text_search(self, search_cli, temp_config, reset_config_singleton, capsys):
        exit_code = search_cli.main(["addition", "--config", str(temp_config)])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Found 3 results" in output
        assert "Mathematics Lesson Plan - Addition [title, description, tags]" in output

    def test_blank_query(self, search_cli, temp_config, reset_config_singleton, capsys):
        exit_code = search_cli.main(["", "--config", str(temp_config)])

        assert exit_code == 0
        assert "Enter query text" in capsys.readouterr().out

    def test_type_filter_browse(self, search_cli, temp_config, reset_config_singleton, capsys):
        exit_code = search_cli.main(["--type", "scheme", "--config", str(temp_config)])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Found 1 result" in output
        assert "Numbers 1 to 20" in output

    def test_limit(self, search_cli, temp_config, reset_config_singleton, capsys):
        search_cli.main(["addition", "--limit", "1", "--config", str(temp_config)])

        assert "... 2 more" in capsys.readouterr().out

    def test_unknown_type_is_rejected(self, search_cli, temp_config, reset_config_singleton, capsys):
        exit_code = search_cli.main(["math", "--type", "video", "--config", str(temp_config)])

        assert exit_code == 2
        assert "Invalid query" in capsys.readouterr().out

    def test_missing_catalog(self, search_cli, temp_config, temp_dir, reset_config_singleton, capsys):
        exit_code = search_cli.main([
            "math", "--catalog", str(temp_dir / "missing.json"), "--config", str(temp_config)
        ])

        assert exit_code == 1
        assert "Catalog error" in capsys.readouterr().out
