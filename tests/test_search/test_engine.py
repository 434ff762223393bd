"""
Tests for the global search engine.

Runs complete searches over the sample collections: short-circuit,
browse mode, scoring, filtering and ordering together.
"""

import pytest

from school_search.search import SearchEngine, search
from school_search.search.models import SearchQuery, SortBy, SortOrder, SourceType
from school_search.search.records import (
    ContentItem,
    FileRecord,
    LessonPlan,
    Quiz,
    SchemeOfWork,
    SourceCollections,
    WeeklyPlan
)


@pytest.fixture
def engine():
    return SearchEngine()


class TestShortCircuit:
    """Tests for the blank-query short-circuit."""

    def test_blank_query_returns_nothing(self, engine, sample_sources):
        assert engine.search(SearchQuery(), sample_sources) == []

    def test_whitespace_query_returns_nothing(self, engine, sample_sources):
        assert engine.search(SearchQuery(text="   "), sample_sources) == []

    def test_author_only_returns_nothing(self, engine, sample_sources):
        query = SearchQuery(authors={"Teacher John"})

        assert engine.search(query, sample_sources) == []

    def test_blank_stats(self, engine, sample_sources):
        results, stats = engine.search_with_stats(SearchQuery(), sample_sources)

        assert results == []
        assert stats.total_results == 0
        assert stats.scanned_records == 0

    def test_missing_sources_treated_as_empty(self, engine):
        assert engine.search(SearchQuery(text="math"), None) == []


class TestBrowseMode:
    """Tests for searches with filters but no text."""

    def test_type_filter_lists_every_quiz(self, engine, sample_sources):
        results = engine.search(SearchQuery(types={SourceType.QUIZ}), sample_sources)

        assert [r.id for r in results] == ["quiz-q1"]
        assert results[0].relevance_score == 1
        assert results[0].matched_fields == []

    def test_level_filter_without_text(self, engine, sample_sources):
        results = engine.search(SearchQuery(levels={"Level II"}), sample_sources)

        assert sorted(r.id for r in results) == ["quiz-q1", "weekly-w1"]
        assert all(r.relevance_score == 1 for r in results)


class TestTextSearch:
    """Tests for scored text searches."""

    def test_math_ranking(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math"), sample_sources)

        assert [(r.id, r.relevance_score) for r in results] == [
            ("lesson-l1", 24),
            ("content-c1", 22),
            ("file-f1", 16),
            ("scheme-s1", 15),
            ("weekly-w1", 5),
        ]

    def test_zero_score_records_absent(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math"), sample_sources)

        assert "quiz-q1" not in [r.id for r in results]

    def test_matched_fields_in_rule_order(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math"), sample_sources)
        by_id = {r.id: r for r in results}

        assert by_id["content-c1"].matched_fields == ["title", "tags", "subject"]
        assert by_id["scheme-s1"].matched_fields == ["topic", "activities"]
        assert by_id["weekly-w1"].matched_fields == ["crossCurricularLinks"]

    @pytest.mark.parametrize("text", ["MATH", "Math", "  math  "])
    def test_case_and_whitespace_insensitive(self, engine, sample_sources, text):
        expected = engine.search(SearchQuery(text="math"), sample_sources)

        results = engine.search(SearchQuery(text=text), sample_sources)

        assert [(r.id, r.relevance_score, r.matched_fields) for r in results] == [
            (r.id, r.relevance_score, r.matched_fields) for r in expected
        ]

    def test_lesson_title_and_subject(self, engine):
        sources = SourceCollections(lessons=[
            LessonPlan(
                id="lesson-1",
                title="Introduction to Mathematics",
                subject="Mathematics",
                objectives=("Learn basic counting",)
            )
        ])

        results = engine.search(SearchQuery(text="math"), sources)

        assert len(results) == 1
        assert results[0].relevance_score == 18
        assert results[0].matched_fields == ["title", "subject"]

    def test_type_filter_restricts_sources(self, engine, sample_sources):
        results = engine.search(
            SearchQuery(text="math", types={SourceType.FILE, SourceType.LESSON}),
            sample_sources
        )

        assert [r.id for r in results] == ["lesson-l1", "file-f1"]

    def test_unknown_type_tag_matches_nothing(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math", types={"video"}), sample_sources)

        assert results == []


class TestFilteringAndSorting:
    """Tests for filters and sort through the engine."""

    def test_content_outranks_file_and_subject_filter_drops_file(self, engine):
        sources = SourceCollections(
            content=[ContentItem(id="1", title="Math Quiz", subject="Mathematics", tags=("math",))],
            files=[FileRecord(id="f1", name="Math Worksheet", category="Mathematics")]
        )

        unfiltered = engine.search(SearchQuery(text="math"), sources)
        filtered = engine.search(SearchQuery(text="math", subjects={"Mathematics"}), sources)

        assert [(r.id, r.relevance_score) for r in unfiltered] == [("content-1", 22), ("file-f1", 16)]
        assert [r.id for r in filtered] == ["content-1"]

    def test_subject_filter_maps_curriculum_ids(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math", subjects={"Mathematics"}), sample_sources)

        assert [r.id for r in results] == ["lesson-l1", "content-c1", "scheme-s1"]

    def test_level_filter(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math", levels={"Level I"}), sample_sources)

        assert [r.id for r in results] == ["lesson-l1", "content-c1", "scheme-s1"]

    def test_author_filter(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math", authors={"Teacher John"}), sample_sources)

        assert [r.id for r in results] == ["lesson-l1", "content-c1"]

    def test_curriculum_author(self, engine, sample_sources):
        results = engine.search(
            SearchQuery(text="math", authors={"Ministry of Education"}),
            sample_sources
        )

        assert [r.id for r in results] == ["scheme-s1", "weekly-w1"]

    def test_date_range(self, engine, sample_sources):
        results = engine.search(
            SearchQuery(text="math", date_from="2024-01-12", date_to="2024-01-31"),
            sample_sources
        )

        assert [r.id for r in results] == ["lesson-l1"]

    def test_sort_by_date(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math", sort_by=SortBy.DATE), sample_sources)

        # Curriculum rows are dated at search time
        assert [r.id for r in results] == ["scheme-s1", "weekly-w1", "file-f1", "lesson-l1", "content-c1"]

    def test_sort_by_title_ascending_is_reversed(self, engine, sample_sources):
        results = engine.search(
            SearchQuery(text="math", sort_by=SortBy.TITLE, sort_order=SortOrder.ASC),
            sample_sources
        )

        assert [r.title for r in results] == [
            "Stories",
            "Numbers and math games",
            "Math Worksheet",
            "Math Quiz",
            "Introduction to Mathematics",
        ]

    def test_relevance_ascending(self, engine, sample_sources):
        results = engine.search(SearchQuery(text="math", sort_order=SortOrder.ASC), sample_sources)

        assert [r.relevance_score for r in results] == [5, 15, 16, 22, 24]


class TestStats:
    """Tests for search_with_stats."""

    def test_counts_by_type(self, engine, sample_sources):
        results, stats = engine.search_with_stats(SearchQuery(text="math"), sample_sources)

        assert stats.total_results == len(results) == 5
        assert stats.scanned_records == 6
        assert stats.counts_by_type == {
            "content": 1,
            "scheme": 1,
            "weekly-plan": 1,
            "file": 1,
            "lesson": 1,
        }
        assert stats.execution_time_ms >= 0
        assert stats.summary == "Found 5 results"

    def test_scanned_records_respects_type_filter(self, engine, sample_sources):
        _, stats = engine.search_with_stats(SearchQuery(types={SourceType.QUIZ}), sample_sources)

        assert stats.scanned_records == 1
        assert stats.counts_by_type == {"quiz": 1}


class TestEngineConstruction:
    """Tests for engine construction helpers."""

    def test_from_config(self, configured):
        engine = SearchEngine.from_config(configured)

        assert engine.log_filter_stages is True

    def test_module_level_search(self, sample_sources):
        results = search(SearchQuery(text="vocabulary"), sample_sources)

        assert [r.id for r in results] == ["quiz-q1"]

    def test_search_is_repeatable(self, engine):
        sources = SourceCollections(quizzes=[Quiz(id="a", title="Grammar"), Quiz(id="b", title="Grammar drill")])
        query = SearchQuery(text="grammar")

        first = engine.search(query, sources)
        second = engine.search(query, sources)

        assert [r.id for r in first] == [r.id for r in second] == ["quiz-a", "quiz-b"]


class TestRecordsWithoutLists:
    """Tests for records whose list fields are left as None."""

    @pytest.mark.parametrize("sources,expected_id", [
        (SourceCollections(content=[ContentItem(id="1", title="Math", tags=None)]), "content-1"),
        (SourceCollections(files=[FileRecord(id="f1", name="Math sheet", tags=None)]), "file-f1"),
        (SourceCollections(quizzes=[Quiz(id="q1", title="Math", questions=None)]), "quiz-q1"),
        (SourceCollections(lessons=[LessonPlan(id="l1", title="Math", objectives=None)]), "lesson-l1"),
        (SourceCollections(schemes=[SchemeOfWork(id="s1", topic="Math", objectives=None,
                                                 content=None, activities=None)]), "scheme-s1"),
        (SourceCollections(weekly_plans=[WeeklyPlan(id="w1", theme="Math", sub_themes=None,
                                                    learning_outcomes=None,
                                                    cross_curricular_links=None)]), "weekly-w1"),
    ])
    def test_search_does_not_raise(self, engine, sources, expected_id):
        results = engine.search(SearchQuery(text="math"), sources)

        assert [r.id for r in results] == [expected_id]
        assert results[0].relevance_score == 10

    def test_missing_tags_give_no_tags(self, engine):
        sources = SourceCollections(content=[ContentItem(id="1", title="Math", tags=None)])

        results = engine.search(SearchQuery(text="math"), sources)

        assert results[0].tags is None

    def test_quiz_without_questions_in_browse_mode(self, engine):
        sources = SourceCollections(quizzes=[Quiz(id="q1", questions=None)])

        results = engine.search(SearchQuery(types={SourceType.QUIZ}), sources)

        assert [r.id for r in results] == ["quiz-q1"]
