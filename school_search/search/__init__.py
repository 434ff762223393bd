"""
Search module: relevance scoring, filtering and sorting across sources.

Provides the query/result models, typed source records, display-name
mappings and the engine that merges every source into one ranked list.
"""

from .models import SearchQuery, SearchResult, SearchStats, SourceType, SortBy, SortOrder
from .records import (
    ContentItem,
    SchemeOfWork,
    WeeklyPlan,
    FileRecord,
    LessonPlan,
    Quiz,
    QuizQuestion,
    SourceCollections
)
from .display_names import level_display_name, subject_display_name, LEVELS, SUBJECTS, SYSTEMS
from .filters import apply_filters, sort_results
from .engine import SearchEngine, search

__all__ = [
    "SearchQuery",
    "SearchResult",
    "SearchStats",
    "SourceType",
    "SortBy",
    "SortOrder",
    "ContentItem",
    "SchemeOfWork",
    "WeeklyPlan",
    "FileRecord",
    "LessonPlan",
    "Quiz",
    "QuizQuestion",
    "SourceCollections",
    "level_display_name",
    "subject_display_name",
    "LEVELS",
    "SUBJECTS",
    "SYSTEMS",
    "apply_filters",
    "sort_results",
    "SearchEngine",
    "search"
]
