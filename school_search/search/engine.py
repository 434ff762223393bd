"""
Global search engine over the school's record collections.

Scans the content library, curriculum schemes and weekly plans, the file
manager, lesson plans and quizzes; scores each record against the query
text, merges everything into one list, applies the categorical filters
and sorts. Pure over its inputs: safe to call on every keystroke.
"""

import time
from collections import Counter
from typing import List, Tuple

from ..core import get_logger
from .filters import apply_filters, sort_results
from .models import SCANNED_SOURCE_TYPES, SearchQuery, SearchResult, SearchStats, SourceType
from .records import SourceCollections
from .scoring import FIELD_RULES, RESULT_BUILDERS, score_record, search_timestamp

logger = get_logger(__name__)


_COLLECTION_FOR_SOURCE = {
    SourceType.CONTENT: "content",
    SourceType.SCHEME: "schemes",
    SourceType.WEEKLY_PLAN: "weekly_plans",
    SourceType.FILE: "files",
    SourceType.LESSON: "lessons",
    SourceType.QUIZ: "quizzes",
}


class SearchEngine:
    """
    Relevance search with filter and sort over heterogeneous sources.

    Holds no state between calls; the only setting is whether filter-stage
    counts are logged.
    """

    def __init__(self, log_filter_stages: bool = False):
        """
        Initialize the engine.

        Args:
            log_filter_stages: Log before/after counts of each filter at DEBUG.
        """
        self.log_filter_stages = log_filter_stages

    @classmethod
    def from_config(cls, config) -> "SearchEngine":
        """Build an engine using the search section of a Config."""
        return cls(log_filter_stages=config.search.log_filter_stages)

    def search(self, query: SearchQuery, sources: SourceCollections = None) -> List[SearchResult]:
        """
        Run a search.

        Args:
            query: Text, filters and sort settings.
            sources: Snapshot of every collaborator's records. None is
                    treated as empty collections.

        Returns:
            Ordered list of results. Empty when the query has neither text
            nor a type, level, subject or system filter.
        """
        results, _ = self.search_with_stats(query, sources)
        return results

    def search_with_stats(
        self,
        query: SearchQuery,
        sources: SourceCollections = None
    ) -> Tuple[List[SearchResult], SearchStats]:
        """
        Run a search and report statistics about it.

        Returns:
            Tuple of (ordered results, SearchStats).
        """
        start_time = time.time()

        if query.is_blank:
            return [], SearchStats(query=query.text, total_results=0, execution_time_ms=0)

        sources = sources or SourceCollections()

        scored, scanned = self._scan(query, sources)
        filtered = apply_filters(scored, query, log_stages=self.log_filter_stages)
        ordered = sort_results(filtered, query.sort_by, query.sort_order)

        execution_time = (time.time() - start_time) * 1000

        stats = SearchStats(
            query=query.text,
            total_results=len(ordered),
            execution_time_ms=round(execution_time, 2),
            scanned_records=scanned,
            counts_by_type=dict(Counter(result.source_type.value for result in ordered))
        )

        logger.debug(
            f"Search '{query.text}': {len(scored)} matched, "
            f"{len(ordered)} after filters in {execution_time:.1f}ms"
        )

        return ordered, stats

    def _scan(self, query: SearchQuery, sources: SourceCollections) -> Tuple[List[SearchResult], int]:
        """Score every record of every non-excluded source, dropping zero scores."""
        needle = query.normalized_text
        now = search_timestamp()

        results: List[SearchResult] = []
        scanned = 0

        for source_type in SCANNED_SOURCE_TYPES:
            if not query.includes_source(source_type):
                continue

            rules = FIELD_RULES[source_type]
            build_result = RESULT_BUILDERS[source_type]
            records = getattr(sources, _COLLECTION_FOR_SOURCE[source_type], None) or ()

            for record in records:
                scanned += 1
                score, matched_fields = score_record(rules, record, needle)
                if score > 0:
                    results.append(build_result(record, score, matched_fields, now))

        return results, scanned


def search(query: SearchQuery, sources: SourceCollections = None) -> List[SearchResult]:
    """Run a search with a default engine."""
    return SearchEngine().search(query, sources)


if __name__ == "__main__":
    from .records import ContentItem, FileRecord

    collections = SourceCollections(
        content=[ContentItem(id="1", title="Math Quiz", subject="Mathematics", tags=("math",))],
        files=[FileRecord(id="f1", name="Math Worksheet", category="Mathematics")]
    )

    engine = SearchEngine(log_filter_stages=True)
    found, stats = engine.search_with_stats(
        SearchQuery(text="math", subjects=frozenset({"Mathematics"})),
        collections
    )

    print(stats.summary)
    for r in found:
        print(f"  [{r.source_type.value}] {r.title} score={r.relevance_score} matched={r.matched_fields}")
