"""
Data models for search functionality.

Defines the query, result and statistics dataclasses plus the enums
for source types and sort options used throughout the search module.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from ..core import SearchError


class SourceType(Enum):
    """Tags identifying which collaborator produced a result."""
    CONTENT = "content"
    SCHEME = "scheme"
    WEEKLY_PLAN = "weekly-plan"
    FILE = "file"
    LESSON = "lesson"
    QUIZ = "quiz"
    # Reserved: no collaborator emits it yet
    CURRICULUM = "curriculum"


# Order in which sources are scanned
SCANNED_SOURCE_TYPES = (
    SourceType.CONTENT,
    SourceType.SCHEME,
    SourceType.WEEKLY_PLAN,
    SourceType.FILE,
    SourceType.LESSON,
    SourceType.QUIZ,
)


class SortBy(Enum):
    """Available sort keys."""
    RELEVANCE = "relevance"
    DATE = "date"
    TITLE = "title"
    AUTHOR = "author"


class SortOrder(Enum):
    """Available sort orders."""
    ASC = "asc"
    DESC = "desc"


def _as_frozenset(values: Optional[Iterable[str]]) -> FrozenSet[str]:
    if not values:
        return frozenset()
    if isinstance(values, str):
        return frozenset([values])
    return frozenset(values)


def _coerce_source_type(tag: Any) -> Any:
    """Map a known tag string to its SourceType; unknown tags stay as-is and match nothing."""
    if isinstance(tag, SourceType):
        return tag
    try:
        return SourceType(tag)
    except ValueError:
        return tag


@dataclass(frozen=True)
class SearchQuery:
    """
    Represents one search invocation: free text plus categorical filters.

    Empty filter sets mean "no restriction". A new query is built for
    every keystroke or filter toggle; nothing is carried between searches.

    Attributes:
        text: Free-text query, matched case-insensitively as a substring.
        types: Source types to scan.
        levels: Level display names ("Level I", ...).
        subjects: Subject display names ("Mathematics", ...).
        systems: Education systems ("anglophone", "francophone").
        authors: Exact author names.
        sort_by: Sort key.
        sort_order: Sort order; ASC negates the comparator of every key.
        date_from: Optional inclusive lower bound on result date.
        date_to: Optional inclusive upper bound on result date.
    """
    text: str = ""
    types: FrozenSet[SourceType] = frozenset()
    levels: FrozenSet[str] = frozenset()
    subjects: FrozenSet[str] = frozenset()
    systems: FrozenSet[str] = frozenset()
    authors: FrozenSet[str] = frozenset()
    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESC
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "text", self.text if isinstance(self.text, str) else "")
        object.__setattr__(self, "types", frozenset(
            _coerce_source_type(tag) for tag in _as_frozenset(self.types)
        ))
        object.__setattr__(self, "sort_by", SortBy(self.sort_by))
        object.__setattr__(self, "sort_order", SortOrder(self.sort_order))
        object.__setattr__(self, "levels", _as_frozenset(self.levels))
        object.__setattr__(self, "subjects", _as_frozenset(self.subjects))
        object.__setattr__(self, "systems", _as_frozenset(self.systems))
        object.__setattr__(self, "authors", _as_frozenset(self.authors))

    @property
    def normalized_text(self) -> str:
        """Trimmed, lower-cased query text used for matching."""
        return self.text.strip().lower()

    @property
    def has_text(self) -> bool:
        return bool(self.normalized_text)

    @property
    def has_category_filters(self) -> bool:
        """
        Whether any type, level, subject or system filter is set.

        The author filter and the date range are not counted: on their own
        they do not turn a blank query into a search.
        """
        return bool(self.types or self.levels or self.subjects or self.systems)

    @property
    def is_blank(self) -> bool:
        """True when no search has been asked for yet."""
        return not self.has_text and not self.has_category_filters

    def includes_source(self, source_type: SourceType) -> bool:
        """Whether the type filter lets this source be scanned."""
        return not self.types or source_type in self.types

    def cleared(self) -> "SearchQuery":
        """Return this query with text and every filter emptied, keeping sort settings."""
        return replace(
            self,
            text="",
            types=frozenset(),
            levels=frozenset(),
            subjects=frozenset(),
            systems=frozenset(),
            authors=frozenset(),
            date_from=None,
            date_to=None
        )

    @classmethod
    def build(
        cls,
        text: str = "",
        types: Iterable[str] = None,
        levels: Iterable[str] = None,
        subjects: Iterable[str] = None,
        systems: Iterable[str] = None,
        authors: Iterable[str] = None,
        sort_by: str = "relevance",
        sort_order: str = "desc",
        date_from: str = None,
        date_to: str = None
    ) -> "SearchQuery":
        """
        Build a query from plain strings, as received from a UI or CLI.

        Raises:
            SearchError: If a type tag, sort key or sort order is unknown.
        """
        try:
            type_set = frozenset(SourceType(tag) for tag in (types or []))
        except ValueError as e:
            raise SearchError(f"Unknown source type: {e}", query=text, details={"types": list(types or [])})

        try:
            sort_key = SortBy(sort_by)
        except ValueError:
            raise SearchError(f"Unknown sort key: {sort_by}", query=text, details={"sort_by": sort_by})

        try:
            order = SortOrder(sort_order)
        except ValueError:
            raise SearchError(f"Unknown sort order: {sort_order}", query=text, details={"sort_order": sort_order})

        return cls(
            text=text or "",
            types=type_set,
            levels=_as_frozenset(levels),
            subjects=_as_frozenset(subjects),
            systems=_as_frozenset(systems),
            authors=_as_frozenset(authors),
            sort_by=sort_key,
            sort_order=order,
            date_from=date_from or None,
            date_to=date_to or None
        )


@dataclass
class SearchResult:
    """
    A single ranked row, built fresh on every search.

    Attributes:
        id: Identifier unique across sources ("scheme-3", "quiz-quiz-1", ...).
        source_type: Collaborator that produced the row.
        title: Display title, with an "Untitled ..." fallback.
        description: Display description, with a fixed fallback.
        relevance_score: Sum of matched field weights, or 1 for a text-less search.
        matched_fields: Field names that matched, in evaluation order.
        category: Display category.
        level: Raw level identifier, if any.
        subject: Raw subject identifier, if any.
        system: Education system, if any.
        author: Author name, if any.
        date: ISO date string, if any.
        tags: Tags, if any.
        record: The source record this row was built from.
    """
    id: str
    source_type: SourceType
    title: str
    description: str
    relevance_score: int
    matched_fields: List[str] = field(default_factory=list)
    category: Optional[str] = None
    level: Optional[str] = None
    subject: Optional[str] = None
    system: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    tags: Optional[List[str]] = None
    record: Any = field(default=None, repr=False, compare=False)


@dataclass
class SearchStats:
    """
    Statistics about a search execution.

    Attributes:
        query: The original query text.
        total_results: Number of results after filtering.
        execution_time_ms: Execution time in milliseconds.
        scanned_records: Records examined across all scanned sources.
        counts_by_type: Result count per source type tag.
    """
    query: str
    total_results: int
    execution_time_ms: float
    scanned_records: int = 0
    counts_by_type: Dict[str, int] = field(default_factory=dict)

    @property
    def summary(self) -> str:
        """Human-readable "Found N result(s)" line."""
        plural = "" if self.total_results == 1 else "s"
        return f"Found {self.total_results} result{plural}"
