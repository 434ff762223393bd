"""
Per-source relevance scoring and result conversion.

Every source has a fixed, ordered list of field rules. A rule whose field
contains the query text (literal, case-insensitive substring) adds its
weight to the score and its name to the matched fields. List fields match
when any element contains the text, and count once.

Weights favour titles and topics over incidental tag matches.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..utils import any_contains_text, contains_text, to_iso_string
from .models import SearchResult, SourceType
from .records import ContentItem, FileRecord, LessonPlan, Quiz, QuizQuestion, SchemeOfWork, WeeklyPlan

NO_DESCRIPTION = "No description available"

CURRICULUM_CATEGORY = "Anglophone Curriculum"
CURRICULUM_AUTHOR = "Ministry of Education"

# Score given to every record when the query has no text
BROWSE_SCORE = 1


@dataclass(frozen=True)
class FieldRule:
    """One scored field: its display name, weight and accessor."""
    name: str
    weight: int
    getter: Callable[[Any], Any]
    many: bool = False

    def matches(self, record: Any, needle: str) -> bool:
        value = self.getter(record)
        if self.many:
            return any_contains_text(value, needle)
        return contains_text(value, needle)


FIELD_RULES: Dict[SourceType, Tuple[FieldRule, ...]] = {
    SourceType.CONTENT: (
        FieldRule("title", 10, lambda r: r.title),
        FieldRule("description", 8, lambda r: r.description),
        FieldRule("tags", 5, lambda r: r.tags, many=True),
        FieldRule("subject", 7, lambda r: r.subject),
    ),
    SourceType.SCHEME: (
        FieldRule("topic", 10, lambda r: r.topic),
        FieldRule("objectives", 8, lambda r: r.objectives, many=True),
        FieldRule("content", 6, lambda r: r.content, many=True),
        FieldRule("activities", 5, lambda r: r.activities, many=True),
    ),
    SourceType.WEEKLY_PLAN: (
        FieldRule("theme", 10, lambda r: r.theme),
        FieldRule("learningOutcomes", 8, lambda r: r.learning_outcomes, many=True),
        FieldRule("subThemes", 6, lambda r: r.sub_themes, many=True),
        FieldRule("crossCurricularLinks", 5, lambda r: r.cross_curricular_links, many=True),
    ),
    SourceType.FILE: (
        FieldRule("name", 10, lambda r: r.name),
        FieldRule("description", 8, lambda r: r.description),
        FieldRule("category", 6, lambda r: r.category),
        FieldRule("tags", 5, lambda r: r.tags, many=True),
    ),
    SourceType.LESSON: (
        FieldRule("title", 10, lambda r: r.title),
        FieldRule("subject", 8, lambda r: r.subject),
        FieldRule("objectives", 7, lambda r: r.objectives, many=True),
        FieldRule("content", 6, lambda r: r.content),
    ),
    SourceType.QUIZ: (
        FieldRule("title", 10, lambda r: r.title),
        FieldRule("subject", 8, lambda r: r.subject),
        FieldRule("instructions", 7, lambda r: r.instructions),
        FieldRule("questions", 6, lambda r: _question_texts(r), many=True),
    ),
}


def score_record(
    rules: Sequence[FieldRule],
    record: Any,
    needle: str
) -> Tuple[int, List[str]]:
    """
    Score one record against normalized query text.

    Args:
        rules: Field rules of the record's source, in priority order.
        record: The source record.
        needle: Trimmed, lower-cased query text. Empty means browse mode.

    Returns:
        Tuple of (relevance score, matched field names in rule order).
        Browse mode yields (1, []).
    """
    if not needle:
        return BROWSE_SCORE, []

    score = 0
    matched_fields: List[str] = []
    for rule in rules:
        if rule.matches(record, needle):
            score += rule.weight
            matched_fields.append(rule.name)

    return score, matched_fields


def _joined(values: Optional[Sequence[str]]) -> Optional[str]:
    texts = [value for value in (values or ()) if isinstance(value, str)]
    return ", ".join(texts) if texts else None


def _question_texts(quiz: Quiz) -> List[Optional[str]]:
    return [q.question for q in (quiz.questions or ()) if isinstance(q, QuizQuestion)]


def _or_default(value: Optional[str], default: str) -> str:
    return value if value else default


def search_timestamp() -> str:
    """Current UTC time in the ISO form curriculum results are dated with."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def content_result(item: ContentItem, score: int, matched: List[str], now: str) -> SearchResult:
    return SearchResult(
        id=f"content-{item.id}",
        source_type=SourceType.CONTENT,
        title=_or_default(item.title, "Untitled Content"),
        description=_or_default(item.description, NO_DESCRIPTION),
        relevance_score=score,
        matched_fields=matched,
        category=_or_default(item.content_type, "General"),
        level=item.level,
        subject=item.subject,
        system=item.system,
        author=item.author,
        date=item.created_at,
        tags=list(item.tags or ()) or None,
        record=item
    )


def scheme_result(scheme: SchemeOfWork, score: int, matched: List[str], now: str) -> SearchResult:
    return SearchResult(
        id=f"scheme-{scheme.id}",
        source_type=SourceType.SCHEME,
        title=_or_default(scheme.topic, "Untitled Scheme"),
        description=_or_default(_joined(scheme.objectives), NO_DESCRIPTION),
        relevance_score=score,
        matched_fields=matched,
        category=CURRICULUM_CATEGORY,
        level=scheme.level_id,
        subject=scheme.subject_id,
        system="anglophone",
        author=CURRICULUM_AUTHOR,
        date=now,
        tags=["scheme", "curriculum", "anglophone"],
        record=scheme
    )


def weekly_plan_result(plan: WeeklyPlan, score: int, matched: List[str], now: str) -> SearchResult:
    return SearchResult(
        id=f"weekly-{plan.id}",
        source_type=SourceType.WEEKLY_PLAN,
        title=_or_default(plan.theme, "Untitled Weekly Plan"),
        description=_or_default(_joined(plan.learning_outcomes), NO_DESCRIPTION),
        relevance_score=score,
        matched_fields=matched,
        category=CURRICULUM_CATEGORY,
        level=plan.level_id,
        subject=plan.subject_id,
        system="anglophone",
        author=CURRICULUM_AUTHOR,
        date=now,
        tags=["weekly-plan", "curriculum", "anglophone"],
        record=plan
    )


def file_result(file: FileRecord, score: int, matched: List[str], now: str) -> SearchResult:
    # Files carry no level, subject or system
    return SearchResult(
        id=f"file-{file.id}",
        source_type=SourceType.FILE,
        title=_or_default(file.name, "Untitled File"),
        description=_or_default(file.description, NO_DESCRIPTION),
        relevance_score=score,
        matched_fields=matched,
        category=_or_default(file.category, "General"),
        author=file.uploaded_by,
        date=to_iso_string(file.uploaded_at),
        tags=list(file.tags or ()) or None,
        record=file
    )


def lesson_result(lesson: LessonPlan, score: int, matched: List[str], now: str) -> SearchResult:
    return SearchResult(
        id=f"lesson-{lesson.id}",
        source_type=SourceType.LESSON,
        title=_or_default(lesson.title, "Untitled Lesson"),
        description=_or_default(_joined(lesson.objectives), NO_DESCRIPTION),
        relevance_score=score,
        matched_fields=matched,
        category="Lesson Plans",
        level=lesson.level,
        subject=lesson.subject,
        system=lesson.system,
        author=lesson.author,
        date=lesson.created_at,
        tags=["lesson", "plan"],
        record=lesson
    )


def quiz_result(quiz: Quiz, score: int, matched: List[str], now: str) -> SearchResult:
    return SearchResult(
        id=f"quiz-{quiz.id}",
        source_type=SourceType.QUIZ,
        title=_or_default(quiz.title, "Untitled Quiz"),
        description=_or_default(quiz.instructions, NO_DESCRIPTION),
        relevance_score=score,
        matched_fields=matched,
        category="Quizzes",
        level=quiz.level,
        subject=quiz.subject,
        system=quiz.system,
        author=quiz.author,
        date=quiz.created_at,
        tags=["quiz", "assessment"],
        record=quiz
    )


RESULT_BUILDERS = {
    SourceType.CONTENT: content_result,
    SourceType.SCHEME: scheme_result,
    SourceType.WEEKLY_PLAN: weekly_plan_result,
    SourceType.FILE: file_result,
    SourceType.LESSON: lesson_result,
    SourceType.QUIZ: quiz_result,
}


if __name__ == "__main__":
    lesson = LessonPlan(
        id="lesson-1",
        title="Introduction to Mathematics",
        subject="Mathematics",
        objectives=("Learn basic counting",)
    )
    score, matched = score_record(FIELD_RULES[SourceType.LESSON], lesson, "math")
    print(f"score={score} matched={matched}")
    print(lesson_result(lesson, score, matched, search_timestamp()))
