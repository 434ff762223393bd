"""
Source record types scanned by the search engine.

Each collaborator store (content library, curriculum, file manager,
lesson plans, quizzes) is represented by one frozen dataclass carrying
its own named fields. Every field is optional: the engine treats a
missing value as "no match" and never raises on it.

from_dict() constructors accept the camelCase mappings the stores emit
(and that the JSON catalog uses).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union


def _text(data: Mapping, key: str) -> Optional[str]:
    """Read a string field, returning None for anything else."""
    value = data.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _texts(data: Mapping, key: str) -> Tuple[str, ...]:
    """Read a list-of-strings field, dropping non-string elements."""
    value = data.get(key)
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def _int(data: Mapping, key: str) -> Optional[int]:
    value = data.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _freeze_sequences(record: Any, *names: str) -> None:
    """Store list-like fields as tuples; None or a non-sequence becomes ()."""
    for name in names:
        value = getattr(record, name)
        if isinstance(value, tuple):
            continue
        if isinstance(value, list):
            object.__setattr__(record, name, tuple(value))
        else:
            object.__setattr__(record, name, ())


def _record_id(data: Mapping) -> str:
    value = data.get("id")
    return "" if value is None else str(value)


@dataclass(frozen=True)
class ContentItem:
    """An item from the content library."""
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    content_type: Optional[str] = None
    subject: Optional[str] = None
    level: Optional[str] = None
    system: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = ()
    author: Optional[str] = None
    created_at: Optional[str] = None

    def __post_init__(self):
        _freeze_sequences(self, "tags")

    @classmethod
    def from_dict(cls, data: Mapping) -> "ContentItem":
        return cls(
            id=_record_id(data),
            title=_text(data, "title"),
            description=_text(data, "description"),
            content_type=_text(data, "type"),
            subject=_text(data, "subject"),
            level=_text(data, "level"),
            system=_text(data, "system"),
            tags=_texts(data, "tags"),
            author=_text(data, "author"),
            created_at=_text(data, "createdAt")
        )


@dataclass(frozen=True)
class SchemeOfWork:
    """A scheme-of-work entry from the anglophone curriculum."""
    id: str
    subject_id: Optional[str] = None
    level_id: Optional[str] = None
    term: Optional[int] = None
    week: Optional[int] = None
    topic: Optional[str] = None
    objectives: Optional[Tuple[str, ...]] = ()
    content: Optional[Tuple[str, ...]] = ()
    activities: Optional[Tuple[str, ...]] = ()

    def __post_init__(self):
        _freeze_sequences(self, "objectives", "content", "activities")

    @classmethod
    def from_dict(cls, data: Mapping) -> "SchemeOfWork":
        return cls(
            id=_record_id(data),
            subject_id=_text(data, "subjectId"),
            level_id=_text(data, "levelId"),
            term=_int(data, "term"),
            week=_int(data, "week"),
            topic=_text(data, "topic"),
            objectives=_texts(data, "objectives"),
            content=_texts(data, "content"),
            activities=_texts(data, "activities")
        )


@dataclass(frozen=True)
class WeeklyPlan:
    """A weekly plan from the anglophone curriculum."""
    id: str
    subject_id: Optional[str] = None
    level_id: Optional[str] = None
    term: Optional[int] = None
    week: Optional[int] = None
    theme: Optional[str] = None
    sub_themes: Optional[Tuple[str, ...]] = ()
    learning_outcomes: Optional[Tuple[str, ...]] = ()
    cross_curricular_links: Optional[Tuple[str, ...]] = ()

    def __post_init__(self):
        _freeze_sequences(self, "sub_themes", "learning_outcomes", "cross_curricular_links")

    @classmethod
    def from_dict(cls, data: Mapping) -> "WeeklyPlan":
        return cls(
            id=_record_id(data),
            subject_id=_text(data, "subjectId"),
            level_id=_text(data, "levelId"),
            term=_int(data, "term"),
            week=_int(data, "week"),
            theme=_text(data, "theme"),
            sub_themes=_texts(data, "subThemes"),
            learning_outcomes=_texts(data, "learningOutcomes"),
            cross_curricular_links=_texts(data, "crossCurricularLinks")
        )


@dataclass(frozen=True)
class FileRecord:
    """A file held by the file manager."""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = ()
    uploaded_by: Optional[str] = None
    uploaded_at: Union[str, datetime, None] = None

    def __post_init__(self):
        _freeze_sequences(self, "tags")

    @classmethod
    def from_dict(cls, data: Mapping) -> "FileRecord":
        uploaded_at = data.get("uploadedAt")
        if not isinstance(uploaded_at, (str, datetime)):
            uploaded_at = None
        return cls(
            id=_record_id(data),
            name=_text(data, "name"),
            description=_text(data, "description"),
            category=_text(data, "category"),
            tags=_texts(data, "tags"),
            uploaded_by=_text(data, "uploadedBy"),
            uploaded_at=uploaded_at
        )


@dataclass(frozen=True)
class LessonPlan:
    """A teacher-authored lesson plan."""
    id: str
    title: Optional[str] = None
    subject: Optional[str] = None
    level: Optional[str] = None
    system: Optional[str] = None
    objectives: Optional[Tuple[str, ...]] = ()
    content: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[str] = None

    def __post_init__(self):
        _freeze_sequences(self, "objectives")

    @classmethod
    def from_dict(cls, data: Mapping) -> "LessonPlan":
        return cls(
            id=_record_id(data),
            title=_text(data, "title"),
            subject=_text(data, "subject"),
            level=_text(data, "level"),
            system=_text(data, "system"),
            objectives=_texts(data, "objectives"),
            content=_text(data, "content"),
            author=_text(data, "author"),
            created_at=_text(data, "createdAt")
        )


@dataclass(frozen=True)
class QuizQuestion:
    """One question of a quiz."""
    question: Optional[str] = None
    options: Optional[Tuple[str, ...]] = ()
    correct: Optional[int] = None

    def __post_init__(self):
        _freeze_sequences(self, "options")

    @classmethod
    def from_dict(cls, data: Any) -> "QuizQuestion":
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            question=_text(data, "question"),
            options=_texts(data, "options"),
            correct=_int(data, "correct")
        )


@dataclass(frozen=True)
class Quiz:
    """A quiz with its questions."""
    id: str
    title: Optional[str] = None
    subject: Optional[str] = None
    level: Optional[str] = None
    system: Optional[str] = None
    instructions: Optional[str] = None
    questions: Optional[Tuple[QuizQuestion, ...]] = ()
    author: Optional[str] = None
    created_at: Optional[str] = None

    def __post_init__(self):
        _freeze_sequences(self, "questions")

    @classmethod
    def from_dict(cls, data: Mapping) -> "Quiz":
        raw_questions = data.get("questions")
        if not isinstance(raw_questions, (list, tuple)):
            raw_questions = []
        return cls(
            id=_record_id(data),
            title=_text(data, "title"),
            subject=_text(data, "subject"),
            level=_text(data, "level"),
            system=_text(data, "system"),
            instructions=_text(data, "instructions"),
            questions=tuple(QuizQuestion.from_dict(item) for item in raw_questions),
            author=_text(data, "author"),
            created_at=_text(data, "createdAt")
        )


SourceRecord = Union[ContentItem, SchemeOfWork, WeeklyPlan, FileRecord, LessonPlan, Quiz]


def _records(cls, items: Optional[Iterable[Any]]) -> tuple:
    """Build a record tuple; anything but a list or tuple counts as an empty collection."""
    if not isinstance(items, (list, tuple)):
        return ()
    return tuple(
        item if isinstance(item, cls) else cls.from_dict(item)
        for item in items
        if isinstance(item, (cls, Mapping))
    )


@dataclass(frozen=True)
class SourceCollections:
    """
    Read-only snapshot of every collaborator's records for one search.

    Any collection may be empty; an absent store contributes nothing.
    """
    content: Tuple[ContentItem, ...] = ()
    schemes: Tuple[SchemeOfWork, ...] = ()
    weekly_plans: Tuple[WeeklyPlan, ...] = ()
    files: Tuple[FileRecord, ...] = ()
    lessons: Tuple[LessonPlan, ...] = ()
    quizzes: Tuple[Quiz, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "content", _records(ContentItem, self.content))
        object.__setattr__(self, "schemes", _records(SchemeOfWork, self.schemes))
        object.__setattr__(self, "weekly_plans", _records(WeeklyPlan, self.weekly_plans))
        object.__setattr__(self, "files", _records(FileRecord, self.files))
        object.__setattr__(self, "lessons", _records(LessonPlan, self.lessons))
        object.__setattr__(self, "quizzes", _records(Quiz, self.quizzes))

    @classmethod
    def from_dict(cls, data: Mapping) -> "SourceCollections":
        """
        Build collections from a catalog mapping.

        Recognised keys: libraryContent, schemesOfWork, weeklyPlans,
        files, lessonPlans, quizzes. Unknown keys are ignored.
        """
        return cls(
            content=data.get("libraryContent") or (),
            schemes=data.get("schemesOfWork") or (),
            weekly_plans=data.get("weeklyPlans") or (),
            files=data.get("files") or (),
            lessons=data.get("lessonPlans") or (),
            quizzes=data.get("quizzes") or ()
        )

    def merged_with(self, other: "SourceCollections") -> "SourceCollections":
        """Concatenate two snapshots collection by collection."""
        return SourceCollections(
            content=self.content + other.content,
            schemes=self.schemes + other.schemes,
            weekly_plans=self.weekly_plans + other.weekly_plans,
            files=self.files + other.files,
            lessons=self.lessons + other.lessons,
            quizzes=self.quizzes + other.quizzes
        )

    def counts(self) -> Dict[str, int]:
        """Number of records held per collection."""
        return {
            "content": len(self.content),
            "scheme": len(self.schemes),
            "weekly-plan": len(self.weekly_plans),
            "file": len(self.files),
            "lesson": len(self.lessons),
            "quiz": len(self.quizzes),
        }

    @property
    def total(self) -> int:
        return sum(self.counts().values())
