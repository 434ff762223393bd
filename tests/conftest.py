"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, a temporary config and catalog, sample
source collections, and singleton resets so tests stay isolated.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from school_search.search.records import (  # noqa: E402
    ContentItem,
    FileRecord,
    LessonPlan,
    Quiz,
    QuizQuestion,
    SchemeOfWork,
    SourceCollections,
    WeeklyPlan,
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="school_search_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def catalog_data() -> dict:
    """A small catalog in the camelCase form the stores export."""
    return {
        "libraryContent": [
            {
                "id": "1",
                "title": "Mathematics Lesson Plan - Addition",
                "description": "Teaching addition to Level I",
                "type": "lesson_plan",
                "subject": "Mathematics",
                "level": "Level I",
                "system": "anglophone",
                "tags": ["addition", "basic"],
                "author": "Teacher John",
                "createdAt": "2024-01-15"
            }
        ],
        "schemesOfWork": [
            {
                "id": "s1",
                "subjectId": "mathematics-l1",
                "levelId": "level-1",
                "topic": "Numbers 1 to 20",
                "objectives": ["Count objects up to 20"],
                "content": ["Counting"],
                "activities": ["Number songs"]
            }
        ],
        "weeklyPlans": [
            {
                "id": "w1",
                "subjectId": "science-l1",
                "levelId": "level-1",
                "theme": "Our Environment",
                "subThemes": ["Plants"],
                "learningOutcomes": ["Name five plants"],
                "crossCurricularLinks": ["Arts: drawing plants"]
            }
        ],
        "files": [
            {
                "id": "f1",
                "name": "Addition Worksheet.pdf",
                "category": "resource",
                "tags": ["worksheet"],
                "uploadedBy": "Teacher John",
                "uploadedAt": "2024-01-17T12:00:00.000Z"
            }
        ],
        "lessonPlans": [],
        "quizzes": [
            {
                "id": "q1",
                "title": "Addition Quiz",
                "subject": "Mathematics",
                "level": "Level I",
                "system": "anglophone",
                "instructions": "Answer every question",
                "questions": [{"question": "What is 2 + 3?", "options": ["4", "5"], "correct": 1}],
                "author": "Teacher John",
                "createdAt": "2024-01-16"
            }
        ]
    }


@pytest.fixture
def catalog_file(temp_dir: Path, catalog_data: dict) -> Path:
    """Write catalog_data to a JSON file."""
    path = temp_dir / "data" / "catalog.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(catalog_data), encoding="utf-8")
    return path


@pytest.fixture
def temp_config(temp_dir: Path, catalog_file: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.
        catalog_file: Catalog the config points at.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "catalog_path": str(catalog_file),
            "logs_directory": str(logs_dir)
        },
        "assets": {
            "css_path": "assets/style.css"
        },
        "search": {
            "default_sort_by": "relevance",
            "default_sort_order": "desc",
            "description_length": 120,
            "log_filter_stages": True,
            "include_samples": False
        },
        "gui": {
            "page_title": "Test Global Search",
            "results_per_page": 10,
            "show_matched_fields": True
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from school_search.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """Undo logging setup before and after the test."""
    from school_search.core import logger
    logger.reset_logging()
    yield
    logger.reset_logging()


@pytest.fixture
def configured(temp_config, reset_config_singleton):
    """Load the temp config into the singleton."""
    from school_search.core.config_loader import get_config
    yield get_config(temp_config)


@pytest.fixture
def sample_sources() -> SourceCollections:
    """One record per source, each mentioning "math" somewhere."""
    return SourceCollections(
        content=[
            ContentItem(
                id="c1",
                title="Math Quiz",
                subject="Mathematics",
                level="Level I",
                system="anglophone",
                tags=("math",),
                author="Teacher John",
                created_at="2024-01-10"
            )
        ],
        schemes=[
            SchemeOfWork(
                id="s1",
                subject_id="mathematics-l1",
                level_id="level-1",
                topic="Numbers and math games",
                objectives=("Count to 20",),
                content=("Counting",),
                activities=("Math songs",)
            )
        ],
        weekly_plans=[
            WeeklyPlan(
                id="w1",
                subject_id="english-l2",
                level_id="level-2",
                theme="Stories",
                sub_themes=("Folk tales",),
                learning_outcomes=("Retell a story",),
                cross_curricular_links=("Math: counting characters",)
            )
        ],
        files=[
            FileRecord(
                id="f1",
                name="Math Worksheet",
                category="Mathematics",
                uploaded_by="Teacher Mary",
                uploaded_at="2024-02-01T09:00:00Z"
            )
        ],
        lessons=[
            LessonPlan(
                id="l1",
                title="Introduction to Mathematics",
                subject="Mathematics",
                level="Level I",
                system="anglophone",
                objectives=("Learn basic counting",),
                content="Basic mathematics concepts",
                author="Teacher John",
                created_at="2024-01-15"
            )
        ],
        quizzes=[
            Quiz(
                id="q1",
                title="English Vocabulary Test",
                subject="English Language",
                level="Level II",
                system="anglophone",
                instructions="Choose the correct word meaning",
                questions=(QuizQuestion(question='What does "happy" mean?'),),
                author="Teacher Mary",
                created_at="2024-01-21"
            )
        ]
    )
