"""
Built-in lesson plans and quizzes.

The search page ships with these so the lesson and quiz sources are
never empty, even before any catalog has been exported.
"""

from ..search.records import LessonPlan, Quiz, QuizQuestion, SourceCollections


SAMPLE_LESSON_PLANS = (
    LessonPlan(
        id="lesson-1",
        title="Introduction to Mathematics",
        subject="Mathematics",
        level="Level I",
        system="anglophone",
        objectives=("Learn basic counting", "Understand numbers 1-10"),
        content="Basic mathematics concepts for young learners",
        author="Teacher John",
        created_at="2024-01-15"
    ),
    LessonPlan(
        id="lesson-2",
        title="English Grammar Basics",
        subject="English Language",
        level="Level II",
        system="anglophone",
        objectives=("Learn basic grammar rules", "Practice sentence structure"),
        content="Introduction to English grammar for intermediate students",
        author="Teacher Mary",
        created_at="2024-01-20"
    ),
)

SAMPLE_QUIZZES = (
    Quiz(
        id="quiz-1",
        title="Math Quiz - Addition",
        subject="Mathematics",
        level="Level I",
        system="anglophone",
        instructions="Complete the addition problems",
        questions=(
            QuizQuestion(question="What is 2 + 3?", options=("4", "5", "6"), correct=1),
            QuizQuestion(question="What is 1 + 1?", options=("1", "2", "3"), correct=1),
        ),
        author="Teacher John",
        created_at="2024-01-16"
    ),
    Quiz(
        id="quiz-2",
        title="English Vocabulary Test",
        subject="English Language",
        level="Level II",
        system="anglophone",
        instructions="Choose the correct word meaning",
        questions=(
            QuizQuestion(question='What does "happy" mean?', options=("Sad", "Joyful", "Angry"), correct=1),
        ),
        author="Teacher Mary",
        created_at="2024-01-21"
    ),
)


def sample_collections() -> SourceCollections:
    """Collections holding only the sample lesson plans and quizzes."""
    return SourceCollections(lessons=SAMPLE_LESSON_PLANS, quizzes=SAMPLE_QUIZZES)
