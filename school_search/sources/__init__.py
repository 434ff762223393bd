"""
Source collaborators feeding the search engine.

Loads record collections from a JSON catalog and provides the built-in
sample lesson plans and quizzes.
"""

from .catalog import load_catalog, load_sources
from .samples import sample_collections, SAMPLE_LESSON_PLANS, SAMPLE_QUIZZES

__all__ = [
    "load_catalog",
    "load_sources",
    "sample_collections",
    "SAMPLE_LESSON_PLANS",
    "SAMPLE_QUIZZES"
]
