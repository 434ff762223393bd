"""
School Content Search Package.

Global search across a primary school's content library, curriculum
schemes and weekly plans, file manager, lesson plans and quizzes, with
a Streamlit search page on top.
"""

__version__ = "1.0.0"
