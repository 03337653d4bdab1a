"""
Core Models Package

Immutable data models shared by every collection operation.

All models in this package are frozen dataclasses. Edits never happen in
place: operations build a new instance with ``dataclasses.replace`` and a
new list around it, so callers always own what they get back.
"""

from .questions import Question, QuestionType
from .answers import Answer

__all__ = [
    "Question",
    "QuestionType",
    "Answer",
]
