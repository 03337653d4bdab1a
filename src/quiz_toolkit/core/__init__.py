"""
Quiz Toolkit Core Package

Shared data models, validation and serialization used by every
collection operation.

1. **Immutable Data Models**
   - Question and Answer are frozen dataclasses
   - Edits create new instances, inputs are never changed

2. **Closed Question Types**
   - QuestionType enum with exactly two members
   - Unknown tags are rejected at construction and validation time
"""

from .models import Answer, Question, QuestionType
from .schemas import ValidationError

__all__ = [
    "Answer",
    "Question",
    "QuestionType",
    "ValidationError",
]
