"""
Utils Package

Serialization helpers for questions and answers.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_questions,
    deserialize_questions,
    serialize_answers,
    deserialize_answer,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_questions",
    "deserialize_questions",
    "serialize_answers",
    "deserialize_answer",
]
