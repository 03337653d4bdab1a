"""
Serialization Utilities

Provides to/from dict utilities for question and answer models.

- `serialize_*` and `deserialize_*` functions around the models'
  `to_dict()` / `from_dict()` methods
- Validation before deserialization (on by default)
- Collection helpers report the index of the offending record
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..models.answers import Answer
from ..models.questions import Question
from ..schemas.validator import ValidationError, validate_answer, validate_question

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.

    The output can be written to JSON and will pass schema validation.

    Args:
        question: Question instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before building the model
        strict: Run the full JSON Schema as part of validation

    Returns:
        Question instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be turned into a Question
    """
    if validate:
        validate_question(data, strict=strict)
    return Question.from_dict(data)


def serialize_questions(questions: Sequence[Question]) -> list[dict[str, Any]]:
    """Serialize a collection, preserving order."""
    return [serialize_question(q) for q in questions]


def deserialize_questions(
    items: Sequence[dict[str, Any]],
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[Question]:
    """
    Deserialize a collection of questions, preserving order.

    Args:
        items: Sequence of question dictionaries
        validate: Whether to validate each record
        strict: Run the full JSON Schema on each record

    Returns:
        List of Question instances

    Raises:
        ValidationError: If any record is invalid (path starts with its index)
    """
    questions = []
    for index, data in enumerate(items):
        try:
            if validate:
                validate_question(data, strict=strict, path=f"[{index}]")
            questions.append(Question.from_dict(data))
        except ValidationError:
            raise
        except (KeyError, ValueError, TypeError) as e:
            raise ValidationError(
                f"Error parsing question {index}: {e}",
                path=f"[{index}]",
                errors=[str(e)]
            )

    logger.debug(f"Deserialized {len(questions)} questions")
    return questions


# ─────────────────────────────────────────────────────────────────────────────
# Answer Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_answers(answers: Sequence[Answer]) -> list[dict[str, Any]]:
    """Serialize answers using their wire field names."""
    return [a.to_dict() for a in answers]


def deserialize_answer(data: dict[str, Any], *, validate: bool = True) -> Answer:
    """
    Deserialize an Answer from a dictionary.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_answer(data)
    return Answer.from_dict(data)
