"""
Module: collection.aggregation

Purpose:
    Scalar and projected views over a question collection: names,
    point totals and whether all questions share one type.

Key Functions:
    - get_names(): Question names in order
    - sum_points(): Total points
    - sum_published_points(): Total points of published questions
    - same_type(): Whether every question has the first question's type
"""

from __future__ import annotations

from typing import List, Sequence

from quiz_toolkit.core.models import Question
from quiz_toolkit.core.models.questions import Points

from .filtering import get_published_questions


def get_names(questions: Sequence[Question]) -> List[str]:
    """Names of all questions, in order."""
    return [q.name for q in questions]


def sum_points(questions: Sequence[Question]) -> Points:
    """
    Sum the points of every question.

    Args:
        questions: Collection to total

    Returns:
        Total points (0 for an empty collection)
    """
    return sum(q.points for q in questions)


def sum_published_points(questions: Sequence[Question]) -> Points:
    """
    Sum the points of published questions only.

    Returns:
        Total published points (0 when nothing is published)
    """
    return sum_points(get_published_questions(questions))


def same_type(questions: Sequence[Question]) -> bool:
    """
    Check whether all questions share one type.

    Compares every question against the first question's type, so the
    check holds for any number of question types.

    Args:
        questions: Collection to check

    Returns:
        True for an empty collection or when all types match
    """
    if not questions:
        return True
    first = questions[0].type
    return all(q.type == first for q in questions)
