"""
Module: collection.filtering

Purpose:
    Select, look up and remove questions in a collection. Every function
    returns a new list (or a single existing Question) and leaves the
    input sequence untouched.

Key Functions:
    - get_published_questions(): Keep published questions
    - get_non_empty_questions(): Drop questions with no content at all
    - find_question(): First question with an id, or None
    - remove_question(): Drop every question with an id

Dependencies:
    - quiz_toolkit.core.models: Question
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from quiz_toolkit.core.models import Question

logger = logging.getLogger(__name__)


def get_published_questions(questions: Sequence[Question]) -> List[Question]:
    """
    Keep only published questions.

    Args:
        questions: Collection to filter

    Returns:
        Published questions in their original order
    """
    return [q for q in questions if q.published]


def get_non_empty_questions(questions: Sequence[Question]) -> List[Question]:
    """
    Drop empty questions.

    A question is empty when its body and expected answer are both empty
    strings and it has no options. Anything else is kept.

    Args:
        questions: Collection to filter

    Returns:
        Non-empty questions in their original order
    """
    return [q for q in questions if not q.is_empty]


def find_question(questions: Sequence[Question], id: int) -> Optional[Question]:
    """
    Find the first question with the given id.

    Args:
        questions: Collection to search
        id: Question id to look for

    Returns:
        Matching Question or None
    """
    for question in questions:
        if question.id == id:
            return question
    return None


def remove_question(questions: Sequence[Question], id: int) -> List[Question]:
    """
    Remove every question with the given id.

    Args:
        questions: Collection to filter
        id: Question id to drop

    Returns:
        Remaining questions in their original order
    """
    result = [q for q in questions if q.id != id]
    if len(result) == len(questions):
        logger.debug(f"remove_question: no question with id {id}")
    return result
