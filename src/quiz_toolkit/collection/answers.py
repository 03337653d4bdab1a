"""
Module: collection.answers

Purpose:
    Build the answer sheet for a collection: one blank Answer per
    Question, in the same order.
"""

from __future__ import annotations

from typing import List, Sequence

from quiz_toolkit.core.models import Answer, Question


def make_answers(questions: Sequence[Question]) -> List[Answer]:
    """
    Create one empty answer per question.

    Each answer copies the question's id into question_id, has empty
    text and is neither submitted nor correct.

    Args:
        questions: Collection to answer

    Returns:
        Answers in question order
    """
    return [Answer.for_question(q) for q in questions]
