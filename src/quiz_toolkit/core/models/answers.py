"""
Module: answers

Purpose:
    Provides the Answer dataclass - a response slot derived one-to-one
    from a Question and linked back to it by question_id.

Key Functions:
    - Answer.for_question(question): Empty, unsubmitted answer for a question
    - Answer.to_dict() / Answer.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .questions.Question (TYPE_CHECKING only)

Used By:
    - quiz_toolkit.collection.answers.make_answers
    - quiz_toolkit.core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .questions import Question


@dataclass(frozen=True, slots=True)
class Answer:
    """
    Response to a single question (immutable).

    Attributes:
        question_id: id of the Question this answers (lookup only)
        text: Free-form response
        submitted: Whether the response has been handed in
        correct: Whether the response was judged correct

    Example:
        >>> Answer(question_id=3)
        Answer(question_id=3, text='', submitted=False, correct=False)
    """

    question_id: int
    text: str = ""
    submitted: bool = False
    correct: bool = False

    @classmethod
    def for_question(cls, question: Question) -> Answer:
        """Empty, unsubmitted, incorrect answer for ``question``."""
        return cls(question_id=question.id)

    def to_dict(self) -> dict:
        """Serialize using the record's wire field names."""
        return {
            "questionId": self.question_id,
            "text": self.text,
            "submitted": self.submitted,
            "correct": self.correct,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Answer:
        return cls(
            question_id=data["questionId"],
            text=data.get("text", ""),
            submitted=data.get("submitted", False),
            correct=data.get("correct", False),
        )
