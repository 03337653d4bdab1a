"""
Module: quiz_toolkit.config

Purpose:
    Default values applied when questions are created or copied.
    Immutable configuration with validation on construction.

Key Classes:
    - QuestionDefaults: Points, visibility and copy naming for new questions

Dependencies:
    - dataclasses (std)

Used By:
    - quiz_toolkit.core.models.questions: Question.blank(), Question.duplicate()
    - quiz_toolkit.collection.editing: add_new_question(), duplicate_question_in_array()
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuestionDefaults:
    """
    Defaults for newly created questions (immutable).

    Attributes:
        points: Score given to a blank question
        published: Visibility of a blank question
        copy_prefix: Prepended to the name of a duplicated question

    Example:
        >>> QuestionDefaults(points=2).points
        2
    """

    points: int = 1
    published: bool = False
    copy_prefix: str = "Copy of "

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.points < 0:
            raise ValueError(f"points must be non-negative: {self.points}")
        if not isinstance(self.copy_prefix, str):
            raise ValueError(f"copy_prefix must be a string: {self.copy_prefix!r}")


DEFAULT_QUESTION_DEFAULTS = QuestionDefaults()
