"""
Module: questions

Purpose:
    Provides the Question dataclass - the single record type that every
    collection operation consumes and produces. Frozen, so any edit
    produces a new instance via dataclasses.replace().

Key Functions:
    - Question.blank(id, name, type): Fresh question with default values
    - Question.duplicate(new_id): Copy under a new id, marked as a copy
    - Question.is_empty: True when body, expected and options are all empty
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)
    - quiz_toolkit.config.QuestionDefaults

Used By:
    - quiz_toolkit.collection (all operations)
    - quiz_toolkit.output.csv_export
    - quiz_toolkit.core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from numbers import Real
from typing import Optional, Tuple, Union

from quiz_toolkit.config import DEFAULT_QUESTION_DEFAULTS, QuestionDefaults


class QuestionType(str, Enum):
    """Kind of question."""
    MULTIPLE_CHOICE = "multiple_choice_question"
    SHORT_ANSWER = "short_answer_question"

    def __str__(self) -> str:
        return self.value


Points = Union[int, float]


@dataclass(frozen=True, slots=True)
class Question:
    """
    Single quiz item (immutable).

    Attributes:
        id: Identifier, unique within a collection (not enforced)
        name: Display name
        type: MULTIPLE_CHOICE or SHORT_ANSWER
        body: Prompt text
        expected: Reference answer text
        options: Choices, only meaningful for MULTIPLE_CHOICE
        points: Score value (non-negative)
        published: Visibility flag

    Invariants:
        - points >= 0
        - type is a QuestionType member
        - options is a tuple of strings

    Short-answer questions are expected to carry no options. That rule is
    applied where a type is assigned (blank(), change_question_type_by_id)
    rather than on every construction, so option edits on a short-answer
    question still succeed.

    Example:
        >>> q = Question.blank(1, "Addition", QuestionType.SHORT_ANSWER)
        >>> q.points, q.published
        (1, False)
        >>> q.duplicate(2).name
        'Copy of Addition'
    """

    id: int
    name: str
    type: QuestionType
    body: str = ""
    expected: str = ""
    options: Tuple[str, ...] = ()
    points: Points = 1
    published: bool = False

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not isinstance(self.type, QuestionType):
            try:
                object.__setattr__(self, "type", QuestionType(self.type))
            except ValueError:
                raise ValueError(f"Unknown question type: {self.type!r}") from None
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))
        if isinstance(self.points, bool) or not isinstance(self.points, Real):
            raise ValueError(f"points must be a number: {self.points!r}")
        if self.points < 0:
            raise ValueError(f"points cannot be negative: {self.points}")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def blank(
        cls,
        id: int,
        name: str,
        type: QuestionType,
        *,
        defaults: Optional[QuestionDefaults] = None,
    ) -> Question:
        """
        Create an empty question.

        Body, expected answer and options all start empty regardless of
        type; points and published come from the defaults.

        Args:
            id: Identifier for the new question
            name: Display name
            type: Question type
            defaults: Overrides for points/published (module defaults if None)

        Returns:
            New Question
        """
        defaults = defaults or DEFAULT_QUESTION_DEFAULTS
        return cls(
            id=id,
            name=name,
            type=type,
            points=defaults.points,
            published=defaults.published,
        )

    def duplicate(
        self,
        new_id: int,
        *,
        defaults: Optional[QuestionDefaults] = None,
    ) -> Question:
        """
        Copy this question under a new id.

        The copy is unpublished and its name carries the copy prefix
        ("Copy of " by default). Everything else, options included, is kept.

        Args:
            new_id: Identifier for the copy
            defaults: Supplies copy_prefix (module defaults if None)

        Returns:
            New Question
        """
        defaults = defaults or DEFAULT_QUESTION_DEFAULTS
        return replace(
            self,
            id=new_id,
            name=f"{defaults.copy_prefix}{self.name}",
            published=False,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        """True when body, expected answer and options are all empty."""
        return self.body == "" and self.expected == "" and not self.options

    @property
    def is_multiple_choice(self) -> bool:
        return self.type is QuestionType.MULTIPLE_CHOICE

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict representation (type as its tag string, options as list)
        """
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "body": self.body,
            "expected": self.expected,
            "options": list(self.options),
            "points": self.points,
            "published": self.published,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from dictionary.

        Missing optional fields fall back to blank-question values.

        Args:
            data: Dict representation

        Returns:
            Question instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            type=QuestionType(data["type"]),
            body=data.get("body", ""),
            expected=data.get("expected", ""),
            options=tuple(data.get("options", [])),
            points=data.get("points", DEFAULT_QUESTION_DEFAULTS.points),
            published=data.get("published", DEFAULT_QUESTION_DEFAULTS.published),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id}, {self.name!r}, type={self.type.value}, "
            f"points={self.points}, published={self.published})"
        )
