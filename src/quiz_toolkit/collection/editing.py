"""
Module: collection.editing

Purpose:
    Bulk edits over a question collection. Questions are frozen, so each
    edit builds replacement questions with dataclasses.replace() and
    returns a new list. Questions that are not touched are carried over
    as the same objects.

Key Functions:
    - publish_all(): Publish every question
    - add_new_question(): Append a blank question
    - rename_question_by_id(): Rename one question
    - change_question_type_by_id(): Retype one question (clears options
      unless the new type is multiple choice)
    - edit_option(): Append or replace an option on one question
    - duplicate_question_in_array(): Insert a copy right after the original

Missing ids never raise: the collection passes through unchanged. Rename
and retype log this at DEBUG, edit_option and duplicate_question_in_array
at WARNING.

Dependencies:
    - dataclasses (std)
    - quiz_toolkit.core.models: Question, QuestionType
    - quiz_toolkit.config: QuestionDefaults
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence, Tuple

from quiz_toolkit.config import QuestionDefaults
from quiz_toolkit.core.models import Question, QuestionType

logger = logging.getLogger(__name__)

APPEND_OPTION = -1


def _update_by_id(
    questions: Sequence[Question],
    target_id: int,
    update: Callable[[Question], Question],
) -> Tuple[List[Question], bool]:
    """
    Apply ``update`` to every question with ``target_id``.

    Returns:
        (new list, whether any question matched)
    """
    matched = False
    result = []
    for question in questions:
        if question.id == target_id:
            matched = True
            result.append(update(question))
        else:
            result.append(question)
    return result, matched


def publish_all(questions: Sequence[Question]) -> List[Question]:
    """
    Publish every question.

    Already published questions are returned as they are.

    Returns:
        New list where every question has published=True
    """
    return [q if q.published else replace(q, published=True) for q in questions]


def add_new_question(
    questions: Sequence[Question],
    id: int,
    name: str,
    type: QuestionType,
    *,
    defaults: Optional[QuestionDefaults] = None,
) -> List[Question]:
    """
    Append a blank question to the end of the collection.

    Args:
        questions: Existing collection
        id: Id for the new question
        name: Name for the new question
        type: Type for the new question
        defaults: Blank-question defaults (module defaults if None)

    Returns:
        New list with the blank question last
    """
    return [*questions, Question.blank(id, name, type, defaults=defaults)]


def rename_question_by_id(
    questions: Sequence[Question],
    target_id: int,
    new_name: str,
) -> List[Question]:
    """
    Rename the question with ``target_id``.

    Args:
        questions: Existing collection
        target_id: Id of the question to rename
        new_name: Replacement name

    Returns:
        New list; unchanged copy if no question matched
    """
    result, matched = _update_by_id(
        questions, target_id, lambda q: replace(q, name=new_name)
    )
    if not matched:
        logger.debug(f"rename_question_by_id: no question with id {target_id}")
    return result


def change_question_type_by_id(
    questions: Sequence[Question],
    target_id: int,
    new_type: QuestionType,
) -> List[Question]:
    """
    Change the type of the question with ``target_id``.

    Only multiple-choice questions keep options: retyping to any other
    type empties them.

    Args:
        questions: Existing collection
        target_id: Id of the question to retype
        new_type: Replacement type

    Returns:
        New list; unchanged copy if no question matched
    """
    new_type = QuestionType(new_type)

    def _retype(question: Question) -> Question:
        if new_type is QuestionType.MULTIPLE_CHOICE:
            return replace(question, type=new_type)
        return replace(question, type=new_type, options=())

    result, matched = _update_by_id(questions, target_id, _retype)
    if not matched:
        logger.debug(f"change_question_type_by_id: no question with id {target_id}")
    return result


def _edit_options(
    options: Tuple[str, ...],
    target_option_index: int,
    new_option: str,
) -> Tuple[str, ...]:
    """Append (index -1) or replace one option; out-of-range leaves options as-is."""
    if target_option_index == APPEND_OPTION:
        return (*options, new_option)
    if not 0 <= target_option_index < len(options):
        logger.warning(
            f"Option index {target_option_index} out of range for "
            f"{len(options)} options; options left unchanged"
        )
        return options
    return tuple(
        new_option if index == target_option_index else option
        for index, option in enumerate(options)
    )


def edit_option(
    questions: Sequence[Question],
    target_id: int,
    target_option_index: int,
    new_option: str,
) -> List[Question]:
    """
    Append or replace an option on the question with ``target_id``.

    Args:
        questions: Existing collection
        target_id: Id of the question to edit
        target_option_index: -1 to append, otherwise the index to replace
        new_option: Option text

    Returns:
        New list. An unknown id or an index outside the current options
        (other than -1) leaves the collection unchanged and logs a warning.
    """
    result, matched = _update_by_id(
        questions,
        target_id,
        lambda q: replace(
            q, options=_edit_options(q.options, target_option_index, new_option)
        ),
    )
    if not matched:
        logger.warning(f"edit_option: no question with id {target_id}")
    return result


def duplicate_question_in_array(
    questions: Sequence[Question],
    target_id: int,
    new_id: int,
    *,
    defaults: Optional[QuestionDefaults] = None,
) -> List[Question]:
    """
    Insert a copy of the question with ``target_id`` directly after it.

    The copy is built by Question.duplicate(): new id, "Copy of " name,
    unpublished. Only the first match is duplicated.

    Args:
        questions: Existing collection
        target_id: Id of the question to copy
        new_id: Id for the copy
        defaults: Supplies the copy name prefix (module defaults if None)

    Returns:
        New list one longer than the input; an unchanged copy (with a
        logged warning) if no question matched
    """
    result = list(questions)
    for index, question in enumerate(questions):
        if question.id == target_id:
            result.insert(index + 1, question.duplicate(new_id, defaults=defaults))
            return result

    logger.warning(f"duplicate_question_in_array: no question with id {target_id}")
    return result
