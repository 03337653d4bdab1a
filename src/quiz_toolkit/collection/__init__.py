"""
Module: collection

Purpose:
    Pure functions over ordered question collections. Nothing here keeps
    state or changes its arguments: each call returns a new list, a single
    existing Question, or a scalar.

Key Functions:
    - Filtering: get_published_questions, get_non_empty_questions,
      find_question, remove_question
    - Aggregation: get_names, sum_points, sum_published_points, same_type
    - Answers: make_answers
    - Editing: publish_all, add_new_question, rename_question_by_id,
      change_question_type_by_id, edit_option, duplicate_question_in_array
"""

from .filtering import (
    get_published_questions,
    get_non_empty_questions,
    find_question,
    remove_question,
)
from .aggregation import get_names, sum_points, sum_published_points, same_type
from .answers import make_answers
from .editing import (
    APPEND_OPTION,
    publish_all,
    add_new_question,
    rename_question_by_id,
    change_question_type_by_id,
    edit_option,
    duplicate_question_in_array,
)

__all__ = [
    # Filtering
    "get_published_questions",
    "get_non_empty_questions",
    "find_question",
    "remove_question",
    # Aggregation
    "get_names",
    "sum_points",
    "sum_published_points",
    "same_type",
    # Answers
    "make_answers",
    # Editing
    "APPEND_OPTION",
    "publish_all",
    "add_new_question",
    "rename_question_by_id",
    "change_question_type_by_id",
    "edit_option",
    "duplicate_question_in_array",
]
