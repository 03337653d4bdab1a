"""
Module: output.csv_export

Purpose:
    Render a question collection as CSV text.

Format:
    id,name,options,points,published
    1,Addition,0,1,true
    5,Colors,3,1,true

    - The options column holds the NUMBER of options, not their text
    - published is written as true/false
    - Lines are joined with "\\n"; there is no trailing newline
    - Values are not quoted or escaped; names are assumed comma-free

Key Functions:
    - to_csv(): Collection to CSV string
"""

from __future__ import annotations

from typing import Sequence

from quiz_toolkit.core.models import Question
from quiz_toolkit.core.models.questions import Points

CSV_COLUMNS = ("id", "name", "options", "points", "published")
CSV_HEADER = ",".join(CSV_COLUMNS)


def _format_points(points: Points) -> str:
    # Whole-number floats print without the ".0" (2.0 -> "2")
    if isinstance(points, float) and points.is_integer():
        return str(int(points))
    return str(points)


def _format_row(question: Question) -> str:
    return ",".join((
        str(question.id),
        question.name,
        str(len(question.options)),
        _format_points(question.points),
        "true" if question.published else "false",
    ))


def to_csv(questions: Sequence[Question]) -> str:
    """
    Render questions as CSV, one row per question in order.

    Args:
        questions: Collection to export

    Returns:
        CSV text starting with the header line. An empty collection
        yields the header alone.

    Example:
        >>> to_csv([Question(1, "Addition", QuestionType.SHORT_ANSWER, published=True)])
        'id,name,options,points,published\\n1,Addition,0,1,true'
    """
    return "\n".join([CSV_HEADER, *(_format_row(q) for q in questions)])
