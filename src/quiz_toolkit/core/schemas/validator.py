"""
Schema Validation Utilities

Validates question and answer dictionaries before they are turned into
models.

- Basic checks (always): required fields, known type tag, field types
- Strict checks (optional): full JSON Schema validation with jsonschema
- Fail fast on the first violation, reporting a dotted path
"""

from __future__ import annotations

import json
from numbers import Real
from pathlib import Path
from typing import Any

import jsonschema


QUESTION_TYPES = ("multiple_choice_question", "short_answer_question")


_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _check_required(data: Any, required: list[str], path: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError(
            f"Expected an object, got {type(data).__name__}",
            path=path,
        )
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )


def _check_bool(data: dict[str, Any], key: str, path: str) -> None:
    if key in data and not isinstance(data[key], bool):
        raise ValidationError(
            f"{key} must be true or false: {data[key]!r}",
            path=_join(path, key)
        )


def _check_id(value: Any, key: str, path: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Invalid {key}: {value!r} (must be an integer)",
            path=_join(path, key)
        )


def _run_schema(data: dict[str, Any], name: str, path: str) -> None:
    schema = _load_schema(name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        location = ".".join(str(p) for p in e.absolute_path)
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=_join(path, location) if location else path,
            errors=[e.message]
        )


def validate_question(data: dict[str, Any], *, strict: bool = False, path: str = "") -> None:
    """
    Validate question data.

    Args:
        data: Question dictionary to validate
        strict: If True, also run the JSON Schema after the basic checks
        path: Prefix for reported paths (e.g. "[3]" inside a collection)

    Raises:
        ValidationError: If data is invalid
    """
    _check_required(data, ["id", "name", "type"], path)

    _check_id(data["id"], "id", path)

    if not isinstance(data["name"], str):
        raise ValidationError(
            f"Invalid name: {data['name']!r} (must be a string)",
            path=_join(path, "name")
        )

    if data["type"] not in QUESTION_TYPES:
        raise ValidationError(
            f"Invalid question type: {data['type']!r}",
            path=_join(path, "type")
        )

    for key in ("body", "expected"):
        if key in data and not isinstance(data[key], str):
            raise ValidationError(
                f"Invalid {key}: {data[key]!r} (must be a string)",
                path=_join(path, key)
            )

    options = data.get("options", [])
    if not isinstance(options, list):
        raise ValidationError(
            "options must be a list",
            path=_join(path, "options")
        )
    for i, option in enumerate(options):
        if not isinstance(option, str):
            raise ValidationError(
                f"Invalid option: {option!r} (must be a string)",
                path=f"{_join(path, 'options')}[{i}]"
            )

    if "points" in data:
        points = data["points"]
        if isinstance(points, bool) or not isinstance(points, Real) or points < 0:
            raise ValidationError(
                f"Invalid points: {points!r} (must be a non-negative number)",
                path=_join(path, "points")
            )

    _check_bool(data, "published", path)

    if strict:
        _run_schema(data, "question", path)


def validate_answer(data: dict[str, Any], *, strict: bool = False, path: str = "") -> None:
    """
    Validate answer data.

    Args:
        data: Answer dictionary (wire field names) to validate
        strict: If True, also run the JSON Schema after the basic checks
        path: Prefix for reported paths

    Raises:
        ValidationError: If data is invalid
    """
    _check_required(data, ["questionId"], path)
    _check_id(data["questionId"], "questionId", path)

    if "text" in data and not isinstance(data["text"], str):
        raise ValidationError(
            f"Invalid text: {data['text']!r} (must be a string)",
            path=_join(path, "text")
        )
    _check_bool(data, "submitted", path)
    _check_bool(data, "correct", path)

    if strict:
        _run_schema(data, "answer", path)
