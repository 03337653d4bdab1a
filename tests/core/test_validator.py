"""
Unit Tests for Schema Validation

Tests for validate_question() and validate_answer().
"""

import pytest

from quiz_toolkit.core.schemas.validator import (
    ValidationError,
    validate_answer,
    validate_question,
)


@pytest.fixture
def question_data() -> dict:
    return {
        "id": 5,
        "name": "Colors",
        "type": "multiple_choice_question",
        "body": "Which of these is a color?",
        "expected": "red",
        "options": ["red", "apple", "firetruck"],
        "points": 1,
        "published": True,
    }


class TestValidateQuestion:
    """Tests for validate_question."""

    def test_validate_when_valid_then_passes(self, question_data):
        validate_question(question_data)
        validate_question(question_data, strict=True)

    def test_validate_when_minimal_then_passes(self):
        validate_question({"id": 1, "name": "Q", "type": "short_answer_question"}, strict=True)

    def test_validate_when_not_dict_then_raises_error(self):
        with pytest.raises(ValidationError, match="Expected an object"):
            validate_question(["id", "name"])  # type: ignore

    def test_validate_when_missing_fields_then_lists_them(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_question({"id": 1})

        assert exc_info.value.errors == ["Missing field: name", "Missing field: type"]

    @pytest.mark.parametrize("key, value, path", [
        ("id", "5", "id"),
        ("id", True, "id"),
        ("name", 3, "name"),
        ("type", "essay_question", "type"),
        ("body", None, "body"),
        ("options", "red", "options"),
        ("options", ["red", 2], "options[1]"),
        ("points", -1, "points"),
        ("points", "1", "points"),
        ("published", "yes", "published"),
    ])
    def test_validate_when_field_invalid_then_reports_path(self, question_data, key, value, path):
        question_data[key] = value

        with pytest.raises(ValidationError) as exc_info:
            validate_question(question_data)

        assert exc_info.value.path == path

    def test_validate_when_path_prefix_given_then_prefixed(self, question_data):
        question_data["points"] = -3

        with pytest.raises(ValidationError) as exc_info:
            validate_question(question_data, path="[2]")

        assert exc_info.value.path == "[2].points"

    def test_validate_strict_when_extra_field_then_raises_error(self, question_data):
        question_data["difficulty"] = 0.5

        validate_question(question_data)  # Basic checks ignore unknown keys
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_question(question_data, strict=True)

    def test_validate_strict_when_short_answer_has_options_then_raises_error(self, question_data):
        question_data["type"] = "short_answer_question"

        with pytest.raises(ValidationError) as exc_info:
            validate_question(question_data, strict=True)

        assert exc_info.value.path == "options"


class TestValidateAnswer:
    """Tests for validate_answer."""

    def test_validate_when_valid_then_passes(self):
        validate_answer(
            {"questionId": 1, "text": "", "submitted": False, "correct": False},
            strict=True,
        )

    def test_validate_when_missing_question_id_then_raises_error(self):
        with pytest.raises(ValidationError, match="Missing required fields"):
            validate_answer({"text": "4"})

    @pytest.mark.parametrize("key, value", [
        ("questionId", "1"),
        ("text", 4),
        ("submitted", 0),
        ("correct", None),
    ])
    def test_validate_when_field_invalid_then_reports_path(self, key, value):
        data = {"questionId": 1, key: value}

        with pytest.raises(ValidationError) as exc_info:
            validate_answer(data)

        assert exc_info.value.path == key
