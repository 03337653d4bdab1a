import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from quiz_toolkit.core.models import Question, QuestionType  # noqa: E402


MC = QuestionType.MULTIPLE_CHOICE
SA = QuestionType.SHORT_ANSWER


# Common test fixtures
@pytest.fixture
def simple_questions() -> list[Question]:
    """Mixed collection with both types and both published states."""
    return [
        Question(1, "Addition", SA, body="What is 2+2?", expected="4",
                 points=1, published=True),
        Question(2, "Letters", SA, body="What is the last letter of the English alphabet?",
                 expected="Z", points=1, published=False),
        Question(5, "Colors", MC, body="Which of these is a color?", expected="red",
                 options=("red", "apple", "firetruck"), points=1, published=True),
        Question(9, "Shapes", MC, body="What shape can you make with one line?",
                 expected="circle", options=("square", "triangle", "circle"),
                 points=2, published=False),
    ]


@pytest.fixture
def blank_questions() -> list[Question]:
    """Collection where some questions have no content at all."""
    return [
        Question(1, "Question 1", MC, points=1),
        Question(47, "My New Question", MC, points=1),
        Question(2, "Question 2", SA, points=1),
    ]


@pytest.fixture
def trivia_questions() -> list[Question]:
    """Multiple-choice only collection."""
    return [
        Question(1, "Mascot", MC, body="What is the name of the UD Mascot?",
                 expected="YoUDee", options=("Bluey", "YoUDee", "Charles the Horse"),
                 points=7, published=False),
        Question(2, "Motto", MC, body="What is the University of Delaware's motto?",
                 expected="Knowledge is the light of the mind",
                 options=("Knowledge is the light of the mind", "Just U Do it",
                          "Nothing, what's the motto with you?"),
                 points=3, published=False),
        Question(3, "Goats", MC, body="How many goats are there usually on the Green?",
                 expected="Zero", options=("Zero", "One", "Two"),
                 points=10, published=False),
    ]
