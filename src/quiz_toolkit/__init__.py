"""Top-level package for the Quiz Toolkit.

Provides subpackages:
- quiz_toolkit.core – Question/Answer models, validation, serialization
- quiz_toolkit.collection – filtering, aggregation and editing of collections
- quiz_toolkit.output – CSV export
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from .config import QuestionDefaults
from .core import Answer, Question, QuestionType, ValidationError
from .collection import *  # noqa: F401,F403
from .collection import __all__ as _collection_all
from .output import to_csv


def _get_version() -> str:
    """Installed distribution version, or 0.0.0 when running from a checkout."""
    try:
        return _pkg_version("quiz-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    "QuestionDefaults",
    "Answer",
    "Question",
    "QuestionType",
    "ValidationError",
    "to_csv",
    *_collection_all,
]
