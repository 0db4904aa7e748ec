"""Structured study-content generation (plans, flashcards, quizzes)."""

from .client import GenerationClient
from .errors import (
    GenerationError,
    ProviderError,
    ResponseParseError,
    ShapeMismatchError,
)
from .models import (
    ContentKind,
    Difficulty,
    Flashcard,
    FlashcardsRequest,
    QuizQuestion,
    QuizRequest,
    QuizResult,
    StudyPlan,
    StudyPlanDay,
    StudyPlanRequest,
)
from .schemas import parse_response, response_type_for, schema_for

__all__ = [
    "GenerationClient",
    "GenerationError",
    "ProviderError",
    "ResponseParseError",
    "ShapeMismatchError",
    "Difficulty",
    "Flashcard",
    "FlashcardsRequest",
    "QuizQuestion",
    "QuizRequest",
    "QuizResult",
    "StudyPlan",
    "StudyPlanDay",
    "StudyPlanRequest",
    "ContentKind",
    "parse_response",
    "response_type_for",
    "schema_for",
]
