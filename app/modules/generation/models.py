"""Pydantic models for generated study content and generation requests.

The response models double as the provider's output schema, so constraints
here are kept to what Gemini's response schema understands (required fields,
integer bounds, array lengths). Wire names are camelCase (``examName``,
``correctAnswerIndex``) to match the JSON the provider is asked to emit;
attributes are snake_case. Four options per question, unique ids and
ascending days are conventions the provider is asked for but that are not
enforced.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ContentKind(str, Enum):
    STUDY_PLAN = "study_plan"
    FLASHCARDS = "flashcards"
    QUIZ = "quiz"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Difficulty(str, Enum):
    EASY = "Easy"
    INTERMEDIATE = "Intermediate"
    HARD = "Hard"


class StudyPlanDay(CamelModel):
    day: int = Field(..., ge=1)
    topic: str
    focus: str
    activities: list[str]


class StudyPlan(CamelModel):
    exam_name: str
    target_date: str
    schedule: list[StudyPlanDay] = Field(..., min_length=1)


class Flashcard(CamelModel):
    id: str
    front: str = Field(..., description="The term or question")
    back: str = Field(..., description="The definition or answer")
    category: str


class QuizQuestion(CamelModel):
    """A single multiple-choice question."""

    id: str
    question: str
    options: list[str] = Field(..., description="Array of 4 possible answers")
    correct_answer_index: int = Field(
        ..., ge=0, le=3, description="Index of the correct option (0-3)"
    )
    explanation: str = Field(
        ..., description="Short explanation of why the answer is correct"
    )

    @model_validator(mode="after")
    def _answer_is_an_option(self) -> "QuizQuestion":
        if self.correct_answer_index >= len(self.options):
            raise ValueError(
                f"correctAnswerIndex {self.correct_answer_index} is out of range "
                f"for {len(self.options)} options"
            )
        return self


class QuizResult(CamelModel):
    total_questions: int
    correct_answers: int
    topic: str
    date: str  # ISO-8601 date


class StudyPlanRequest(CamelModel):
    kind: Literal[ContentKind.STUDY_PLAN] = ContentKind.STUDY_PLAN
    exam_name: str = Field(..., min_length=1, description="Exam to prepare for")
    days_until_exam: int = Field(..., ge=1)
    weaknesses: str = Field(..., min_length=1, description="Free-text weak areas")


class FlashcardsRequest(CamelModel):
    kind: Literal[ContentKind.FLASHCARDS] = ContentKind.FLASHCARDS
    topic: str = Field(..., min_length=1)
    count: int = Field(default=5, ge=1)


class QuizRequest(CamelModel):
    kind: Literal[ContentKind.QUIZ] = ContentKind.QUIZ
    topic: str = Field(..., min_length=1)
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    count: int = Field(default=5, ge=1)


GenerationRequest = Annotated[
    Union[StudyPlanRequest, FlashcardsRequest, QuizRequest],
    Field(discriminator="kind"),
]
