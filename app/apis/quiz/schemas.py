from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.modules.generation.models import CamelModel, Difficulty, QuizQuestion


class QuizResponse(BaseModel):
    topic: str
    difficulty: Difficulty
    questions: list[QuizQuestion] = Field(default_factory=list)


class ScoreQuizRequest(CamelModel):
    topic: str = Field(..., min_length=1)
    questions: list[QuizQuestion]
    answers: list[Optional[int]] = Field(
        ..., description="Selected option index per question; null if skipped"
    )
