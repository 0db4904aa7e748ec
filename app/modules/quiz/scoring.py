"""Score a finished quiz against the generated answer key."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from app.modules.generation.models import QuizQuestion, QuizResult


def score_quiz(
    topic: str,
    questions: Sequence[QuizQuestion],
    answers: Sequence[Optional[int]],
    *,
    today: Optional[date] = None,
) -> QuizResult:
    """Count answers matching ``correct_answer_index``.

    ``answers[i]`` is the option index picked for ``questions[i]``; ``None``
    means the question was skipped and counts as wrong.
    """
    if len(answers) != len(questions):
        raise ValueError(
            f"Expected {len(questions)} answers, got {len(answers)}"
        )
    correct = sum(
        1
        for q, picked in zip(questions, answers)
        if picked is not None and picked == q.correct_answer_index
    )
    return QuizResult(
        total_questions=len(questions),
        correct_answers=correct,
        topic=topic,
        date=(today or date.today()).isoformat(),
    )
