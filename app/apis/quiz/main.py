from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.apis.deps import GenerationClientDep
from app.apis.quiz.schemas import QuizResponse, ScoreQuizRequest
from app.core.config import settings
from app.modules.generation.errors import GenerationError
from app.modules.generation.models import QuizRequest, QuizResult
from app.modules.quiz.scoring import score_quiz


router = APIRouter()


@router.post(
    f"/{settings.app.version}/quiz/questions",
    response_model=QuizResponse,
    tags=["quiz"],
)
async def create_quiz(req: QuizRequest, client: GenerationClientDep) -> QuizResponse:
    try:
        questions = await client.generate(req)
    except GenerationError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error generating quiz",
        )
    return QuizResponse(topic=req.topic, difficulty=req.difficulty, questions=questions)


@router.post(
    f"/{settings.app.version}/quiz/score",
    response_model=QuizResult,
    tags=["quiz"],
)
async def score(req: ScoreQuizRequest) -> QuizResult:
    try:
        return score_quiz(req.topic, req.questions, req.answers)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
