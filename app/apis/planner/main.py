from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.apis.deps import GenerationClientDep
from app.core.config import settings
from app.modules.generation.errors import GenerationError
from app.modules.generation.models import StudyPlanRequest
from .schemas import StudyPlanResponse

router = APIRouter()


@router.post(
    f"/{settings.app.version}/planner/plans",
    response_model=StudyPlanResponse,
    status_code=status.HTTP_200_OK,
    tags=["planner"],
)
async def create_study_plan(
    req: StudyPlanRequest, client: GenerationClientDep
) -> StudyPlanResponse:
    try:
        plan = await client.generate(req)
    except GenerationError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to generate plan. Please try again.",
        )
    return StudyPlanResponse(plan=plan)
