from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from app.modules.generation.models import StudyPlan


class StudyPlanResponse(BaseModel):
    # None when the provider returned nothing; the view shows "try again"
    plan: Optional[StudyPlan] = None
