from __future__ import annotations

from pydantic import BaseModel, Field

from app.modules.generation.models import Flashcard


class FlashcardDeckResponse(BaseModel):
    topic: str
    cards: list[Flashcard] = Field(default_factory=list)
