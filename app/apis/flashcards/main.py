from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.apis.deps import GenerationClientDep
from app.core.config import settings
from app.modules.generation.errors import GenerationError
from app.modules.generation.models import FlashcardsRequest
from .schemas import FlashcardDeckResponse


router = APIRouter()


@router.post(
    f"/{settings.app.version}/flashcards/decks",
    response_model=FlashcardDeckResponse,
    status_code=status.HTTP_200_OK,
    tags=["flashcards"],
)
async def create_deck(
    req: FlashcardsRequest, client: GenerationClientDep
) -> FlashcardDeckResponse:
    try:
        cards = await client.generate(req)
    except GenerationError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error generating flashcards",
        )
    return FlashcardDeckResponse(topic=req.topic, cards=cards)
