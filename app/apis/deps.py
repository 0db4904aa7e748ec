from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from app.modules.generation.client import GenerationClient


def get_generation_client(request: Request) -> GenerationClient:
    """Resolve the generation client built at startup (see ``main.lifespan``).

    The client is stored on ``app.state`` so tests can install a stubbed one
    without touching provider credentials.
    """
    client = getattr(request.app.state, "generation_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Generation provider is not configured",
        )
    return client


GenerationClientDep = Annotated[GenerationClient, Depends(get_generation_client)]
