from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import Optional
from app.core.config import Settings, settings
from app.core.logging import get_logger, setup_logging
from app.apis.planner.main import router as planner_router
from app.apis.flashcards.main import router as flashcards_router
from app.apis.quiz.main import router as quiz_router
from app.modules.generation.client import GenerationClient

import uvicorn
from fastapi.middleware.cors import CORSMiddleware

logger = get_logger(__name__)


def create_app(
    client: Optional[GenerationClient] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    cfg = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.generation_client is None:
            app.state.generation_client = GenerationClient.from_settings(cfg)
            logger.info("Generation client ready (model=%s)", cfg.model_name)
        yield

    app = FastAPI(title=cfg.app.name, version=cfg.app.version, lifespan=lifespan)
    app.state.generation_client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(planner_router)
    app.include_router(flashcards_router)
    app.include_router(quiz_router)

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "app": cfg.app.name,
            "version": cfg.app.version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    setup_logging()
    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.app.port,
            reload=not settings.app.is_production,
        )
    except Exception as e:
        print(f"An error occurred when starting the server: {e}.")
