"""Generation client: one provider call per request, typed results out.

Empty provider output is a soft failure and yields the kind's empty value
(``None`` for a plan, ``[]`` for decks and quizzes). Transport errors,
malformed JSON and shape mismatches all surface as ``GenerationError``.
Nothing is retried or cached.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from app.core.config import Settings
from app.core.logging import get_logger
from app.modules.generation import prompts
from app.modules.generation.errors import GenerationError, ProviderError
from app.modules.generation.models import (
    ContentKind,
    Difficulty,
    Flashcard,
    FlashcardsRequest,
    GenerationRequest,
    QuizQuestion,
    QuizRequest,
    StudyPlan,
    StudyPlanRequest,
)
from app.modules.generation.providers import StructuredProvider, build_provider
from app.modules.generation.schemas import parse_response, response_type_for

logger = get_logger(__name__)

GenerationResult = Union[Optional[StudyPlan], list[Flashcard], list[QuizQuestion]]


class GenerationClient:
    """Turns generation requests into structured provider calls."""

    def __init__(self, provider: StructuredProvider, *, model: str) -> None:
        self._provider = provider
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationClient":
        return cls(build_provider(settings), model=settings.model_name)

    async def generate_study_plan(
        self, exam_name: str, days_until_exam: int, weaknesses: str
    ) -> Optional[StudyPlan]:
        req = StudyPlanRequest(
            exam_name=exam_name, days_until_exam=days_until_exam, weaknesses=weaknesses
        )
        return await self.generate(req)

    async def generate_flashcards(self, topic: str, count: int = 5) -> list[Flashcard]:
        req = FlashcardsRequest(topic=topic, count=count)
        return await self.generate(req)

    async def generate_quiz(
        self,
        topic: str,
        difficulty: Union[Difficulty, str] = Difficulty.INTERMEDIATE,
        count: int = 5,
    ) -> list[QuizQuestion]:
        req = QuizRequest(topic=topic, difficulty=difficulty, count=count)
        return await self.generate(req)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Dispatch a tagged request to the matching content kind."""
        if isinstance(request, StudyPlanRequest):
            return await self._call(
                ContentKind.STUDY_PLAN,
                prompts.build_study_plan_instruction(
                    request.exam_name, request.days_until_exam, request.weaknesses
                ),
                prompts.STUDY_PLAN_SYSTEM_PROMPT,
                empty=None,
            )

        if isinstance(request, FlashcardsRequest):
            return await self._call(
                ContentKind.FLASHCARDS,
                prompts.build_flashcards_instruction(request.topic, request.count),
                prompts.FLASHCARDS_SYSTEM_PROMPT,
                empty=[],
            )

        if isinstance(request, QuizRequest):
            return await self._call(
                ContentKind.QUIZ,
                prompts.build_quiz_instruction(
                    request.topic, request.difficulty, request.count
                ),
                prompts.QUIZ_SYSTEM_PROMPT,
                empty=[],
            )

        raise TypeError(f"Unsupported generation request: {type(request).__name__}")

    async def _call(
        self, kind: ContentKind, prompt: str, system_instruction: str, *, empty: Any
    ) -> Any:
        """Call the provider once and parse its reply into the kind's response type.

        Returns ``empty`` when the provider produced no text.
        """
        extra = {"content_kind": kind.value}
        logger.info("Generating with %s", self.model, extra=extra)
        try:
            text = await self._provider.generate(
                model=self.model,
                prompt=prompt,
                system_instruction=system_instruction,
                schema=response_type_for(kind),
            )
        except GenerationError:
            logger.exception("Provider call failed", extra=extra)
            raise
        except Exception as e:
            logger.exception("Provider call failed", extra=extra)
            raise ProviderError(f"Provider call failed: {e!s}") from e

        if not text:
            logger.warning("Empty response", extra=extra)
            return empty

        try:
            return parse_response(kind, text)
        except GenerationError as e:
            logger.error("Unusable response: %s", e, extra=extra)
            raise
