"""Provider boundary: one structured-output call to a hosted model.

A provider takes a model name, the rendered instruction, a fixed system
instruction and the pydantic response type, and returns the raw response text
(or ``None`` when the model produced nothing). SDK clients are imported
lazily so the package imports without provider credentials or extras.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from pydantic import TypeAdapter

from app.core.config import Settings
from app.core.logging import get_logger
from app.modules.generation.errors import ProviderError

logger = get_logger(__name__)


class StructuredProvider(Protocol):
    async def generate(
        self,
        *,
        model: str,
        prompt: str,
        system_instruction: str,
        schema: Any,
    ) -> Optional[str]: ...


class GeminiProvider:
    """Google Gemini via the google-genai SDK, JSON mode with a response schema."""

    def __init__(self, api_key: str, *, client: Any = None) -> None:
        if client is None:
            from google import genai

            client = genai.Client(api_key=api_key)
        self._client = client

    async def generate(
        self,
        *,
        model: str,
        prompt: str,
        system_instruction: str,
        schema: Any,
    ) -> Optional[str]:
        from google.genai import types

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json",
            response_schema=schema,
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=model,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            raise ProviderError(f"Gemini request failed: {e!s}") from e
        return response.text


class OpenRouterProvider:
    """OpenRouter through its OpenAI-compatible chat completions API."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://openrouter.ai/api/v1",
        client: Any = None,
    ) -> None:
        if client is None:
            from openai import AsyncOpenAI

            client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self._client = client

    async def generate(
        self,
        *,
        model: str,
        prompt: str,
        system_instruction: str,
        schema: Any,
    ) -> Optional[str]:
        # Root arrays are not accepted in strict mode, so the schema is a hint
        response_format = {
            "type": "json_schema",
            "json_schema": {
                "name": "study_content",
                "schema": TypeAdapter(schema).json_schema(),
                "strict": False,
            },
        }
        try:
            completion = await self._client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": prompt},
                ],
                response_format=response_format,
            )
        except Exception as e:
            raise ProviderError(f"OpenRouter request failed: {e!s}") from e
        if not completion.choices:
            return None
        return completion.choices[0].message.content


def build_provider(settings: Settings) -> StructuredProvider:
    """Build the provider selected by MODEL_PROVIDER, injecting its API key."""
    provider = (settings.model_provider or "google").lower()
    if provider == "openrouter":
        if not settings.openrouter_api_key:
            raise RuntimeError(
                "OpenRouter API key not configured. Set OPENROUTER_API_KEY in your environment."
            )
        logger.info("Using OpenRouter provider (%s)", settings.openrouter_model)
        return OpenRouterProvider(
            settings.openrouter_api_key, base_url=settings.openrouter_base_url
        )
    if provider != "google":
        raise RuntimeError(
            f"Unknown MODEL_PROVIDER '{settings.model_provider}'. Use 'google' or 'openrouter'."
        )
    if not settings.gemini_api_key:
        raise RuntimeError(
            "Gemini API key not configured. Set GEMINI_API_KEY in your environment."
        )
    logger.info("Using Gemini provider (%s)", settings.gemini_model)
    return GeminiProvider(settings.gemini_api_key)
