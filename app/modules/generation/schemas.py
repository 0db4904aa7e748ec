"""Response schema per content kind.

The pydantic response type for a kind is both the schema handed to the
provider and the contract its reply is parsed against, so the two sides
cannot drift apart.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from app.modules.generation.errors import ResponseParseError, ShapeMismatchError
from app.modules.generation.models import ContentKind, Flashcard, QuizQuestion, StudyPlan

RESPONSE_TYPES: dict[ContentKind, Any] = {
    ContentKind.STUDY_PLAN: StudyPlan,
    ContentKind.FLASHCARDS: list[Flashcard],
    ContentKind.QUIZ: list[QuizQuestion],
}

_ADAPTERS: dict[ContentKind, TypeAdapter] = {
    kind: TypeAdapter(tp) for kind, tp in RESPONSE_TYPES.items()
}


def response_type_for(kind: ContentKind | str) -> Any:
    """The pydantic type the provider's JSON must conform to."""
    return RESPONSE_TYPES[ContentKind(kind)]


def schema_for(kind: ContentKind | str) -> TypeAdapter:
    """Look up the response adapter for a content kind.

    Raises ValueError for an unknown kind name.
    """
    return _ADAPTERS[ContentKind(kind)]


def parse_response(kind: ContentKind | str, text: str) -> Any:
    """Decode provider text into the kind's response type.

    Strict mode: no string-to-int coercion, no booleans as integers. Invalid
    JSON raises ``ResponseParseError``; anything that decodes but does not
    fit raises ``ShapeMismatchError`` naming the first offending path.
    """
    try:
        return schema_for(kind).validate_json(text, strict=True)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        if any(err["type"] == "json_invalid" for err in errors):
            raise ResponseParseError(f"Response is not valid JSON: {errors[0]['msg']}") from e
        first = errors[0]
        raise ShapeMismatchError(error_path(first["loc"]), first["msg"]) from e


def error_path(loc: tuple) -> str:
    """Render a pydantic error location as a JSON path, e.g. ``$.schedule[1].day``."""
    path = "$"
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path
