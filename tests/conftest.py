"""Shared pytest fixtures: a scripted provider and clients built on it."""

from __future__ import annotations

import json
from typing import Any, Optional

import pytest

from app.modules.generation.client import GenerationClient


class FakeProvider:
    """Returns a canned response (or raises) and records every call."""

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def respond_with(self, payload: Any) -> None:
        self.text = json.dumps(payload)
        self.error = None

    async def generate(self, *, model, prompt, system_instruction, schema):
        self.calls.append(
            {
                "model": model,
                "prompt": prompt,
                "system_instruction": system_instruction,
                "schema": schema,
            }
        )
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def client(provider: FakeProvider) -> GenerationClient:
    return GenerationClient(provider, model="test-model")


def make_plan(days: int = 7, exam: str = "SAT") -> dict[str, Any]:
    return {
        "examName": exam,
        "targetDate": "2026-11-01",
        "schedule": [
            {
                "day": i,
                "topic": f"Topic {i}",
                "focus": "Review and practice",
                "activities": [f"Practice set {i}", "Timed drill"],
            }
            for i in range(1, days + 1)
        ],
    }


def make_cards(n: int = 5) -> list[dict[str, Any]]:
    return [
        {
            "id": f"card-{i}",
            "front": f"Term {i}",
            "back": f"Definition {i}",
            "category": "Biology",
        }
        for i in range(1, n + 1)
    ]


def make_questions(n: int = 3) -> list[dict[str, Any]]:
    return [
        {
            "id": f"q{i}",
            "question": f"What is {i} + {i}?",
            "options": [str(i), str(2 * i), str(3 * i), str(4 * i)],
            "correctAnswerIndex": 1,
            "explanation": f"{i} + {i} = {2 * i}",
        }
        for i in range(1, n + 1)
    ]
