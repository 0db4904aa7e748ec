"""HTTP routes with a stubbed generation client."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.modules.generation.client import GenerationClient
from main import create_app

from conftest import FakeProvider, make_cards, make_plan, make_questions


@pytest.fixture
def http(client) -> TestClient:
    return TestClient(create_app(client=client))


def test_root(http):
    body = http.get("/").json()
    assert body["status"] == "ok"
    assert body["version"] == "v1"


class TestPlanner:
    def test_plan_generated(self, http, provider):
        payload = make_plan(7)
        provider.respond_with(payload)

        res = http.post(
            "/v1/planner/plans",
            json={"examName": "SAT", "daysUntilExam": 7, "weaknesses": "geometry"},
        )

        assert res.status_code == 200
        assert res.json() == {"plan": payload}

    def test_empty_plan_is_null(self, http, provider):
        provider.text = ""
        res = http.post(
            "/v1/planner/plans",
            json={"examName": "SAT", "daysUntilExam": 7, "weaknesses": "geometry"},
        )
        assert res.status_code == 200
        assert res.json() == {"plan": None}

    def test_failure_is_generic_notice(self, http, provider):
        provider.error = RuntimeError("boom")
        res = http.post(
            "/v1/planner/plans",
            json={"examName": "SAT", "daysUntilExam": 7, "weaknesses": "geometry"},
        )
        assert res.status_code == 502
        assert res.json()["detail"] == "Failed to generate plan. Please try again."

    def test_invalid_days(self, http, provider):
        res = http.post(
            "/v1/planner/plans",
            json={"examName": "SAT", "daysUntilExam": 0, "weaknesses": "geometry"},
        )
        assert res.status_code == 422
        assert provider.calls == []


class TestFlashcards:
    def test_deck_generated_with_default_count(self, http, provider):
        provider.respond_with(make_cards(5))

        res = http.post("/v1/flashcards/decks", json={"topic": "Photosynthesis"})

        assert res.status_code == 200
        body = res.json()
        assert body["topic"] == "Photosynthesis"
        assert [c["id"] for c in body["cards"]] == [f"card-{i}" for i in range(1, 6)]
        assert "Generate 5 flashcards" in provider.calls[0]["prompt"]

    def test_empty_deck(self, http, provider):
        res = http.post("/v1/flashcards/decks", json={"topic": "Photosynthesis", "count": 3})
        assert res.status_code == 200
        assert res.json()["cards"] == []

    def test_malformed_json(self, http, provider):
        provider.text = "[{"
        res = http.post("/v1/flashcards/decks", json={"topic": "Photosynthesis"})
        assert res.status_code == 502
        assert res.json()["detail"] == "Error generating flashcards"

    def test_blank_topic(self, http):
        res = http.post("/v1/flashcards/decks", json={"topic": ""})
        assert res.status_code == 422


class TestQuiz:
    def test_quiz_generated(self, http, provider):
        provider.respond_with(make_questions(3))

        res = http.post(
            "/v1/quiz/questions",
            json={"topic": "Algebra", "difficulty": "Hard", "count": 3},
        )

        assert res.status_code == 200
        body = res.json()
        assert body["difficulty"] == "Hard"
        assert len(body["questions"]) == 3
        assert body["questions"][0]["correctAnswerIndex"] == 1

    def test_difficulty_defaults_to_intermediate(self, http, provider):
        provider.respond_with([])
        res = http.post("/v1/quiz/questions", json={"topic": "Algebra"})
        assert res.json()["difficulty"] == "Intermediate"
        assert "at Intermediate level" in provider.calls[0]["prompt"]

    def test_unknown_difficulty(self, http):
        res = http.post("/v1/quiz/questions", json={"topic": "Algebra", "difficulty": "Expert"})
        assert res.status_code == 422

    def test_shape_mismatch(self, http, provider):
        questions = make_questions(1)
        del questions[0]["explanation"]
        provider.respond_with(questions)
        res = http.post("/v1/quiz/questions", json={"topic": "Algebra"})
        assert res.status_code == 502
        assert res.json()["detail"] == "Error generating quiz"

    def test_score(self, http):
        res = http.post(
            "/v1/quiz/score",
            json={"topic": "Algebra", "questions": make_questions(3), "answers": [1, 0, None]},
        )
        assert res.status_code == 200
        body = res.json()
        assert body["totalQuestions"] == 3
        assert body["correctAnswers"] == 1
        assert body["topic"] == "Algebra"

    def test_score_answer_count_mismatch(self, http):
        res = http.post(
            "/v1/quiz/score",
            json={"topic": "Algebra", "questions": make_questions(2), "answers": [1]},
        )
        assert res.status_code == 400


def test_client_built_from_settings_on_startup(monkeypatch):
    import main as main_mod

    fake = FakeProvider()
    fake.respond_with(make_cards(1))
    monkeypatch.setattr(
        main_mod.GenerationClient,
        "from_settings",
        classmethod(lambda cls, s: GenerationClient(fake, model="startup-model")),
    )

    with TestClient(create_app()) as http:
        res = http.post("/v1/flashcards/decks", json={"topic": "Cells", "count": 1})

    assert res.status_code == 200
    assert fake.calls[0]["model"] == "startup-model"


def test_unconfigured_client_is_503():
    res = TestClient(create_app()).post("/v1/flashcards/decks", json={"topic": "Cells"})
    assert res.status_code == 503
