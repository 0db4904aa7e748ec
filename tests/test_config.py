"""Settings loading from the environment."""

from __future__ import annotations

from app.core.config import AppSettings, Settings


def test_defaults(monkeypatch):
    for name in ("APP_NAME", "API_VERSION", "MODE", "MODEL_PROVIDER", "GEMINI_MODEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.app.name == "study-aid"
    assert s.app.version == "v1"
    assert s.app.is_production is True
    assert s.model_provider == "google"
    assert s.model_name == "gemini-3-flash-preview"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MODE", "dev")
    monkeypatch.setenv("MODEL_PROVIDER", "openrouter")
    monkeypatch.setenv("OPENROUTER_MODEL", "x-ai/grok-code-fast-1")
    s = Settings(_env_file=None)
    assert AppSettings(_env_file=None).is_production is False
    assert s.model_name == "x-ai/grok-code-fast-1"
