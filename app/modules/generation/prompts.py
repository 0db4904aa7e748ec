"""System instructions and instruction builders for each content kind.

User text (exam name, weaknesses, topic) is embedded as-is; no escaping is
applied.
"""

from __future__ import annotations

from app.modules.generation.models import Difficulty

STUDY_PLAN_SYSTEM_PROMPT = (
    "You are an expert academic tutor. Create realistic, actionable study plans."
)

FLASHCARDS_SYSTEM_PROMPT = (
    "You are a helpful study assistant. Create high-quality flashcards."
)

QUIZ_SYSTEM_PROMPT = "You are a test-prep expert. Ensure distractors are plausible."

# Plans are previewed a week at a time regardless of how far off the exam is.
PLAN_PREVIEW_DAYS = 7


def build_study_plan_instruction(
    exam_name: str, days_until_exam: int, weaknesses: str
) -> str:
    return (
        f"Create a study plan for the {exam_name} exam which is in {int(days_until_exam)} days.\n"
        f"My weak areas are: {weaknesses}.\n"
        f"Create a day-by-day plan (up to {PLAN_PREVIEW_DAYS} days for this preview) "
        "that balances review and practice."
    )


def build_flashcards_instruction(topic: str, count: int) -> str:
    return (
        f'Generate {int(count)} flashcards for the topic: "{topic}". '
        "Keep definitions concise."
    )


def build_quiz_instruction(topic: str, difficulty: Difficulty, count: int) -> str:
    level = Difficulty(difficulty).value
    return (
        f'Generate a {int(count)}-question multiple choice quiz on "{topic}" '
        f"at {level} level."
    )
