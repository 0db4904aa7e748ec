from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from app.core.config import settings
from app.core.logging import setup_logging
from app.modules.generation.client import GenerationClient
from app.modules.generation.errors import GenerationError
from app.modules.generation.models import Difficulty

FAILURE_NOTICES = {
    "plan": "Failed to generate plan. Please try again.",
    "flashcards": "Error generating flashcards",
    "quiz": "Error generating quiz",
}


def _load_text(value: str | None, file_value: str | None, name: str) -> str:
    if value and file_value:
        raise SystemExit(f"Provide either --{name} or --{name}-file, not both")
    if file_value:
        return Path(file_value).read_text(encoding="utf-8")
    if value:
        return value
    raise SystemExit(f"--{name} or --{name}-file is required")


def _jsonable(result):
    if result is None:
        return None
    if isinstance(result, list):
        return [item.model_dump(by_alias=True) for item in result]
    return result.model_dump(by_alias=True)


async def _run(args: argparse.Namespace, client: GenerationClient):
    if args.cmd == "plan":
        weaknesses = _load_text(args.weaknesses, args.weaknesses_file, "weaknesses")
        return await client.generate_study_plan(args.exam, args.days, weaknesses)
    if args.cmd == "flashcards":
        return await client.generate_flashcards(args.topic, args.count)
    return await client.generate_quiz(args.topic, args.difficulty, args.count)


def main(argv: list[str] | None = None, client: GenerationClient | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="studyaid", description="Study plan, flashcard and quiz generator CLI"
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("plan", help="Generate a day-by-day study plan")
    p.add_argument("--exam", "-e", required=True, help="Exam name, e.g. SAT")
    p.add_argument("--days", "-d", type=int, default=7, help="Days until the exam")
    p.add_argument("--weaknesses", "-w", help="Weak areas (text)")
    p.add_argument("--weaknesses-file", help="Path to a file describing weak areas")

    f = sub.add_parser("flashcards", help="Generate a flashcard deck")
    f.add_argument("--topic", "-t", required=True)
    f.add_argument("--count", "-n", type=int, default=5)

    q = sub.add_parser("quiz", help="Generate a multiple-choice quiz")
    q.add_argument("--topic", "-t", required=True)
    q.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.INTERMEDIATE.value,
    )
    q.add_argument("--count", "-n", type=int, default=5)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if client is None:
        try:
            client = GenerationClient.from_settings(settings)
        except RuntimeError as e:
            print(str(e), file=sys.stderr)
            return 2

    try:
        result = asyncio.run(_run(args, client))
    except ValidationError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return 2
    except GenerationError:
        print(FAILURE_NOTICES[args.cmd], file=sys.stderr)
        return 1

    print(json.dumps(_jsonable(result), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
