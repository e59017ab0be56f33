"""Command line interface for lesson-quiz.

Usage:
  python -m lesson_quiz serve [--host HOST] [--port PORT]
  python -m lesson_quiz generate FILE [--count N] [--seed S]
"""
from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

from lesson_quiz.config import load_settings
from lesson_quiz.lesson import InvalidLessonError, process_lesson


def _read_lesson(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _generate(args: argparse.Namespace) -> int:
    """Print the simplified lesson and questions as JSON.

    Runs the same pipeline as ``POST /api/generate`` but never writes to the
    submission log.
    """
    try:
        content = _read_lesson(args.file)
    except OSError as exc:
        sys.stderr.write(f"error: cannot read {args.file}: {exc}\n")
        return 1

    settings = load_settings()
    count = args.count if args.count is not None else settings.default_num_questions
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        result = process_lesson(content, count, rng=rng, settings=settings)
    except InvalidLessonError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    sys.stdout.write(json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n")
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    print(f"Starting Lesson Quiz on http://{args.host}:{args.port}")
    uvicorn.run("lesson_quiz.app:app", host=args.host, port=args.port, reload=False)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lesson-quiz",
        description="Simplify lesson text and generate practice questions.",
    )
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the web application.")
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host interface to bind (default: 127.0.0.1).",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=3000,
        help="Port to bind (default: 3000).",
    )

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate questions from a lesson file and print them as JSON.",
    )
    gen_parser.add_argument("file", help="Lesson text file, or - for stdin.")
    gen_parser.add_argument(
        "--count",
        type=int,
        help="Number of questions, clamped to 1..max_questions (default from settings).",
    )
    gen_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible distractors and true/false choices.",
    )

    args = parser.parse_args(argv)

    if args.command == "serve":
        return _serve(args)
    if args.command == "generate":
        return _generate(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
