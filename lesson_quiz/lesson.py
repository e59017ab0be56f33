"""Turn one submitted lesson into a simplified summary plus practice questions."""
from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from lesson_quiz.config import Settings
from lesson_quiz.models import Question, SubmissionRecord
from lesson_quiz.question_generator import generate_questions
from lesson_quiz.simplifier import simplify_text

MISSING_CONTENT_MESSAGE = 'Please provide content in the "content" field.'

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class InvalidLessonError(ValueError):
    """Lesson content is missing, not text, or blank."""


@dataclass
class LessonResult:
    simplified: str
    questions: list[Question] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "simplified": self.simplified,
            "questions": [q.to_dict() for q in self.questions],
        }


def validate_content(content: object) -> str:
    if not isinstance(content, str) or not content.strip():
        raise InvalidLessonError(MISSING_CONTENT_MESSAGE)
    return content


def parse_question_count(raw: object, default: int = 5, maximum: int = 20) -> int:
    """Lenient question-count parsing, clamped to ``[1, maximum]``.

    Empty or falsy values (including ``0``) fall back to *default*. Numbers
    are truncated toward zero and strings contribute their leading integer,
    so ``"7 please"`` reads as 7 and ``"lots"`` as the default.
    """
    count = default
    if not raw or isinstance(raw, bool):
        pass
    elif isinstance(raw, int):
        count = raw
    elif isinstance(raw, float):
        if math.isfinite(raw):
            count = int(raw)
    elif isinstance(raw, str):
        m = _LEADING_INT.match(raw)
        if m:
            count = int(m.group(1))
    return max(1, min(maximum, count))


def process_lesson(
    content: object,
    num_questions: object = None,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> LessonResult:
    """Validate *content*, then simplify it and generate questions from it.

    Raises ``InvalidLessonError`` before any generation work when the
    content is unusable.
    """
    s = settings or Settings()
    text = validate_content(content)
    count = parse_question_count(num_questions, s.default_num_questions, s.max_questions)
    simplified = simplify_text(text)
    questions = generate_questions(text, count, rng)
    return LessonResult(simplified=simplified, questions=questions)


def build_record(
    content: str,
    result: LessonResult,
    limit: int = 5000,
    now: datetime | None = None,
) -> SubmissionRecord:
    now = now or datetime.now(timezone.utc)
    return SubmissionRecord(
        id=int(now.timestamp() * 1000),
        created_at=now.isoformat(),
        content=content[:limit],
        simplified=result.simplified,
        questions=list(result.questions),
    )
