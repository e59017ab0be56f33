from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class Question:
    question: str
    hint: str
    answer: str

    question_type: ClassVar[str] = ""

    def to_dict(self) -> dict:
        return {
            "type": self.question_type,
            "question": self.question,
            "hint": self.hint,
            "answer": self.answer,
        }


@dataclass
class MultipleChoiceQuestion(Question):
    options: list[str] = field(default_factory=list)
    correct_index: int = -1
    correct_word: str = ""  # not serialized

    question_type: ClassVar[str] = "mcq"

    def to_dict(self) -> dict:
        return {
            "type": self.question_type,
            "question": self.question,
            "options": list(self.options),
            "correct": self.correct_index,
            "hint": self.hint,
            "answer": self.answer,
        }


@dataclass
class TrueFalseQuestion(Question):
    correct: bool = True

    question_type: ClassVar[str] = "true_false"

    def to_dict(self) -> dict:
        return {
            "type": self.question_type,
            "question": self.question,
            "correct": self.correct,
            "hint": self.hint,
            "answer": self.answer,
        }


@dataclass
class ShortAnswerQuestion(Question):
    target_word: str = ""  # not serialized

    question_type: ClassVar[str] = "short_answer"


@dataclass
class SubmissionRecord:
    id: int  # milliseconds since epoch
    created_at: str  # ISO-8601, UTC
    content: str
    simplified: str
    questions: list[Question] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "created_at": self.created_at,
            "content": self.content,
            "simplified": self.simplified,
            "questions": [q.to_dict() for q in self.questions],
        }
