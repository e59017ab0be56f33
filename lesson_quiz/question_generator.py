"""Heuristic practice-question generation from raw lesson text.

Rotates between multiple-choice, true/false and short-answer questions and
uses word frequency to pick answer targets. No language understanding is
involved: sentences come from punctuation, keywords from counting.
"""
from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Iterable

from lesson_quiz.models import (
    MultipleChoiceQuestion,
    Question,
    ShortAnswerQuestion,
    TrueFalseQuestion,
)
from lesson_quiz.text_utils import (
    capitalize_first,
    collapse_whitespace,
    extract_words,
    normalize,
    shuffle,
    split_sentences,
    truncate,
)

_log = logging.getLogger("lesson_quiz.qgen")

STOP_WORDS = frozenset({
    "about", "which", "between", "their", "there", "where", "when", "have",
    "with", "that", "this", "what", "from", "your", "they", "these", "those",
    "would", "could", "should", "while", "other", "every", "again", "through",
})

QUESTION_TYPES = ("mcq", "true_false", "short_answer")

# Crude verb detection for negating a statement
AUXILIARY_VERBS = frozenset({
    "is", "are", "was", "were", "has", "have", "do", "does",
    "can", "will", "may", "should", "could",
})

NUM_DISTRACTORS = 3
TRUTH_THRESHOLD = 0.3  # rng.random() above this keeps the statement true
FALLBACK_ANSWER = "answer"

MCQ_BASE_LENGTH = 80
STATEMENT_LENGTH = 120
SHORT_ANSWER_BASE_LENGTH = 70


def count_keywords(words: Iterable[str], stop_words: frozenset[str] = STOP_WORDS) -> Counter:
    return Counter(w for w in words if w not in stop_words)


def rank_candidates(freq: Counter) -> list[str]:
    """Distinct keywords by descending frequency.

    Counter keeps first-insertion order and ``sorted`` is stable, so ties
    fall back to the order of first appearance in the text.
    """
    return sorted(freq, key=lambda w: freq[w], reverse=True)


def _pick_target(candidates: list[str], words: list[str], index: int) -> str:
    if candidates:
        return candidates[index % len(candidates)]
    if words:
        return words[index % len(words)]
    return FALLBACK_ANSWER


def pick_distractors(
    correct: str,
    words: list[str],
    candidates: list[str],
    rng: random.Random,
    count: int = NUM_DISTRACTORS,
) -> list[str]:
    """Choose *count* wrong options for *correct*.

    Other keywords are preferred, then random words from the lesson, then
    synthesized variants of the correct word (``correct + "a"`` etc.) once
    the lesson runs out of words.
    """
    pool = [w for w in dict.fromkeys(words) if w != correct]
    candidate_set = set(candidates)

    picks = [w for w in pool if w in candidate_set][:count]

    remaining = [w for w in pool if w not in picks]
    need = count - len(picks)
    if need > 0 and remaining:
        picks.extend(rng.sample(remaining, min(need, len(remaining))))

    suffix = 0
    while len(picks) < count:
        variant = correct + chr(97 + suffix)
        suffix += 1
        if variant not in picks:
            picks.append(variant)
    return picks[:count]


def negate_sentence(sentence: str) -> str:
    """Insert "not" after the first auxiliary verb, or prefix a negation."""
    tokens = sentence.split(" ")
    for i, token in enumerate(tokens):
        bare = "".join(c for c in token.lower() if "a" <= c <= "z")
        if bare in AUXILIARY_VERBS:
            return " ".join(tokens[: i + 1] + ["not"] + tokens[i + 1 :])
    return "It is not true that " + sentence


def _make_mcq(
    base: str,
    index: int,
    words: list[str],
    candidates: list[str],
    rng: random.Random,
) -> MultipleChoiceQuestion:
    correct = _pick_target(candidates, words, index)
    distractors = pick_distractors(correct, words, candidates, rng)
    options = [capitalize_first(o) for o in shuffle([correct, *distractors], rng)]
    target = normalize(correct)
    correct_index = next(
        (j for j, o in enumerate(options) if normalize(o) == target), -1
    )
    return MultipleChoiceQuestion(
        question=(
            "In the lesson above, which of the following best answers: "
            f'"{truncate(base, MCQ_BASE_LENGTH)}"?'
        ),
        options=options,
        correct_index=correct_index,
        correct_word=correct,
        hint=f'Look around the part where "{correct}" is mentioned in the lesson.',
        answer=f"{capitalize_first(correct)} — (extracted from the lesson content).",
    )


def _make_true_false(base: str, rng: random.Random) -> TrueFalseQuestion:
    truth = rng.random() > TRUTH_THRESHOLD
    statement = truncate(collapse_whitespace(base), STATEMENT_LENGTH)
    return TrueFalseQuestion(
        question=statement if truth else negate_sentence(statement),
        correct=truth,
        hint="Try to remember what the lesson said about this part.",
        answer=(
            "True — this matches the lesson."
            if truth
            else "False — this was changed slightly from the lesson."
        ),
    )


def _make_short_answer(
    base: str,
    index: int,
    words: list[str],
    candidates: list[str],
) -> ShortAnswerQuestion:
    word = _pick_target(candidates, words, index + 1)
    return ShortAnswerQuestion(
        question=f'Briefly explain or name: "{truncate(base, SHORT_ANSWER_BASE_LENGTH)}"',
        target_word=word,
        hint=f'A short answer referring to "{word}" would help.',
        answer=f"One good short answer: {capitalize_first(word)} (from the lesson).",
    )


def generate_questions(
    content: str,
    num_questions: int = 5,
    rng: random.Random | None = None,
    *,
    stop_words: frozenset[str] = STOP_WORDS,
    question_types: tuple[str, ...] = QUESTION_TYPES,
) -> list[Question]:
    """Build *num_questions* questions from *content*.

    The caller clamps *num_questions*; pass a seeded *rng* for reproducible
    distractors, option order and true/false choices.
    """
    rng = rng or random.Random()
    sentences = split_sentences(content)
    words = extract_words(content)
    candidates = rank_candidates(count_keywords(words, stop_words))

    _log.debug(
        "Generating %d questions from %d sentences, %d words, %d keywords",
        num_questions, len(sentences), len(words), len(candidates),
    )

    questions: list[Question] = []
    for i in range(num_questions):
        qtype = question_types[i % len(question_types)]
        base = sentences[i % len(sentences)] if sentences else content

        if qtype == "mcq":
            questions.append(_make_mcq(base, i, words, candidates, rng))
        elif qtype == "true_false":
            questions.append(_make_true_false(base, rng))
        elif qtype == "short_answer":
            questions.append(_make_short_answer(base, i, words, candidates))
        else:
            raise ValueError(f"Unknown question type: {qtype}")

    return questions
