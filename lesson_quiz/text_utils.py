"""Small string helpers shared by the simplifier and the question generator."""
from __future__ import annotations

import random
import re
from typing import TypeVar

T = TypeVar("T")

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
_NON_WORD_CHARS = re.compile(r"[^a-zA-Z0-9\s]")
_NON_ALNUM_LOWER = re.compile(r"[^a-z0-9]")

MIN_WORD_LENGTH = 4


def split_sentences(text: str) -> list[str]:
    """Naive sentence splitter: break on whitespace after ``.``, ``!`` or ``?``."""
    flat = text.replace("\r\n", " ").replace("\n", " ")
    return [s.strip() for s in _SENTENCE_BOUNDARY.split(flat) if s.strip()]


def extract_words(text: str) -> list[str]:
    """Lowercased alphanumeric tokens longer than three characters, in source order."""
    cleaned = _NON_WORD_CHARS.sub(" ", text)
    return [w.lower() for w in cleaned.split() if len(w) >= MIN_WORD_LENGTH]


def collapse_whitespace(s: str) -> str:
    return re.sub(r"\s+", " ", s)


def truncate(s: str, n: int) -> str:
    if not s:
        return ""
    return s[: n - 1].strip() + "..." if len(s) > n else s


def escape_html(s: str) -> str:
    if not s:
        return ""
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def normalize(s: str) -> str:
    return _NON_ALNUM_LOWER.sub("", s.lower())


def capitalize_first(s: str) -> str:
    if not s:
        return ""
    return s[0].upper() + s[1:]


def shuffle(items: list[T], rng: random.Random) -> list[T]:
    """Fisher-Yates shuffle of a copy of *items*."""
    a = list(items)
    for i in range(len(a) - 1, 0, -1):
        j = rng.randint(0, i)
        a[i], a[j] = a[j], a[i]
    return a
