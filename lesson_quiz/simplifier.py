"""Reduce raw lesson text to a short HTML summary."""
from __future__ import annotations

from lesson_quiz.text_utils import escape_html, split_sentences

MAX_HEADING_LENGTH = 80  # exclusive
MAX_HEADING_TOKENS = 8
MAX_SENTENCES = 6

NO_CONTENT_HTML = "<p>No content provided.</p>"
CLOSING_HTML = (
    "<p><strong>Summary:</strong> This is a simplified version to help learning. "
    "Try the practice questions below!</p>"
)


def make_heading(text: str) -> str | None:
    """Use the first line as a heading when it looks like a title."""
    first_line = text.split("\n")[0].strip()
    if (
        first_line
        and len(first_line) < MAX_HEADING_LENGTH
        and len(first_line.split(" ")) <= MAX_HEADING_TOKENS
    ):
        return first_line
    return None


def select_sentences(sentences: list[str], limit: int = MAX_SENTENCES) -> list[str]:
    """Pick the first sentence plus the longest of the rest.

    Longer sentences are treated as more informative. ``sorted`` is stable,
    so equal-length sentences keep their source order.
    """
    if not sentences:
        return []
    first, rest = sentences[0], sentences[1:]
    longest = sorted(rest, key=len, reverse=True)
    return [first, *longest[: limit - 1]]


def simplify_text(content: str) -> str:
    sentences = split_sentences(content)
    if not sentences:
        return NO_CONTENT_HTML

    heading = make_heading(content)

    parts: list[str] = []
    if heading:
        parts.append(f"<h3>{escape_html(heading)}</h3>")
    for s in select_sentences(sentences):
        parts.append(f"<p>{escape_html(s)}</p>")
    parts.append(CLOSING_HTML)
    return "".join(parts)
