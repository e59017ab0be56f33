"""Tests for the lesson simplifier."""
from __future__ import annotations

from lesson_quiz.simplifier import (
    CLOSING_HTML,
    NO_CONTENT_HTML,
    make_heading,
    select_sentences,
    simplify_text,
)


class TestMakeHeading:
    def test_short_first_line(self):
        assert make_heading("The Water Cycle\nBody text.") == "The Water Cycle"

    def test_first_line_stripped(self):
        assert make_heading("  Photosynthesis  \nBody.") == "Photosynthesis"

    def test_too_many_tokens(self):
        assert make_heading("one two three four five six seven eight nine\nBody.") is None

    def test_eight_tokens_allowed(self):
        assert make_heading("one two three four five six seven eight\nBody.") is not None

    def test_too_long(self):
        assert make_heading("x" * 80 + "\nBody.") is None
        assert make_heading("x" * 79 + "\nBody.") == "x" * 79

    def test_blank_first_line(self):
        assert make_heading("\nBody text.") is None


class TestSelectSentences:
    def test_first_then_longest(self):
        sentences = ["First one.", "Short.", "A much longer sentence here.", "Mid size one."]
        assert select_sentences(sentences) == [
            "First one.",
            "A much longer sentence here.",
            "Mid size one.",
            "Short.",
        ]

    def test_ties_keep_source_order(self):
        sentences = ["Intro.", "Aaaa.", "Bbbb.", "Cccc."]
        assert select_sentences(sentences) == sentences

    def test_capped_at_six(self):
        sentences = [f"Sentence number {i}." for i in range(10)]
        chosen = select_sentences(sentences)
        assert len(chosen) == 6
        assert chosen[0] == "Sentence number 0."

    def test_first_kept_even_if_shortest(self):
        sentences = ["Hi.", "This one is much longer.", "So is this one here."]
        assert select_sentences(sentences)[0] == "Hi."

    def test_empty(self):
        assert select_sentences([]) == []


class TestSimplifyText:
    def test_water_cycle_heading(self, short_lesson):
        html = simplify_text(short_lesson)
        assert html.startswith("<h3>The Water Cycle</h3>")
        assert html.endswith(CLOSING_HTML)

    def test_contains_paragraph(self, water_cycle_lesson):
        html = simplify_text(water_cycle_lesson)
        assert "<p>" in html
        # 6 chosen sentences + closing note
        assert html.count("<p>") == 7

    def test_blank_content(self):
        assert simplify_text("   \n ") == NO_CONTENT_HTML

    def test_no_heading_for_long_first_line(self):
        text = "This first line has far too many words to be a heading for the lesson. More text."
        html = simplify_text(text)
        assert "<h3>" not in html
        assert html.startswith("<p>")

    def test_html_escaped(self):
        text = 'Intro line for escaping tests that is long enough\n<b>Tom & "Jerry"</b> are friends.'
        html = simplify_text(text)
        assert "&lt;b&gt;Tom &amp; &quot;Jerry&quot;&lt;/b&gt; are friends." in html
        assert "<b>" not in html

    def test_heading_escaped(self):
        html = simplify_text("Fish & Chips\nA classic dish.")
        assert html.startswith("<h3>Fish &amp; Chips</h3>")

    def test_no_punctuation_single_paragraph(self):
        text = "a lesson with no sentence punctuation but plenty of words in it ok"
        html = simplify_text(text)
        assert html.count("<p>") == 2

    def test_deterministic(self, water_cycle_lesson):
        assert simplify_text(water_cycle_lesson) == simplify_text(water_cycle_lesson)

    def test_input_not_modified(self, short_lesson):
        before = str(short_lesson)
        simplify_text(short_lesson)
        assert short_lesson == before
