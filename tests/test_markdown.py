"""Tests for Markdown escaping and formatting."""

from docdown.markdown import anchor_id, escape, format_text, unescape


class TestEscape:
    def test_special_characters(self):
        assert escape("a * b [c]") == "a &#42; b &#91;c&#93;"

    def test_code_spans_untouched(self):
        assert escape("use `a*b[0]` here *") == "use `a*b[0]` here &#42;"

    def test_backslash_escaped_characters_kept(self):
        assert escape(r"literal \* star") == r"literal \* star"

    def test_none(self):
        assert escape(None) == ""

    def test_round_trip_keeps_code_spans(self):
        text = "Wraps `[value]` in *stars* and `fn(*args)` [links]."
        escaped = escape(text)
        assert "`[value]`" in escaped
        assert "`fn(*args)`" in escaped
        assert unescape(escaped) == text

    def test_unescape_leaves_code_spans(self):
        assert unescape("`&#42;` &#42;") == "`&#42;` *"


class TestFormatText:
    def test_italicizes_parentheses(self):
        assert format_text("Creates a value (optional).") == "Creates a value *(optional)*."

    def test_marks_numbers_as_code(self):
        assert format_text("Splits into 2 parts") == "Splits into `2` parts"

    def test_protects_code_spans(self):
        assert format_text("Call `fn(1)` now") == "Call `fn(1)` now"

    def test_line_breaks_after_colon(self):
        assert format_text("Options:\nleading edge") == "Options:<br>\nleading edge"

    def test_blank_lines(self):
        assert format_text("First.\n\nSecond.") == "First.\n<br>\n<br>\nSecond."

    def test_empty(self):
        assert format_text("") == ""


def test_anchor_id():
    assert anchor_id("Array") == "array"
    assert anchor_id("_.prototype") == "_.prototype"
