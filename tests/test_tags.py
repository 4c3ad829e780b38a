"""Tests for tag extraction from raw comments."""

from docdown.tags import (
    clean_value,
    get_code_line,
    get_entries,
    get_multiline_value,
    get_value,
    has_tag,
)

COMMENT = """/**
 * Creates a thing.
 *
 * More about the thing.
 *
 * @static
 * @memberOf util
 * @since 1.2.0
 * @param {string} name The name.
 * @returns {Thing} Returns the thing.
 * @example
 *
 * create('a');
 *   // => Thing
 */
function create(name) {"""


class TestHasTag:
    def test_present(self):
        assert has_tag(COMMENT, "static")
        assert has_tag(COMMENT, "param")

    def test_absent(self):
        assert not has_tag(COMMENT, "private")

    def test_word_boundary(self):
        assert not has_tag(COMMENT, "stat")
        assert has_tag(COMMENT, "member")  # `member` also matches `memberOf`

    def test_wildcard(self):
        assert has_tag(COMMENT, "*")
        assert not has_tag("/** No tags here. */\nvar a;", "*")


class TestGetValue:
    def test_inline_value(self):
        assert get_value(COMMENT, "since") == "1.2.0"

    def test_member_matches_member_of(self):
        assert get_value(COMMENT, "member") == "util"

    def test_first_line_only(self):
        assert get_value(COMMENT, "param") == "{string} name The name."

    def test_missing(self):
        assert get_value(COMMENT, "category") == ""


class TestGetMultilineValue:
    def test_description(self):
        assert get_multiline_value(COMMENT, "description") == (
            "Creates a thing.\n\nMore about the thing."
        )

    def test_stops_before_next_tag(self):
        assert get_multiline_value(COMMENT, "returns") == "{Thing} Returns the thing."

    def test_example_keeps_indentation(self):
        assert get_multiline_value(COMMENT, "example") == "create('a');\n  // => Thing"

    def test_tag_only_comment_has_no_description(self):
        text = "/**\n * @private\n */\nvar a;"
        assert get_multiline_value(text, "description") == ""

    def test_single_line_comment(self):
        text = "/** Just a description. */\nvar a;"
        assert get_multiline_value(text, "description") == "Just a description."


class TestGetEntries:
    def test_source_order_and_offsets(self):
        source = "var x;\n/**\n * A.\n * @type {number}\n */\nvar a = 1;\n\n/** B. */\n\nvar b;\n"
        entries = get_entries(source)
        assert [e.text.splitlines()[-1] for e in entries] == ["var a = 1;", "var b;"]
        assert [e.offset for e in entries] == [7, source.index("/** B.")]

    def test_skips_negated_comments(self):
        source = "/**! banner */\nvar a;\n/**- skip */\nvar b;\n/** keep */\nvar c;"
        entries = get_entries(source)
        assert len(entries) == 1
        assert get_code_line(entries[0].text) == "var c;"

    def test_plain_block_comments_ignored(self):
        assert get_entries("/* nope */\nvar a;") == []

    def test_empty_source(self):
        assert get_entries("") == []


def test_clean_value_strips_gutters():
    assert clean_value(" first\n * second\n ") == "first second"
    assert clean_value(None) == ""
