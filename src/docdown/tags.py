"""Tag extraction from raw JSDoc comment entries."""

from __future__ import annotations

import re

from .models import RawComment

# `/**` not followed by `-` or `!`, through the first non-blank line after `*/`
_ENTRY = re.compile(r"/\*\*(?![-!])[\s\S]*?\*/\s*.+")

# Comment gutters: inline values drop all gutter whitespace, block values keep
# indentation past the first space so example code survives.
_GUTTER = re.compile(r"(?:^|\n)[\t ]*\*[\t ]*")
_BLOCK_GUTTER = re.compile(r"(?:^|\n)[\t ]*\*(?!/)[\t ]?")

# Block values end before the next `* @tag` line or the comment close
_BLOCK_END = r"(?=\*\s+@[a-z]|\*/)"


def _tag_pattern(tag: str) -> str:
    if tag == "*":
        return r"\w+"
    if tag == "member":
        return r"member(?:Of)?"
    return re.escape(tag)


def clean_value(text: str | None, replacer: str = " ") -> str:
    """Strip comment gutters from `text` and trim the result.

    With a newline `replacer` line breaks and indentation are kept.
    """
    if not text:
        return ""
    gutter = _BLOCK_GUTTER if replacer == "\n" else _GUTTER
    return gutter.sub(replacer, text).strip()


def has_tag(text: str, tag: str) -> bool:
    """Check for a `* @tag` line. A tag of `*` matches any tag."""
    pattern = rf"^[\t ]*\*[\t ]*@{_tag_pattern(tag)}\b"
    return re.search(pattern, text, re.MULTILINE) is not None


def get_value(text: str, tag: str) -> str:
    """Get the inline value of the first `@tag` line."""
    pattern = rf"^[\t ]*\*[\t ]*@{_tag_pattern(tag)}\b[\t ]*(.*)"
    match = re.search(pattern, text, re.MULTILINE)
    return clean_value(match.group(1)) if match else ""


def get_multiline_value(text: str, tag: str) -> str:
    """Get the block value of `@tag`, up to the next tag or the comment end.

    The synthetic tag `description` selects the comment body that follows the
    opening `/**`.
    """
    if tag == "description":
        prelude = r"^[\t ]*/\*\*(?![\t ]*@)"
    else:
        prelude = rf"^[\t ]*\*[\t ]*@{_tag_pattern(tag)}\b"
    match = re.search(prelude + r"([\s\S]*?)" + _BLOCK_END, text, re.MULTILINE)
    return clean_value(match.group(1), "\n") if match else ""


def get_entries(source: str) -> list[RawComment]:
    """Extract doc comment entries, each with its trailing code line."""
    return [RawComment(m.group(0), m.start()) for m in _ENTRY.finditer(source or "")]


def get_code_line(text: str) -> str:
    """Get the code line that follows the comment in an entry."""
    return text.rpartition("*/")[2].strip()
