"""Markdown escaping and text formatting helpers."""

from __future__ import annotations

import re
from typing import Callable

_CODE_SPAN = re.compile(r"`.*?`")
_PLACEHOLDER = re.compile(r"\x00(\d+)\x00")

_ENTITIES = {
    "*": "&#42;",
    "[": "&#91;",
    "]": "&#93;",
}
# A backslash-escaped character is left alone
_SPECIAL = re.compile(r"(\\?)([*\[\]])")
_ENTITY = re.compile("|".join(re.escape(e) for e in _ENTITIES.values()))
_CHARS = {entity: char for char, entity in _ENTITIES.items()}


def _outside_code(text: str, transform: Callable[[str], str]) -> str:
    """Apply `transform` to `text` with inline code spans held back."""
    snippets: list[str] = []

    def stash(match: re.Match) -> str:
        snippets.append(match.group(0))
        return f"\x00{len(snippets) - 1}\x00"

    text = transform(_CODE_SPAN.sub(stash, text))
    return _PLACEHOLDER.sub(lambda m: snippets[int(m.group(1))], text)


def escape(text: str | None) -> str:
    """Escape `*`, `[` and `]` outside of inline code spans."""

    def replace(match: re.Match) -> str:
        if match.group(1):
            return match.group(0)
        return _ENTITIES[match.group(2)]

    return _outside_code(text or "", lambda s: _SPECIAL.sub(replace, s))


def unescape(text: str | None) -> str:
    """Reverse `escape` outside of inline code spans."""
    return _outside_code(text or "", lambda s: _ENTITY.sub(lambda m: _CHARS[m.group(0)], s))


def _format(text: str) -> str:
    # Line breaks
    text = re.sub(r":\n(?=[\t ]*\S)", ":<br>\n", text)
    text = re.sub(r"\n( *)[-*](?=[\t ]+\S)", r"\n<br>\n\1*", text)
    text = re.sub(r"^[\t ]*\n", "<br>\n<br>\n", text, flags=re.MULTILINE)
    # Whitespace
    text = re.sub(r"\n +", " ", text)
    # Italicize parentheses
    text = re.sub(r"(^|\s)(\(.+\))", r"\1*\2*", text)
    # Mark numbers as inline code
    return re.sub(r"[\t ](-?\d+(?:.\d+)?)(?!\.[^\n])", r" `\1`", text)


def format_text(text: str | None) -> str:
    """Format a comment description for Markdown output."""
    return _outside_code(text or "", _format).strip()


def anchor_id(group: str) -> str:
    """Anchor id for a TOC group heading."""
    return group.lower()
