"""docdown - Markdown API documentation from JSDoc comments."""

from docdown.alias import Alias
from docdown.entry import Entry, EntryIndex, parse_entries
from docdown.generator import docdown, generate
from docdown.models import (
    ConfigurationError,
    DocdownError,
    DocumentedMember,
    Options,
    Param,
    RawComment,
    Returns,
)
from docdown.natural import compare_member_paths, compare_natural

__all__ = [
    "Alias",
    "ConfigurationError",
    "DocdownError",
    "DocumentedMember",
    "Entry",
    "EntryIndex",
    "Options",
    "Param",
    "RawComment",
    "Returns",
    "compare_member_paths",
    "compare_natural",
    "docdown",
    "generate",
    "parse_entries",
]
