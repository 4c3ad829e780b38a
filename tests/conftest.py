"""Shared pytest fixtures for docdown tests."""

from pathlib import Path

import pytest
from docdown import Options, parse_entries

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_source() -> str:
    """A trimmed-down lodash source with a mix of entry kinds."""
    return (FIXTURES / "lodash_sample.js").read_text(encoding="utf-8")


@pytest.fixture
def sample_entries(sample_source):
    return parse_entries(sample_source)


@pytest.fixture
def entry_named(sample_entries):
    """Look up a parsed sample entry by name."""

    def find(name):
        for entry in sample_entries:
            if entry.name == name:
                return entry
        raise LookupError(name)

    return find


@pytest.fixture
def options():
    return Options(path="lodash.js", url="https://example.com/lodash.js")
