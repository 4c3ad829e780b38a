"""Data models for documentation entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class DocdownError(Exception):
    """Base exception for docdown operations."""


class ConfigurationError(DocdownError):
    """Raised when a required option (path or url) is missing."""


@dataclass(frozen=True)
class RawComment:
    """A `/** ... */` comment plus the code line that follows it."""

    text: str
    offset: int  # Start of the comment in the source text


@dataclass(frozen=True)
class Param:
    """A `@param` tag."""

    type: str
    name: str  # "name", "[name]", "[name=default]"
    description: str


@dataclass(frozen=True)
class Returns:
    """A `@returns` tag."""

    type: str
    description: str


@dataclass
class Options:
    """Options for generating a document."""

    path: str | None = None  # Source file, used for the default title
    url: str | None = None  # "View in source" base link
    title: str | None = None
    lang: str = "js"  # Fence language for examples
    sort: bool = True
    toc: str = "properties"  # "categories" | anything else groups by member
    style: str = "default"  # Hash style: "default" | "github"


class DocumentedMember(Protocol):
    """Read-only surface shared by entries and their aliases."""

    @property
    def text(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def owner(self) -> DocumentedMember:
        """The entry that carries the documentation; itself unless an alias."""
        ...

    @property
    def type(self) -> str: ...

    @property
    def call(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def params(self) -> list[Param]: ...

    @property
    def returns(self) -> Returns | None: ...

    @property
    def since(self) -> str | None: ...

    @property
    def example(self) -> str | None: ...

    @property
    def members(self) -> list[str]: ...

    @property
    def aliases(self) -> list[DocumentedMember]: ...

    @property
    def line_number(self) -> int: ...

    @property
    def is_alias(self) -> bool: ...

    @property
    def is_ctor(self) -> bool: ...

    @property
    def is_function(self) -> bool: ...

    @property
    def is_license(self) -> bool: ...

    @property
    def is_plugin(self) -> bool: ...

    @property
    def is_private(self) -> bool: ...

    @property
    def is_static(self) -> bool: ...

    def hash(self, style: str = "default") -> str: ...
