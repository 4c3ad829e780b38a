"""Aliases: secondary names for a documented entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import Param, Returns

if TYPE_CHECKING:
    from .entry import Entry


@dataclass(frozen=True, eq=False)
class Alias:
    """An `@alias` name that reports everything else from its owner entry."""

    name: str
    owner: Entry

    def __repr__(self) -> str:
        return f"Alias({self.name!r}, owner={self.owner.name!r})"

    @property
    def text(self) -> str:
        return self.owner.text

    @property
    def is_alias(self) -> bool:
        return True

    @property
    def aliases(self) -> list[Alias]:
        return []

    @property
    def type(self) -> str:
        return self.owner.type

    @property
    def call(self) -> str:
        return self.owner.call

    @property
    def category(self) -> str:
        return self.owner.category

    @property
    def description(self) -> str:
        return self.owner.description

    @property
    def params(self) -> list[Param]:
        return self.owner.params

    @property
    def returns(self) -> Returns | None:
        return self.owner.returns

    @property
    def since(self) -> str | None:
        return self.owner.since

    @property
    def example(self) -> str | None:
        return self.owner.example

    @property
    def members(self) -> list[str]:
        return self.owner.members

    @property
    def line_number(self) -> int:
        return self.owner.line_number

    @property
    def is_ctor(self) -> bool:
        return self.owner.is_ctor

    @property
    def is_function(self) -> bool:
        return self.owner.is_function

    @property
    def is_license(self) -> bool:
        return self.owner.is_license

    @property
    def is_plugin(self) -> bool:
        return self.owner.is_plugin

    @property
    def is_private(self) -> bool:
        return self.owner.is_private

    @property
    def is_static(self) -> bool:
        return self.owner.is_static

    def hash(self, style: str = "default") -> str:
        return self.owner.hash(style)
