"""Documentation entries parsed from JSDoc comments."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Iterable

from .alias import Alias
from .markdown import format_text
from .models import Param, RawComment, Returns
from .natural import natural_key
from .tags import get_code_line, get_entries, get_multiline_value, get_value, has_tag

log = logging.getLogger(__name__)

# Call-signature sniffing on the code line that follows the comment
_FUNCTION_DECL = re.compile(r"^function\s+([^\s(]+)\s*\(")
_ASSIGNMENT = re.compile(r"^([^(]*?)(?=[:=,]|\breturn\b)")
_CALL_FORM = re.compile(r"^(?:function\s+)?([^\s(]+)\s*\(")
_DECLARATION = re.compile(r"^(?:const|let|var)\s+")
_STARTS_FUNCTION = re.compile(r"^function\b")

_PARAM = re.compile(
    r"^[\t ]*\*[\t ]*@param\s+\{([^}]*)\}\s+(\[.+?\](?=\s|$)|[\w$.]+)[\t ]*"
    r"([\s\S]*?)(?=^[\t ]*\*[\t ]*@[a-z]|\*/)",
    re.MULTILINE,
)
_RETURNS = re.compile(r"^\{([^}]*)\}\s*([\s\S]*)")
# `options` in `options.leading`
_PARENT_PARAM = re.compile(r"[\w$]+(?=\.[\w$.]+)")

_CAPITALIZED_TYPES = {"array", "function", "object", "regexp"}


def _clean_type(value: str) -> str:
    value = value.strip()
    if value.startswith("(") and value.endswith(")"):
        value = value[1:-1]
    return value


def _base_name(name: str) -> str:
    """`[options={}]` -> `options`"""
    if name.startswith("[") and name.endswith("]"):
        name = name[1:-1]
    return name.split("=", 1)[0].strip()


def _reduce_identifier(value: str) -> str:
    """Reduce `exports.foo`, `'foo'` or `var foo` to `foo`."""
    value = value.strip()
    if len(value) > 1 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    value = value.split(".")[-1].strip()
    return _DECLARATION.sub("", value)


def _split_list(value: str) -> list[str]:
    """Split a comma separated tag value and sort it naturally."""
    items = [item for item in re.split(r",\s*", value) if item.strip()]
    return sorted((item.strip() for item in items), key=natural_key)


class EntryIndex:
    """Lookup of entries by resolved name, built once per document.

    The first entry bearing a name wins.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._by_name: dict[str, Entry] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: Entry) -> None:
        name = entry.name
        if name:
            self._by_name.setdefault(name, entry)

    def find(self, name: str) -> Entry | None:
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._by_name)


class Entry:
    """A documentation entry: one doc comment and its trailing code line.

    Every attribute is derived on first access and kept in `_cache`, so
    repeated reads return the same value. Static-ness needs the other entries
    of the document; pass the shared `EntryIndex` to resolve parent members.
    """

    def __init__(
        self,
        raw: RawComment | str,
        source: str,
        lang: str = "js",
        index: EntryIndex | None = None,
    ) -> None:
        if isinstance(raw, str):
            raw = RawComment(raw, max(source.find(raw), 0))
        self.raw = raw
        self.source = source
        self.lang = lang
        self.index = index
        self._cache: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"Entry({self.name!r}, line={self.line_number})"

    def _cached(self, key: str, compute: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    @property
    def text(self) -> str:
        return self.raw.text

    @property
    def code_line(self) -> str:
        return get_code_line(self.raw.text)

    # -- Tag values ---------------------------------------------------------

    @property
    def name(self) -> str:
        return self._cached("name", self._compute_name)

    def _compute_name(self) -> str:
        if has_tag(self.text, "name"):
            return get_value(self.text, "name")
        return self.call.split("(", 1)[0]

    @property
    def call(self) -> str:
        return self._cached("call", self._compute_call)

    def _sniff_identifier(self) -> str:
        code = self.code_line
        match = _FUNCTION_DECL.match(code)
        if match:
            return match.group(1)

        match = _ASSIGNMENT.match(code)
        result = match.group(1).strip() if match else ""
        if not result:
            match = _CALL_FORM.match(code)
            result = match.group(1) if match else ""
            if result == "function":
                result = ""
        return _reduce_identifier(result)

    def _compute_call(self) -> str:
        name = get_value(self.text, "name") if has_tag(self.text, "name") else ""
        name = name or self._sniff_identifier()
        if not self.is_function:
            return name

        args: list[str] = []
        included: set[str] = set()
        for param in self.params:
            # Skip params that are properties of other params (e.g. `options.leading`)
            parent = _PARENT_PARAM.search(_base_name(param.name))
            if parent and parent.group(0) in included:
                continue
            args.append(param.name)
            included.add(_base_name(param.name))

        return f"{name}({', '.join(args)})"

    @property
    def type(self) -> str:
        return self._cached("type", self._compute_type)

    def _compute_type(self) -> str:
        result = get_value(self.text, "type").strip("{}").strip()
        if not result:
            return "Function" if self.is_function else "unknown"
        if result in _CAPITALIZED_TYPES:
            return result.capitalize()
        return result

    @property
    def category(self) -> str:
        return self._cached("category", self._compute_category)

    def _compute_category(self) -> str:
        result = get_value(self.text, "category")
        return result or ("Methods" if self.type == "Function" else "Properties")

    @property
    def description(self) -> str:
        return self._cached("description", self._compute_description)

    def _compute_description(self) -> str:
        result = format_text(get_multiline_value(self.text, "description"))
        type_ = self.type
        if not result or type_ in ("Function", "unknown"):
            return result
        return f"({type_.replace('|', ', ').strip('(){}')}): {result}"

    @property
    def params(self) -> list[Param]:
        return self._cached("params", self._compute_params)

    def _compute_params(self) -> list[Param]:
        result = []
        for match in _PARAM.finditer(self.text):
            type_ = _clean_type(match.group(1))
            name = match.group(2)
            description = re.sub(r"\s*\n[\t ]*\*?[\t ]*", " ", match.group(3)).strip()

            optional = name.startswith("[") and name.endswith("]")
            if type_.endswith("="):
                optional = True
                type_ = type_[:-1]
            if optional and name.startswith("["):
                name = name[1:-1]
            if "=" in name:
                base, default = name.split("=", 1)
                name = f"{base.strip()}={default.strip()}"
            if optional:
                name = f"[{name}]"

            result.append(Param(type_, name, description))
        return result

    @property
    def returns(self) -> Returns | None:
        return self._cached("returns", self._compute_returns)

    def _compute_returns(self) -> Returns | None:
        if not has_tag(self.text, "returns"):
            return None
        value = get_multiline_value(self.text, "returns")
        match = _RETURNS.match(value)
        if match:
            type_, description = _clean_type(match.group(1)), match.group(2)
        else:
            type_, description = "*", value
        return Returns(type_ or "*", re.sub(r"\s*\n\s*", " ", description).strip())

    @property
    def since(self) -> str | None:
        return self._cached("since", lambda: get_value(self.text, "since") or None)

    @property
    def example(self) -> str | None:
        return self._cached("example", self._compute_example)

    def _compute_example(self) -> str | None:
        result = get_multiline_value(self.text, "example")
        return f"```{self.lang}\n{result}\n```" if result else None

    @property
    def members(self) -> list[str]:
        return self._cached("members", lambda: _split_list(get_value(self.text, "member")))

    @property
    def aliases(self) -> list[Alias]:
        return self._cached(
            "aliases",
            lambda: [Alias(name, self) for name in _split_list(get_value(self.text, "alias"))],
        )

    @property
    def line_number(self) -> int:
        return self._cached(
            "line_number", lambda: self.source.count("\n", 0, self.raw.offset) + 1
        )

    @property
    def owner(self) -> Entry:
        return self

    # -- Flags --------------------------------------------------------------

    @property
    def is_alias(self) -> bool:
        return False

    @property
    def is_ctor(self) -> bool:
        return self._cached("is_ctor", lambda: has_tag(self.text, "constructor"))

    @property
    def is_license(self) -> bool:
        return self._cached("is_license", lambda: has_tag(self.text, "license"))

    @property
    def is_function(self) -> bool:
        return self._cached("is_function", self._compute_is_function)

    def _compute_is_function(self) -> bool:
        return bool(
            self.is_ctor
            or self.params
            or self.returns
            or has_tag(self.text, "function")
            or _STARTS_FUNCTION.match(self.code_line)
        )

    @property
    def is_private(self) -> bool:
        return self._cached(
            "is_private",
            lambda: (
                self.is_license
                or has_tag(self.text, "private")
                or not has_tag(self.text, "*")
            ),
        )

    @property
    def is_static(self) -> bool:
        return self._cached("is_static", self._compute_is_static)

    def _compute_is_static(self) -> bool:
        if self.is_private:
            return False
        if has_tag(self.text, "static"):
            return True

        members = self.members
        parent = re.split(r"[#.]", members[0])[-1] if members else ""
        if not parent:
            return True
        owner = self.index.find(parent) if self.index is not None else None
        if owner is None:
            log.debug(f"No entry named {parent!r} for {self.name}, treating as not static")
            return False
        return not owner.is_ctor

    @property
    def is_plugin(self) -> bool:
        return self._cached(
            "is_plugin",
            lambda: not self.is_ctor and not self.is_private and not self.is_static,
        )

    # -- Permalinks ---------------------------------------------------------

    def hash(self, style: str = "default") -> str:
        """Permalink fragment for the entry, without the leading `#`.

        Args:
            style: "github" for GitHub-style heading anchors, anything else
                for the default `member_prototype_name` form.
        """
        return self._cached(f"hash:{style}", lambda: self._compute_hash(style))

    def _compute_hash(self, style: str) -> str:
        member = self.members[0] if self.members else ""
        if style == "github":
            result = member + ("prototype" if self.is_plugin else "") + self.call
            result = re.sub(r"[\\.=|'\"(){}\[\]\t ]", "", result)
            return re.sub(r"[#,]+", "-", result).lower()

        result = (f"{member}_" if member else "") + ("prototype_" if self.is_plugin else "")
        result = (result + self.name).replace(".", "_")
        return re.sub(r"^_+(?=.)", "", result)


def parse_entries(source: str, lang: str = "js") -> list[Entry]:
    """Parse every doc comment in `source` into entries sharing one index."""
    source = source.replace("\r\n", "\n")
    index = EntryIndex()
    entries = [Entry(raw, source, lang, index) for raw in get_entries(source)]
    for entry in entries:
        index.add(entry)
    return entries
