"""Markdown generation from documentation entries."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from .entry import parse_entries
from .markdown import anchor_id, escape
from .models import ConfigurationError, DocumentedMember, Options
from .natural import member_path_key, natural_key

log = logging.getLogger(__name__)

# Categories that always trail the domain-specific ones, in this order
TRAILING_CATEGORIES = ("Methods", "Properties")

# `var x = null;` style placeholders are grouped under their member
_NULLABLE = re.compile(r"[=:]\s*(?:null|undefined)\s*[,;]?$", re.IGNORECASE)


def _separator(entry: DocumentedMember) -> str:
    return ".prototype." if entry.is_plugin else "."


def _member(entry: DocumentedMember) -> str:
    return entry.members[0] if entry.members else ""


def _qualified_name(entry: DocumentedMember) -> str:
    """`member.name`, `member.prototype.name`, or just `name`."""
    member = _member(entry)
    return (member + _separator(entry) if member else "") + entry.name


def _member_group(entry: DocumentedMember) -> str:
    member = _member(entry)
    separator = _separator(entry)
    if (
        not member
        or entry.is_ctor
        or (entry.type == "Object" and not _NULLABLE.search(entry.text))
    ):
        return _qualified_name(entry)
    if entry.is_static:
        return member
    return member + separator[:-1]


def _group_entries(
    entries: list[DocumentedMember], by_categories: bool
) -> dict[str, list[DocumentedMember]]:
    """Bucket entries into TOC groups, keeping first-seen group order."""
    groups: dict[str, list[DocumentedMember]] = {}

    for entry in entries:
        if by_categories:
            groups.setdefault(entry.category, []).append(entry)
            continue

        # An entry named after an existing group is filed into that group
        member = _member(entry)
        candidate = member and member + _separator(entry) + entry.name
        if candidate and candidate in groups:
            groups[candidate].append(entry)
        else:
            groups.setdefault(_member_group(entry), []).append(entry)

    return groups


def _sort_groups(groups: list[str], by_categories: bool, sort: bool) -> list[str]:
    if not by_categories:
        return sorted(groups, key=member_path_key) if sort else list(groups)

    trailing = [name for name in TRAILING_CATEGORIES if name in groups]
    rest = [name for name in groups if name not in TRAILING_CATEGORIES]
    if sort:
        rest.sort(key=natural_key)
    return rest + trailing


def _entry_title(entry: DocumentedMember, by_categories: bool) -> str:
    if by_categories:
        return _qualified_name(entry)
    return entry.name if entry.is_alias else entry.call


def render_entry(entry: DocumentedMember, options: Options) -> str:
    """Render the Markdown block for a single entry."""
    member = _member(entry)
    prefix = member + _separator(entry) if member else ""
    anchor = entry.hash(options.style)
    href = f"{options.url}#L{entry.line_number}"

    lines = [
        "<!-- div -->",
        "",
        f"### <a id=\"{anchor}\"></a>`{prefix}{entry.call}`",
        f'<a href="#{anchor}">#</a> '
        f'[&#x24C8;]({href} "View in source") '
        "[&#x24C9;][1]",
        "",
    ]

    if entry.description:
        lines.append(entry.description)
        lines.append("")

    if entry.params:
        lines.append("#### Arguments")
        for num, param in enumerate(entry.params, 1):
            lines.append(
                f"{num}. `{param.name}` *({escape(param.type)})*: {escape(param.description)}"
            )
        lines.append("")

    if entry.returns:
        lines.append("#### Returns")
        lines.append(
            f"*({escape(entry.returns.type)})*: {escape(entry.returns.description)}"
        )
        lines.append("")

    if entry.since:
        lines.append("#### Since")
        lines.append(escape(entry.since))
        lines.append("")

    if entry.aliases:
        lines.append("#### Aliases")
        lines.append(", ".join(f"*{escape(prefix + alias.name)}*" for alias in entry.aliases))
        lines.append("")

    if entry.example:
        lines.append("#### Example")
        lines.append(entry.example)
        lines.append("")

    lines.extend(["* * *", "", "<!-- /div -->", ""])
    return "\n".join(lines)


def _render_toc_line(entry: DocumentedMember, style: str) -> str:
    if entry.is_alias:
        return (
            f'* <a href="#{entry.owner.hash(style)}" class="alias">'
            f"{escape(_qualified_name(entry))} -> {entry.owner.name}</a>"
        )
    return f'* <a href="#{entry.hash(style)}">{escape(_qualified_name(entry))}</a>'


def _default_title(options: Options) -> str:
    return f"{os.path.basename(options.path or '')} API documentation"


def generate(source: str, options: Options) -> str:
    """Generate the Markdown API reference for `source`.

    Args:
        source: Source text to mine for doc comments.
        options: Generation options. `path` and `url` are required.

    Returns:
        The Markdown document.

    Raises:
        ConfigurationError: If `path` or `url` is missing.
    """
    if not options.path or not options.url:
        raise ConfigurationError("Path and/or URL must be specified")

    by_categories = options.toc == "categories"

    # Aliases follow their owner
    api: list[DocumentedMember] = []
    for entry in parse_entries(source, options.lang):
        api.append(entry)
        api.extend(entry.aliases)

    documented = []
    for entry in api:
        if entry.is_private or not entry.name:
            log.debug(f"Skipping entry at line {entry.line_number}")
            continue
        documented.append(entry)

    groups = _group_entries(documented, by_categories)
    group_names = _sort_groups(list(groups), by_categories, options.sort)

    for name in group_names:
        if options.sort:
            groups[name].sort(key=lambda e: natural_key(_entry_title(e, by_categories)))

    log.info(f"Documented {len(documented)} of {len(api)} entries in {len(group_names)} groups")

    out = [f"# {options.title or _default_title(options)}", ""]

    # Table of contents
    for name in group_names:
        out.extend(["<!-- div -->", "", f'## <a id="{anchor_id(name)}"></a>`{name}`'])
        out.extend(_render_toc_line(entry, options.style) for entry in groups[name])
        out.extend(["", "<!-- /div -->", ""])

    # Entry sections, aliases only appear in the TOC
    for name in group_names:
        out.extend(["<!-- div -->", "", f"## `{name}`", ""])
        for entry in groups[name]:
            if not entry.is_alias:
                out.append(render_entry(entry, options))
        out.extend(["<!-- /div -->", ""])

    if group_names:
        out.append(f' [1]: #{anchor_id(group_names[0])} "Jump back to the TOC."')
        out.append("")

    return "\n".join(out)


def docdown(options: Options) -> str:
    """Read `options.path` and generate its Markdown API reference."""
    if not options.path or not options.url:
        raise ConfigurationError("Path and/or URL must be specified")
    source = Path(options.path).read_text(encoding="utf-8")
    log.info(f"Generating docs for {options.path}")
    return generate(source, options)
