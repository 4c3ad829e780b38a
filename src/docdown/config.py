"""Environment-backed defaults for the CLI and web app."""

from __future__ import annotations

import os

from .models import Options


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


class Config:
    URL = os.environ.get("DOCDOWN_URL")
    LANG = os.environ.get("DOCDOWN_LANG", "js")
    TOC = os.environ.get("DOCDOWN_TOC", "properties")
    STYLE = os.environ.get("DOCDOWN_STYLE", "default")
    SORT = _env_bool("DOCDOWN_SORT", True)
    SOURCE_ROOT = os.environ.get("DOCDOWN_SOURCE_ROOT", ".")
    LOG_LEVEL = os.environ.get("DOCDOWN_LOG_LEVEL", "INFO")

    @classmethod
    def options(cls, **overrides) -> Options:
        """Build `Options` from the defaults, skipping `None` overrides."""
        values = {
            "url": cls.URL,
            "lang": cls.LANG,
            "toc": cls.TOC,
            "style": cls.STYLE,
            "sort": cls.SORT,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Options(**values)
