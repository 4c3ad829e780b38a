"""HTTP endpoint that renders documentation for a file on request."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from flask import Flask, Response, current_app, jsonify, request

from .config import Config
from .generator import docdown
from .models import ConfigurationError

log = logging.getLogger(__name__)


def clean_filename(name: str | None) -> str:
    """Strip directory traversal from a requested file name.

    `../../lib/util` -> `libutil.js`
    """
    name = re.sub(r"(\.*[/\\])+", "", name or "docdown")
    if not re.search(r"\.[a-z]+$", name):
        name += ".js"
    return name


def create_app(source_root: str | Path | None = None) -> Flask:
    app = Flask(__name__)
    app.config["SOURCE_ROOT"] = Path(source_root or Config.SOURCE_ROOT).resolve()

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.get("/docs")
    def docs():
        filename = clean_filename(request.args.get("f"))
        path = current_app.config["SOURCE_ROOT"] / filename

        options = Config.options(
            path=str(path),
            url=request.args.get("url"),
            title=request.args.get("title"),
            toc=request.args.get("toc"),
            style=request.args.get("style"),
        )

        try:
            markdown = docdown(options)
        except FileNotFoundError:
            log.warning(f"Requested file not found: {filename}")
            return jsonify({"error": "not found"}), 404
        except ConfigurationError as e:
            return jsonify({"error": str(e)}), 400

        return Response(markdown + "\n", content_type="text/plain; charset=utf-8")

    return app
