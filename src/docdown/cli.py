"""Command-line interface for docdown.

Usage:
    docdown lodash --url https://github.com/lodash/lodash/blob/main/lodash.js
    docdown src/util.js docs/util --toc categories --style github
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

import click

from .config import Config
from .generator import docdown
from .models import DocdownError


@click.command()
@click.argument("file")
@click.argument("output", required=False)
@click.option("--url", help="Base URL of the source file for \"View in source\" links.")
@click.option("--title", help="Document title. Defaults to '<file> API documentation'.")
@click.option("--lang", help="Language of @example code blocks.")
@click.option(
    "--toc",
    type=click.Choice(["properties", "categories"]),
    help="Group the table of contents by member or by @category.",
)
@click.option(
    "--style",
    type=click.Choice(["default", "github"]),
    help="Permalink hash style.",
)
@click.option("--sort/--no-sort", default=None, help="Sort groups and entries naturally.")
@click.option("--print/--no-print", "echo", default=True, help="Echo the Markdown.")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output.")
def main(file, output, url, title, lang, toc, style, sort, echo, verbose):
    """Generate Markdown API documentation from JSDoc comments in FILE.

    FILE gets a `.js` extension when it has none. The Markdown is written to
    OUTPUT (default: the basename of FILE) with `.md` appended.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not re.search(r"\.[a-z]+$", file):
        file += ".js"
    output = output or os.path.basename(file)

    options = Config.options(
        path=str(Path(file).resolve()),
        url=url,
        title=title,
        lang=lang,
        toc=toc,
        style=style,
        sort=sort,
    )

    try:
        markdown = docdown(options)
    except FileNotFoundError as e:
        raise click.ClickException(f"No such file: {file}") from e
    except DocdownError as e:
        raise click.ClickException(str(e)) from e

    Path(output + ".md").write_text(markdown, encoding="utf-8")

    if echo:
        click.echo(markdown)
    click.echo(f"  ✓ {output}.md", err=True)


if __name__ == "__main__":
    main()
