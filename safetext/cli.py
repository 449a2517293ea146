#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = ["beautifulsoup4", "lxml", "click", "loguru"]
# ///

"""
SPDX-License-Identifier: LicenseRef-NonCommercial-Only
© 2025 github.com/defmon3 — Non-commercial use only. Commercial use requires permission.

Format docstrings according to PEP 287
File: cli.py
"""

import logging

import click

from safetext.logs import DEFAULT_LOG_LEVEL, configure_logging
from safetext.sanitize import sanitize_to_text

log = logging.getLogger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Minimum level of log records written to stderr.",
)
def cli(log_level: str) -> None:
    """
    Root Click command group for the safetext CLI.

    This initializes logging via ``safetext.logs.configure_logging()`` and
    serves as the parent for the sanitizing subcommands.
    """
    configure_logging(log_level)


@cli.command()
@click.argument("sources", nargs=-1, type=click.File("rb"))
@click.option(
    "--deny",
    "-d",
    "deny",
    multiple=True,
    help="Tag name whose whole subtree is dropped; repeat for more. Replaces the default denylist.",
)
@click.option(
    "--collapse/--no-collapse",
    default=False,
    show_default=True,
    help="Squeeze whitespace runs to a single space.",
)
@click.option("--encoding", default=None, help="Encoding to try first when decoding input bytes.")
def text(sources, deny: tuple[str, ...], collapse: bool, encoding: str | None) -> None:
    """
    Print the plain text of HTML files, or of stdin when no file is given.

    :param sources: Open binary handles for each input file.
    :param deny: Tag names replacing the default denylist, if any.
    :param collapse: Collapse whitespace in the output.
    :param encoding: Preferred input encoding.
    :workflow:
        1. Read each source as bytes.
        2. Run ``sanitize_to_text()`` over it.
        3. Echo the result, one output per source.
    """
    if not sources:
        sources = (click.open_file("-", "rb"),)
    denylist = deny or None
    for source in sources:
        name = getattr(source, "name", "<stdin>")
        raw = source.read()
        log.debug("Sanitizing %s (%d bytes)", name, len(raw))
        result = sanitize_to_text(raw, denylist, collapse_whitespace=collapse, from_encoding=encoding)
        click.echo(result)
    log.debug("Sanitized %d source(s).", len(sources))


if __name__ == "__main__":
    cli()
