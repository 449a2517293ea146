#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = ["beautifulsoup4", "lxml"]
# ///

"""
SPDX-License-Identifier: LicenseRef-NonCommercial-Only
© 2025 github.com/defmon3 — Non-commercial use only. Commercial use requires permission.

sanitize.py – HTML to plain text for untrusted descriptions.
"""

import logging
import os
import re
from typing import Iterable

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString
from bs4.exceptions import ParserRejectedMarkup

from safetext.parser import ESCAPED_LT, parse

log = logging.getLogger(__name__)


def parse_denylist(value: str | Iterable[str]) -> frozenset[str]:
    """
    Normalize tag names for denylist membership tests.

    :param value: Comma-separated string or iterable of tag names.
    :returns: Lowercase, stripped, non-empty names.
    """
    if isinstance(value, str):
        value = value.split(",")
    return frozenset(name.strip().lower() for name in value if name and name.strip())


DEFAULT_DENYLIST = parse_denylist(os.environ.get("SAFETEXT_DENYLIST", "script,style"))

# Runs of literal "<" that would open markup: before a letter, "/", "!" or "?".
TAG_OPENER = re.compile(r"<+(?=[A-Za-z/!?])")


def remove_denylisted(tree: BeautifulSoup, denylist: Iterable[str] | None = None) -> BeautifulSoup:
    """
    Destroy every element named in ``denylist`` together with its subtree.

    :param tree: Parsed document; modified in place.
    :param denylist: Tag names to remove. Defaults to ``DEFAULT_DENYLIST``.
    :returns: The same ``tree``.
    """
    names = DEFAULT_DENYLIST if denylist is None else parse_denylist(denylist)
    if not names:
        return tree

    removed = 0
    for tag in tree.find_all(list(names)):
        # Nested matches die with their ancestor.
        if tag.decomposed:
            continue
        tag.decompose()
        removed += 1
    log.debug("[sanitize.remove_denylisted] removed=%d names=%s", removed, sorted(names))
    return tree


def _is_text(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def extract_text(tree: BeautifulSoup) -> str:
    """
    Concatenate the document's text nodes in order.

    Comments, doctypes and tag boundaries contribute nothing; no separators
    are inserted. A literal ``<`` that would open markup is dropped, wherever
    it ends up: ``<</script>script>`` and ``<</>script>`` both give
    ``script>``. An escaped ``<`` (``&lt;``) is the author's text and is kept.
    """
    text = "".join(str(node) for node in tree.descendants if _is_text(node))
    return TAG_OPENER.sub("", text).replace(ESCAPED_LT, "<")


def sanitize_to_text(
    raw: str | bytes,
    denylist: Iterable[str] | None = None,
    *,
    collapse_whitespace: bool = False,
    from_encoding: str | None = None,
) -> str:
    """
    Convert untrusted HTML to plain text that is safe to display.

    :param raw: HTML as text or bytes; any other type yields ``""``.
    :param denylist: Tag names whose whole subtree is dropped before
                     extraction. Defaults to ``DEFAULT_DENYLIST``.
    :param collapse_whitespace: Squeeze whitespace runs to one space and strip.
    :param from_encoding: Encoding to try first when ``raw`` is bytes.
    :returns: Plain text. Never raw markup.
    """
    if not isinstance(raw, (str, bytes)):
        log.warning("[sanitize.sanitize_to_text] unsupported_type=%s", type(raw).__name__)
        return ""
    if not raw:
        return ""

    try:
        tree = parse(raw, from_encoding=from_encoding)
    except ParserRejectedMarkup as e:
        log.warning("[sanitize.sanitize_to_text] rejected: %s", e)
        return ""

    remove_denylisted(tree, denylist)
    text = extract_text(tree)

    if collapse_whitespace:
        text = re.sub(r"\s+", " ", text).strip()
    log.debug("[sanitize.sanitize_to_text] in=%d out=%d", len(raw), len(text))
    return text
