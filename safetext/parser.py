"""
SPDX-License-Identifier: LicenseRef-NonCommercial-Only
© 2025 github.com/defmon3 — Non-commercial use only. Commercial use requires permission.

parser.py – untrusted markup to a BeautifulSoup tree (lxml backend).
"""

import html
import logging
import re

from bs4 import BeautifulSoup, UnicodeDammit
from bs4.exceptions import ParserRejectedMarkup

log = logging.getLogger(__name__)

# Stands in for a "<" written as a character reference. Text nodes carry it
# until extraction, so an escaped "<" stays distinguishable from a literal one.
ESCAPED_LT = "\ue000"

# Same reference grammar as html.unescape.
CHARREF = re.compile(r"&(#[0-9]+;?|#[xX][0-9a-fA-F]+;?|[^\t\n\f <&#;]{1,32};?)")


def _replace_charref(match: re.Match) -> str:
    ref = match.group()
    decoded = html.unescape(ref)
    if "<" not in decoded and ESCAPED_LT not in decoded:
        return ref
    return decoded.replace(ESCAPED_LT, "\ufffd").replace("<", ESCAPED_LT)


def mark_escaped_lt(markup: str) -> str:
    """
    Replace every character reference for ``<`` with ``ESCAPED_LT``.

    Occurrences of ``ESCAPED_LT`` already in the input, literal or
    referenced, become U+FFFD.
    """
    markup = markup.replace(ESCAPED_LT, "\ufffd")
    return CHARREF.sub(_replace_charref, markup)


def decode(raw: bytes, from_encoding: str | None = None) -> str:
    """
    Decode input bytes the way BeautifulSoup would.

    :param raw: Markup bytes.
    :param from_encoding: Encoding to try first.
    :raises ParserRejectedMarkup: When no encoding fits.
    """
    dammit = UnicodeDammit(
        raw,
        known_definite_encodings=[from_encoding] if from_encoding else [],
        is_html=True,
    )
    if dammit.unicode_markup is None:
        raise ParserRejectedMarkup("Could not convert input to Unicode.")
    log.debug("[parser.decode] decoded bytes as %s", dammit.original_encoding)
    return dammit.unicode_markup


def parse(raw: str | bytes, from_encoding: str | None = None) -> BeautifulSoup:
    """
    Parse untrusted markup into a BeautifulSoup tree.

    lxml does the error recovery: a tag cut off by end of input is dropped,
    unclosed elements are closed, stray end tags are ignored. Entity
    references are decoded in the tree, except that an escaped ``<`` is
    kept as ``ESCAPED_LT``; :func:`safetext.sanitize.extract_text` turns it
    back into ``<``.

    :param raw: HTML as text or bytes. Bytes are decoded with ``UnicodeDammit``.
    :param from_encoding: Encoding to try first when ``raw`` is bytes.
    :returns: Document root.
    """
    if isinstance(raw, bytes):
        raw = decode(raw, from_encoding)
    return BeautifulSoup(mark_escaped_lt(raw), "lxml")
