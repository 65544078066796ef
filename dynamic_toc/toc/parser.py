"""
HTML fragment parsing for the TOC pipeline.

Content is a fragment, not a document, so it is wrapped in a single marker
``<div>`` before parsing. The wrapper gives the reassembler one known root to
serialise children from, and ``html.parser`` never adds ``<html>``/``<body>``
around it. The parser recovers from unclosed tags and stray entities; only
markup BeautifulSoup rejects outright is reported as unparseable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag
from bs4.dammit import UnicodeDammit
from bs4.exceptions import ParserRejectedMarkup

logger = logging.getLogger(__name__)

WRAPPER_CLASS = "dynamic-toc-wrapper"


@dataclass
class ParsedFragment:
    soup: BeautifulSoup
    root: Tag | None


def _to_text(content: str | bytes) -> str:
    """Decode byte input, guessing the encoding when it is not declared."""
    if isinstance(content, bytes):
        return UnicodeDammit(content, ["utf-8"]).unicode_markup or ""
    return content


def find_root(soup: BeautifulSoup) -> Tag | None:
    """Return the wrapper element added by ``parse_fragment``, if it survived."""
    return soup.find("div", class_=WRAPPER_CLASS, recursive=False)


def parse_fragment(content: str | bytes) -> ParsedFragment | None:
    """
    Parse an HTML fragment into a mutable tree.

    Returns ``None`` when no usable tree could be produced; callers treat that
    the same as a fragment without headings.
    """
    wrapped = f'<div class="{WRAPPER_CLASS}">{_to_text(content)}</div>'
    try:
        soup = BeautifulSoup(wrapped, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("Content fragment rejected by HTML parser: %s", exc)
        return None
    return ParsedFragment(soup=soup, root=find_root(soup))
