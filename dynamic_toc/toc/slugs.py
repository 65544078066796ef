"""Anchor ids for selected headings."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Iterable

from bs4 import Tag

DEFAULT_LEVEL = 2
FALLBACK_SLUG = "section"

_MARKUP_RE = re.compile(r"<[^>]*>")
_INVALID_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_HEADING_RE = re.compile(r"h([1-6])")


@dataclass(frozen=True)
class TocEntry:
    slug: str
    text: str
    level: int

    def as_dict(self) -> dict:
        return asdict(self)


def slugify_heading(text: str) -> str:
    """Convert heading text to an anchor slug."""
    text = _MARKUP_RE.sub("", text).lower()
    text = _INVALID_RE.sub("", text)
    text = _WHITESPACE_RE.sub("-", text)
    return text.strip("-") or FALLBACK_SLUG


def heading_level(tag_name: str | None) -> int:
    match = _HEADING_RE.fullmatch((tag_name or "").lower())
    return int(match.group(1)) if match else DEFAULT_LEVEL


def _unique_slug(base: str, used: set[str]) -> str:
    slug = base
    counter = 2
    while slug in used:
        slug = f"{base}-{counter}"
        counter += 1
    return slug


def assign_slugs(headings: Iterable[Tag]) -> list[TocEntry]:
    """
    Give every non-empty heading an anchor id and collect its TOC entry.

    Existing ids are used verbatim and are not deduplicated. Generated slugs
    are unique against every slug seen so far in this call and are written
    back onto the heading. Headings with no text are skipped untouched.
    """
    used: set[str] = set()
    entries: list[TocEntry] = []
    for heading in headings:
        text = heading.get_text().strip()
        if not text:
            continue

        existing = heading.get("id")
        if existing is not None:
            slug = existing
        else:
            slug = _unique_slug(slugify_heading(text), used)
            heading["id"] = slug

        used.add(slug)
        entries.append(TocEntry(slug=slug, text=text, level=heading_level(heading.name)))
    return entries
