"""
Entry points tying the TOC stages together.

    content -> parse_fragment -> select_headings -> assign_slugs
            -> render_toc -> toc_html + reassembled content

No stage raises for malformed or heading-less content: every failure path
returns the original content unchanged and records why on ``TocBuild.outcome``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from bs4 import NavigableString
from django.utils.module_loading import import_string

from .cache import get_cached_toc, store_toc
from .config import get_toc_config
from .parser import ParsedFragment, parse_fragment
from .renderer import TOC_ID_PREFIX, render_toc
from .selector import select_headings
from .slugs import TocEntry, assign_slugs

logger = logging.getLogger(__name__)


class TocOutcome(str, Enum):
    GENERATED = "generated"
    CACHED = "cached"
    NO_HEADINGS = "no_headings"
    PARSE_FAILED = "parse_failed"
    REASSEMBLY_FALLBACK = "reassembly_fallback"


@dataclass
class TocBuild:
    html: str
    outcome: TocOutcome
    entries: list[TocEntry] = field(default_factory=list)
    toc_html: str = ""


def reassemble(fragment: ParsedFragment, original: str) -> str:
    """
    Serialise the (mutated) fragment without its wrapper element.

    Nodes pushed out of the wrapper by a stray closing tag are kept, in order.
    Falls back to ``original`` when the wrapper is gone.
    """
    root = fragment.root
    if root is None:
        return original
    parts = [root.decode_contents()]
    for node in root.next_siblings:
        if isinstance(node, NavigableString):
            # str() would drop comment delimiters and entity escaping
            parts.append(node.output_ready())
        else:
            parts.append(node.decode())
    return "".join(parts)


def _apply_html_filter(toc_html, entries, entity_id, config):
    path = config.get("HTML_FILTER")
    if not path:
        return toc_html
    html_filter = import_string(path) if isinstance(path, str) else path
    return html_filter(toc_html, entries, entity_id)


def build_toc(
    content: str,
    levels=None,
    exclude_class: str | None = None,
    toc_id: str | None = None,
    entity_id=None,
    config=None,
) -> TocBuild:
    """
    Run the full pipeline on ``content`` without touching the cache.

    ``levels`` and ``exclude_class`` default to the configured values.
    """
    config = config or get_toc_config()
    levels = config["LEVELS"] if levels is None else levels
    exclude_class = config["EXCLUDE_CLASS"] if exclude_class is None else exclude_class

    fragment = parse_fragment(content)
    if fragment is None:
        return TocBuild(html=content, outcome=TocOutcome.PARSE_FAILED)

    entries = assign_slugs(select_headings(fragment.soup, levels, exclude_class))
    if not entries:
        logger.debug("No headings found; leaving content unchanged")
        return TocBuild(html=content, outcome=TocOutcome.NO_HEADINGS)

    if fragment.root is None:
        logger.warning("Fragment wrapper missing after parsing; leaving content unchanged")
        return TocBuild(html=content, outcome=TocOutcome.REASSEMBLY_FALLBACK)

    if toc_id is None and entity_id is not None:
        toc_id = f"{TOC_ID_PREFIX}-{entity_id}"
    toc_html = render_toc(entries, toc_id=toc_id)
    toc_html = _apply_html_filter(toc_html, entries, entity_id, config)

    return TocBuild(
        html=toc_html + reassemble(fragment, content),
        outcome=TocOutcome.GENERATED,
        entries=entries,
        toc_html=toc_html,
    )


def generate_toc(content: str, entity_id=None, config=None) -> TocBuild:
    """
    Build the combined output, reusing the cached result for ``entity_id``.

    Without an ``entity_id`` nothing is read from or written to the cache.
    Only generated results are stored; content without headings is cheap to
    re-check and is returned as-is.
    """
    config = config or get_toc_config()

    if entity_id is not None:
        cached = get_cached_toc(entity_id, content, config)
        if cached is not None:
            return TocBuild(html=cached, outcome=TocOutcome.CACHED)

    build = build_toc(content, entity_id=entity_id, config=config)

    if entity_id is not None and build.outcome is TocOutcome.GENERATED:
        store_toc(entity_id, content, build.html, config)

    return build


def automatic_toc(content: str, entity_id=None, config=None) -> str:
    """Return ``content`` with its table of contents prepended, when it has headings."""
    return generate_toc(content, entity_id=entity_id, config=config).html
