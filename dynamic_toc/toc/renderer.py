"""
Render TOC entries as a collapsible, accessible navigation fragment.

The toggle button starts collapsed (``aria-expanded="false"``) and controls a
hidden ``role="region"`` panel. Generated ids derive from ``toc_id``, which
defaults to a digest of the entries: the same entries always render the same
markup, and different tables on one page get different ids. Callers rendering
the same entries twice on one page pass their own ``toc_id``.
"""

from __future__ import annotations

import hashlib
from typing import Sequence

from django.utils.html import format_html
from django.utils.safestring import mark_safe
from django.utils.translation import gettext, ngettext

from .outline import CLOSE_ITEM, CLOSE_LIST, OPEN_ITEM, OPEN_LIST, OutlineEvent, build_outline
from .slugs import TocEntry

TOC_ID_PREFIX = "dynamic-toc"


def default_toc_id(entries: Sequence[TocEntry]) -> str:
    digest = hashlib.md5(usedforsecurity=False)
    for entry in entries:
        digest.update(f"{entry.level}\x00{entry.slug}\x00{entry.text}\x01".encode("utf-8"))
    return f"{TOC_ID_PREFIX}-{digest.hexdigest()[:8]}"


def render_outline(events: Sequence[OutlineEvent]) -> str:
    parts = []
    for event in events:
        if event.kind == OPEN_LIST:
            parts.append('<ul class="dynamic-toc__list">')
        elif event.kind == OPEN_ITEM and event.entry is None:
            parts.append('<li class="dynamic-toc__item dynamic-toc__item--gap">')
        elif event.kind == OPEN_ITEM:
            parts.append(
                format_html(
                    '<li class="dynamic-toc__item"><a href="#{}">{}</a>',
                    event.entry.slug,
                    event.entry.text,
                )
            )
        elif event.kind == CLOSE_ITEM:
            parts.append("</li>")
        elif event.kind == CLOSE_LIST:
            parts.append("</ul>")
    return mark_safe("".join(parts))


def render_toc(entries: Sequence[TocEntry], toc_id: str | None = None) -> str:
    """
    Return the TOC markup for ``entries`` (an empty string when there are none).

    Without ``toc_id`` the ids are derived from the entries, so two tables
    built from identical headings get identical ``id``/``aria-controls``
    values. Pass a distinct ``toc_id`` to each when both end up on one page.
    """
    entries = list(entries)
    if not entries:
        return ""

    toc_id = toc_id or default_toc_id(entries)
    panel_id = f"{toc_id}-panel"
    label = gettext("Table of contents")
    count = ngettext("%(count)d heading", "%(count)d headings", len(entries)) % {
        "count": len(entries)
    }

    return format_html(
        '<nav class="dynamic-toc" id="{toc_id}" aria-label="{label}">'
        '<div class="dynamic-toc__toggle">'
        '<button class="dynamic-toc__button" type="button" aria-expanded="false" aria-controls="{panel_id}">'
        '<span class="dynamic-toc__title">{label}</span>'
        '<span class="dynamic-toc__info">'
        '<span class="dynamic-toc__count">({count})</span>'
        '<span class="dynamic-toc__icon" aria-hidden="true">+</span>'
        "</span>"
        "</button>"
        "</div>"
        '<div class="dynamic-toc__panel" id="{panel_id}" role="region" aria-label="{label}" hidden>'
        "{body}"
        "</div>"
        "</nav>",
        toc_id=toc_id,
        panel_id=panel_id,
        label=label,
        count=count,
        body=render_outline(build_outline(entries)),
    )
