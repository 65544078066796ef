"""
Read-only API views for page tables of contents.

Endpoints:
- GET /api/v1/pages/<slug>/toc/ - TOC entries and nested outline for a page
"""

from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET

from dynamic_toc.enablement import is_toc_enabled
from dynamic_toc.models import Page
from dynamic_toc.toc.outline import build_outline, outline_to_tree
from dynamic_toc.toc.pipeline import build_toc


@require_GET
def page_toc(request, slug):
    """
    Return the table of contents for a page.

    Entries are computed from the page content even when the TOC is disabled
    for display, so editors can preview what would be generated.

    Response:
        {
            "slug": "...",
            "toc_enabled": true,
            "count": 2,
            "entries": [{"slug": "...", "text": "...", "level": 2}, ...],
            "outline": [{"level": 2, "id": "...", "title": "...", "children": [...]}, ...]
        }
    """
    page = get_object_or_404(Page, slug=slug)
    entries = build_toc(page.content, entity_id=page.pk).entries

    return JsonResponse(
        {
            "slug": page.slug,
            "toc_enabled": is_toc_enabled(page),
            "count": len(entries),
            "entries": [entry.as_dict() for entry in entries],
            "outline": outline_to_tree(build_outline(entries)),
        }
    )
