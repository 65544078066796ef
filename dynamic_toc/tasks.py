"""
Celery tasks for the dynamic_toc app.

Run a worker with: celery -A TOCProject worker -l info
"""

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task
def warm_toc_cache(page_id):
    """
    Build and cache the combined TOC output for a page.

    Called after a page is saved so the first visitor does not pay for the
    parse. Disabled pages are skipped.

    Returns:
        Dict with the outcome of the build
    """
    from .enablement import is_toc_enabled
    from .models import Page
    from .toc.pipeline import generate_toc

    try:
        page = Page.objects.get(pk=page_id)
    except Page.DoesNotExist:
        return {"success": False, "error": f"Page {page_id} not found."}

    if not is_toc_enabled(page):
        return {"success": True, "page_id": page_id, "skipped": True}

    try:
        build = generate_toc(page.content, entity_id=page.pk)
    except Exception as e:
        logger.error(
            f"Error building table of contents for page '{page.slug}': {str(e)}",
            exc_info=True,
        )
        return {"success": False, "page_id": page_id, "error": str(e)}

    logger.info(
        f"Warmed table of contents for page '{page.slug}': "
        f"{build.outcome.value}, {len(build.entries)} entries"
    )
    return {
        "success": True,
        "page_id": page_id,
        "outcome": build.outcome.value,
        "entries": len(build.entries),
    }
