"""
Signal handlers for the dynamic_toc app.

Keeps the per-page TOC cache in step with page edits and deletions.
"""

import logging

from django.db import transaction
from django.db.models.signals import post_save, pre_delete
from django.dispatch import receiver

from dynamic_toc.enablement import is_toc_enabled
from dynamic_toc.models import Page
from dynamic_toc.tasks import warm_toc_cache
from dynamic_toc.toc.cache import clear_toc_cache
from dynamic_toc.toc.config import get_toc_config

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Page)
def refresh_toc_cache_on_save(sender, instance, created, **kwargs):
    """
    Drop the cached TOC for a saved page and optionally rebuild it.

    Clearing makes flag changes take effect immediately; content changes are
    also caught by the hash check on read. The rebuild runs after the
    transaction commits so the task sees the saved row.
    """
    config = get_toc_config()
    clear_toc_cache(instance.pk, config)
    logger.info(f"Cleared cached table of contents for page '{instance.slug}'")

    if config["WARM_CACHE_ON_SAVE"] and is_toc_enabled(instance, config):
        page_id = instance.pk
        transaction.on_commit(lambda: warm_toc_cache.delay(page_id))


@receiver(pre_delete, sender=Page)
def clear_toc_cache_on_delete(sender, instance, **kwargs):
    clear_toc_cache(instance.pk)
    logger.info(f"Cleared cached table of contents for deleted page '{instance.slug}'")
