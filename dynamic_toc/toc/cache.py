"""
Per-page cache of combined TOC output.

Each entry stores the rendered HTML together with a fingerprint of the exact
content it was built from. A lookup only returns HTML when the fingerprint
matches the current content, so edited content is never served stale even
before the entry is cleared.
"""

from __future__ import annotations

import hashlib
import logging

from django.core.cache import cache

from .config import get_toc_config

logger = logging.getLogger(__name__)


def content_hash(content: str | bytes) -> str:
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.md5(content, usedforsecurity=False).hexdigest()


def cache_key(entity_id, config=None) -> str:
    config = config or get_toc_config()
    return f"{config['CACHE_KEY_PREFIX']}:{entity_id}"


def get_cached_toc(entity_id, content, config=None) -> str | None:
    """Return cached HTML for ``entity_id`` if it was built from ``content``."""
    key = cache_key(entity_id, config)
    cached = cache.get(key)
    if not isinstance(cached, dict) or "html" not in cached:
        logger.debug("TOC cache miss for %s", key)
        return None
    if cached.get("hash") != content_hash(content):
        logger.debug("TOC cache stale for %s", key)
        return None
    return cached["html"]


def store_toc(entity_id, content, html: str, config=None) -> None:
    config = config or get_toc_config()
    cache.set(
        cache_key(entity_id, config),
        {"hash": content_hash(content), "html": html},
        int(config["CACHE_TTL"]),
    )


def clear_toc_cache(entity_id, config=None) -> None:
    cache.delete(cache_key(entity_id, config))
