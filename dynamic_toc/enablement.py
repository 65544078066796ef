"""
Decide whether a page gets a table of contents.

Order of precedence:
1. The page's own ``toc_enabled`` flag, when it is set.
2. The site-wide ``DYNAMIC_TOC["ENABLED"]`` setting.
3. ``DYNAMIC_TOC["ENABLED_OVERRIDE"]``, if configured, gets the result of the
   above and the page, and has the final word.
"""

import logging

from django.utils.module_loading import import_string

from dynamic_toc.toc.config import get_toc_config
from dynamic_toc.toc.pipeline import automatic_toc

logger = logging.getLogger(__name__)


def is_toc_enabled(page, config=None) -> bool:
    config = config or get_toc_config()

    flag = getattr(page, "toc_enabled", None)
    enabled = bool(config["ENABLED"]) if flag is None else bool(flag)

    override = config.get("ENABLED_OVERRIDE")
    if override:
        override = import_string(override) if isinstance(override, str) else override
        enabled = bool(override(enabled, page))

    return enabled


def content_with_toc(page, content=None, config=None) -> str:
    """
    Return the page content with its table of contents prepended.

    ``content`` defaults to ``page.content``. Disabled pages get their content
    back unchanged. Only ``page.content`` is cached under the page's primary
    key; any other content is built fresh each time so it cannot evict it.
    """
    config = config or get_toc_config()
    content = page.content if content is None else content

    if not is_toc_enabled(page, config):
        logger.debug(f"Table of contents disabled for page '{page.slug}'")
        return content

    entity_id = page.pk if content == page.content else None
    return automatic_toc(content, entity_id=entity_id, config=config)
