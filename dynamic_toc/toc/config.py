from django.conf import settings

DEFAULT_LEVELS = (2, 3, 4)
DEFAULT_EXCLUDE_CLASS = "custom_block"
DEFAULT_CACHE_TTL = 12 * 60 * 60


def get_toc_config(overrides=None):
    """
    Configuration for table-of-contents generation.

    Values come from the ``DYNAMIC_TOC`` settings dict, merged over defaults.
    ``overrides`` (if given) wins over both, which is how tests and callers
    with per-request needs adjust a single key.

    Keys:
        LEVELS: heading levels to include (validated by the selector)
        EXCLUDE_CLASS: class marking containers whose headings are skipped
        CACHE_TTL: seconds a combined result stays in the cache
        CACHE_KEY_PREFIX: prefix for per-page cache keys
        ENABLED: site-wide default when a page has no explicit flag
        ENABLED_OVERRIDE: dotted path to ``callable(enabled, page) -> bool``
        HTML_FILTER: dotted path to ``callable(toc_html, entries, entity_id) -> str``
        WARM_CACHE_ON_SAVE: recompute the cached result after a page save
    """
    config = {
        "LEVELS": list(DEFAULT_LEVELS),
        "EXCLUDE_CLASS": DEFAULT_EXCLUDE_CLASS,
        "CACHE_TTL": DEFAULT_CACHE_TTL,
        "CACHE_KEY_PREFIX": "dynamic_toc",
        "ENABLED": False,
        "ENABLED_OVERRIDE": None,
        "HTML_FILTER": None,
        "WARM_CACHE_ON_SAVE": True,
    }
    config.update(getattr(settings, "DYNAMIC_TOC", {}) or {})
    if overrides:
        config.update(overrides)
    return config
