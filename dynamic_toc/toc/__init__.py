"""
Heading extraction and table-of-contents generation for HTML fragments.

Pipeline: parse -> select headings -> assign slugs -> build outline ->
render -> reassemble. ``automatic_toc`` is the entry point most callers want.
"""

from .cache import clear_toc_cache, content_hash, get_cached_toc, store_toc
from .outline import OutlineEvent, build_outline, outline_to_tree
from .pipeline import TocBuild, TocOutcome, automatic_toc, build_toc, generate_toc
from .renderer import render_toc
from .slugs import TocEntry, assign_slugs, slugify_heading

__all__ = [
    "OutlineEvent",
    "TocBuild",
    "TocEntry",
    "TocOutcome",
    "assign_slugs",
    "automatic_toc",
    "build_outline",
    "build_toc",
    "clear_toc_cache",
    "content_hash",
    "generate_toc",
    "get_cached_toc",
    "outline_to_tree",
    "render_toc",
    "slugify_heading",
    "store_toc",
]
