from __future__ import annotations

from typing import Iterable

from bs4 import Tag

from .config import DEFAULT_EXCLUDE_CLASS

FALLBACK_LEVELS = frozenset({2})


def normalize_levels(levels: Iterable | None) -> set[int]:
    """Keep the integer levels in 1-6; fall back to ``{2}`` when none survive."""
    normalized: set[int] = set()
    for value in levels or ():
        try:
            level = int(value)
        except (TypeError, ValueError):
            continue
        if 1 <= level <= 6:
            normalized.add(level)
    return normalized or set(FALLBACK_LEVELS)


def _has_class(tag: Tag, class_name: str) -> bool:
    classes = tag.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return class_name in classes


def is_excluded(heading: Tag, exclude_class: str) -> bool:
    """True when any ancestor of ``heading`` carries ``exclude_class`` as a class token."""
    return any(_has_class(parent, exclude_class) for parent in heading.parents)


def select_headings(
    tree: Tag,
    levels: Iterable | None,
    exclude_class: str | None = DEFAULT_EXCLUDE_CLASS,
) -> list[Tag]:
    """
    Return heading elements of the requested levels in document order.

    Headings nested anywhere inside an element whose class list contains
    ``exclude_class`` are left out.
    """
    tag_names = [f"h{level}" for level in sorted(normalize_levels(levels))]
    selected = []
    for heading in tree.find_all(tag_names):
        if exclude_class and is_excluded(heading, exclude_class):
            continue
        selected.append(heading)
    return selected
