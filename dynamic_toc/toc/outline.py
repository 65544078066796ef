"""
Turn a flat, ordered list of TOC entries into nested-list instructions.

Levels act as depth. The smallest level present is depth 0 and anything
shallower is clamped to it. A jump of several levels at once opens one list
per level, with an empty placeholder item between consecutive lists so the
result stays valid ``<ul><li>`` nesting. Every instruction sequence returned
here is balanced: each ``open_*`` has a matching ``close_*``.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, TypedDict

from .slugs import DEFAULT_LEVEL, TocEntry

OPEN_LIST = "open_list"
OPEN_ITEM = "open_item"
CLOSE_ITEM = "close_item"
CLOSE_LIST = "close_list"


class OutlineEvent(NamedTuple):
    kind: str
    level: int
    # None on placeholder items and on list/close events
    entry: TocEntry | None = None


class OutlineNode(TypedDict):
    level: int
    id: str | None
    title: str | None
    children: list["OutlineNode"]


def build_outline(
    entries: Iterable[TocEntry], default_level: int = DEFAULT_LEVEL
) -> list[OutlineEvent]:
    entries = list(entries)
    min_level = min((entry.level for entry in entries), default=default_level)
    prev_level = min_level - 1
    events: list[OutlineEvent] = []

    for entry in entries:
        level = max(entry.level, min_level)

        if level > prev_level:
            for depth in range(prev_level + 1, level + 1):
                events.append(OutlineEvent(OPEN_LIST, depth))
                if depth < level:
                    events.append(OutlineEvent(OPEN_ITEM, depth))
        else:
            # Walk back out to the new level, then close the previous sibling.
            for depth in range(prev_level, level, -1):
                events.append(OutlineEvent(CLOSE_ITEM, depth))
                events.append(OutlineEvent(CLOSE_LIST, depth))
            events.append(OutlineEvent(CLOSE_ITEM, level))

        events.append(OutlineEvent(OPEN_ITEM, level, entry))
        prev_level = level

    for depth in range(prev_level, min_level - 1, -1):
        events.append(OutlineEvent(CLOSE_ITEM, depth))
        events.append(OutlineEvent(CLOSE_LIST, depth))

    return events


def outline_to_tree(events: Iterable[OutlineEvent]) -> list[OutlineNode]:
    """
    Replay outline instructions into nested nodes.

    Placeholder items come back as nodes with ``id`` and ``title`` set to None.
    """
    tree: list[OutlineNode] = []
    lists: list[list[OutlineNode]] = []
    items: list[OutlineNode] = []

    for event in events:
        if event.kind == OPEN_LIST:
            lists.append(items[-1]["children"] if items else tree)
        elif event.kind == OPEN_ITEM:
            node: OutlineNode = {
                "level": event.level,
                "id": event.entry.slug if event.entry else None,
                "title": event.entry.text if event.entry else None,
                "children": [],
            }
            lists[-1].append(node)
            items.append(node)
        elif event.kind == CLOSE_ITEM:
            items.pop()
        elif event.kind == CLOSE_LIST:
            lists.pop()

    return tree
