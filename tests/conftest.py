from __future__ import annotations

import pytest
from django.core.cache import cache

from dynamic_toc.toc.parser import parse_fragment
from dynamic_toc.toc.selector import select_headings


@pytest.fixture(autouse=True)
def clear_cache():
    """Every test starts with an empty TOC cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def headings_of():
    """Parse a fragment and return (fragment, selected headings)."""

    def _select(content: str, levels=(2, 3, 4), exclude_class="custom_block"):
        fragment = parse_fragment(content)
        return fragment, select_headings(fragment.soup, levels, exclude_class)

    return _select
