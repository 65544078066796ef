"""Tests for the template filter and tag."""

from __future__ import annotations

from django.template import Context, Template

from dynamic_toc.models import Page
from dynamic_toc.toc.cache import get_cached_toc


def render(source: str, **context) -> str:
    return Template("{% load dynamic_toc_tags %}" + source).render(Context(context))


def test_with_toc_filter_on_enabled_page() -> None:
    page = Page(slug="guide", content="<h2>Hi</h2>", toc_enabled=True)

    html = render("{{ page.content|with_toc:page }}", page=page)

    assert html.startswith('<nav class="dynamic-toc"')
    assert html.endswith('<h2 id="hi">Hi</h2>')


def test_with_toc_filter_on_disabled_page() -> None:
    page = Page(slug="guide", content="<h2>Hi</h2>", toc_enabled=False)

    assert render("{{ page.content|with_toc:page }}", page=page) == "<h2>Hi</h2>"


def test_page_content_with_toc_tag() -> None:
    page = Page(slug="guide", content="<h2>Hi</h2>", toc_enabled=True)

    html = render("{% page_content_with_toc %}", page=page)

    assert '<a href="#hi">Hi</a>' in html
    assert html.endswith('<h2 id="hi">Hi</h2>')


def test_tag_without_page_renders_nothing() -> None:
    assert render("{% page_content_with_toc %}") == ""


def test_filter_on_other_content_keeps_page_cache() -> None:
    page = Page(pk=5, slug="guide", content="<h2>Body</h2>", toc_enabled=True)

    render("{{ page.content|with_toc:page }}", page=page)
    summary = render("{{ summary|with_toc:page }}", page=page, summary="<h2>Summary</h2>")

    assert summary.endswith('<h2 id="summary">Summary</h2>')
    assert get_cached_toc(5, "<h2>Body</h2>") is not None
    assert get_cached_toc(5, "<h2>Summary</h2>") is None
