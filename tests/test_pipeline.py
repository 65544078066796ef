"""End-to-end tests for the TOC pipeline."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from dynamic_toc.toc import pipeline
from dynamic_toc.toc.cache import get_cached_toc, store_toc
from dynamic_toc.toc.config import get_toc_config
from dynamic_toc.toc.parser import ParsedFragment
from dynamic_toc.toc.pipeline import TocOutcome, automatic_toc, build_toc, generate_toc


def test_duplicate_headings_get_distinct_slugs() -> None:
    build = build_toc("<h2>Intro</h2><p>x</p><h2>Intro</h2>", levels=[2])

    assert build.outcome is TocOutcome.GENERATED
    assert [(e.slug, e.text, e.level) for e in build.entries] == [
        ("intro", "Intro", 2),
        ("intro-2", "Intro", 2),
    ]
    assert build.html.startswith('<nav class="dynamic-toc"')
    assert build.html == build.toc_html + (
        '<h2 id="intro">Intro</h2><p>x</p><h2 id="intro-2">Intro</h2>'
    )


def test_excluded_heading_keeps_no_id() -> None:
    build = build_toc(
        '<div class="custom_block"><h2>Hidden</h2></div><h2>Visible</h2>', levels=[2]
    )

    assert [e.text for e in build.entries] == ["Visible"]
    assert build.html.endswith(
        '<div class="custom_block"><h2>Hidden</h2></div><h2 id="visible">Visible</h2>'
    )


def test_single_deep_heading_is_top_level() -> None:
    build = build_toc("<h3>Only</h3>")

    assert [(e.slug, e.level) for e in build.entries] == [("only", 3)]
    assert build.toc_html.count("<ul") == 1


def test_malformed_input_is_recovered() -> None:
    build = build_toc("<h2>Unclosed")

    assert [(e.slug, e.text) for e in build.entries] == [("unclosed", "Unclosed")]
    assert build.html.endswith('<h2 id="unclosed">Unclosed</h2>')


def test_content_escaping_the_wrapper_is_kept() -> None:
    build = build_toc("<h2>A</h2></div><h2>B</h2>")

    assert [e.slug for e in build.entries] == ["a", "b"]
    assert build.html.endswith('<h2 id="a">A</h2><h2 id="b">B</h2>')


def test_text_escaping_the_wrapper_stays_escaped() -> None:
    build = build_toc("<h2>A</h2></div>a &lt;script&gt;alert(1)&lt;/script&gt;")

    assert "<script>" not in build.html
    assert build.html.endswith('<h2 id="a">A</h2>a &lt;script&gt;alert(1)&lt;/script&gt;')


def test_comment_escaping_the_wrapper_keeps_delimiters() -> None:
    build = build_toc("<h2>A</h2></div><!-- note --><p>after</p>")

    assert build.html.endswith('<h2 id="a">A</h2><!-- note --><p>after</p>')


@pytest.mark.parametrize("content", ["", "<p>No headings here</p>", "<h2>  </h2>", "plain text"])
def test_heading_less_content_is_returned_unchanged(content) -> None:
    build = build_toc(content)

    assert build.outcome is TocOutcome.NO_HEADINGS
    assert build.html == content
    assert automatic_toc(content) == content


def test_output_is_idempotent() -> None:
    content = "<h2>One</h2><h3>Two</h3><h4>Three</h4><h2>One</h2>"

    assert automatic_toc(content) == automatic_toc(content)


def test_parse_failure_returns_original(monkeypatch) -> None:
    monkeypatch.setattr(pipeline, "parse_fragment", lambda content: None)

    build = build_toc("<h2>Title</h2>")

    assert build.outcome is TocOutcome.PARSE_FAILED
    assert build.html == "<h2>Title</h2>"


def test_missing_wrapper_returns_unmutated_original(monkeypatch) -> None:
    soup = BeautifulSoup("<h2>Title</h2>", "html.parser")
    monkeypatch.setattr(
        pipeline, "parse_fragment", lambda content: ParsedFragment(soup=soup, root=None)
    )

    build = build_toc("<h2>Title</h2>")

    assert build.outcome is TocOutcome.REASSEMBLY_FALLBACK
    assert build.html == "<h2>Title</h2>"


def test_levels_and_exclude_class_come_from_settings(settings) -> None:
    settings.DYNAMIC_TOC = {"LEVELS": [3], "EXCLUDE_CLASS": "skip"}

    build = build_toc('<h2>Two</h2><h3>Three</h3><div class="skip"><h3>Gone</h3></div>')

    assert [e.text for e in build.entries] == ["Three"]


def test_html_filter_is_applied() -> None:
    calls = []

    def wrap(toc_html, entries, entity_id):
        calls.append((len(entries), entity_id))
        return f"<aside>{toc_html}</aside>"

    config = get_toc_config({"HTML_FILTER": wrap})
    build = build_toc("<h2>A</h2>", entity_id=9, config=config)

    assert calls == [(1, 9)]
    assert build.html.startswith("<aside><nav")


def test_entity_id_names_the_toc() -> None:
    build = build_toc("<h2>A</h2>", entity_id=5)

    assert 'id="dynamic-toc-5"' in build.html
    assert 'aria-controls="dynamic-toc-5-panel"' in build.html


class TestGenerateToc:
    def test_result_is_cached_per_entity(self) -> None:
        first = generate_toc("<h2>A</h2>", entity_id=1)
        second = generate_toc("<h2>A</h2>", entity_id=1)

        assert first.outcome is TocOutcome.GENERATED
        assert second.outcome is TocOutcome.CACHED
        assert second.html == first.html

    def test_changed_content_is_recomputed(self) -> None:
        generate_toc("<h2>A</h2>", entity_id=1)
        build = generate_toc("<h2>B</h2>", entity_id=1)

        assert build.outcome is TocOutcome.GENERATED
        assert build.html.endswith('<h2 id="b">B</h2>')

    def test_cache_hit_skips_parsing(self, monkeypatch) -> None:
        store_toc(7, "<h2>A</h2>", "<p>cached</p>")

        def fail(content):
            raise AssertionError("content was parsed")

        monkeypatch.setattr(pipeline, "parse_fragment", fail)

        assert automatic_toc("<h2>A</h2>", entity_id=7) == "<p>cached</p>"

    def test_heading_less_content_is_not_cached(self) -> None:
        generate_toc("<p>x</p>", entity_id=3)

        assert get_cached_toc(3, "<p>x</p>") is None

    def test_no_entity_means_no_cache(self) -> None:
        generate_toc("<h2>A</h2>")

        assert generate_toc("<h2>A</h2>").outcome is TocOutcome.GENERATED
