"""Tests for the page TOC API."""

from __future__ import annotations

import pytest
from django.urls import reverse

from dynamic_toc.models import Page

pytestmark = pytest.mark.django_db


def test_page_toc_returns_entries_and_outline(client) -> None:
    Page.objects.create(
        title="Guide",
        slug="guide",
        content="<h2>Install</h2><h3>Linux</h3><h2>Use</h2>",
        toc_enabled=True,
    )

    response = client.get(reverse("api:page-toc", kwargs={"slug": "guide"}))

    assert response.status_code == 200
    data = response.json()
    assert data["slug"] == "guide"
    assert data["toc_enabled"] is True
    assert data["count"] == 3
    assert data["entries"][0] == {"slug": "install", "text": "Install", "level": 2}
    assert [node["id"] for node in data["outline"]] == ["install", "use"]
    assert data["outline"][0]["children"][0]["id"] == "linux"


def test_disabled_page_still_reports_entries(client) -> None:
    Page.objects.create(title="Notes", slug="notes", content="<h2>A</h2>", toc_enabled=False)

    data = client.get("/api/v1/pages/notes/toc/").json()

    assert data["toc_enabled"] is False
    assert data["count"] == 1


def test_unknown_page_is_404(client) -> None:
    assert client.get("/api/v1/pages/missing/toc/").status_code == 404


def test_only_get_is_allowed(client) -> None:
    Page.objects.create(title="Guide", slug="guide")

    assert client.post("/api/v1/pages/guide/toc/").status_code == 405
