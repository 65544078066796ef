"""
URL patterns for the table of contents API.

Endpoints:
- GET /api/v1/pages/<slug>/toc/ - TOC for a page
"""

from django.urls import path

from .views import page_toc

app_name = "api"

urlpatterns = [
    path(
        "v1/pages/<slug:slug>/toc/",
        page_toc,
        name="page-toc",
    ),
]
