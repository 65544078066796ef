"""
Models for the dynamic_toc app.

- base: abstract timestamp base model
- page: Page, the HTML content unit a table of contents is generated for
"""

from .base import TimeStampedModel
from .page import Page

__all__ = [
    "TimeStampedModel",
    "Page",
]
