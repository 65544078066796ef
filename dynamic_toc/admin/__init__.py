"""
Django admin configuration for the dynamic_toc application.

- page: Page admin with the per-page table of contents flag

Admin classes register themselves via @admin.register() decorators.
"""

from .page import PageAdmin

__all__ = [
    "PageAdmin",
]
