"""
Admin for the Page model.

The "Show Table of Contents" field is the per-page switch: blank follows the
site-wide default, checked/unchecked forces it on or off.
"""

from django.contrib import admin, messages

from dynamic_toc.enablement import is_toc_enabled
from dynamic_toc.models import Page
from dynamic_toc.toc.cache import clear_toc_cache


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ["title", "slug", "toc_enabled", "toc_active", "updated_at"]
    list_filter = ["toc_enabled"]
    search_fields = ["title", "slug"]
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ["created_at", "updated_at"]
    actions = ["clear_cached_toc"]

    fieldsets = [
        (None, {"fields": ("title", "slug", "content")}),
        (
            "Dynamic TOC",
            {
                "fields": ("toc_enabled",),
                "description": "Generate a table of contents from this page's headings.",
            },
        ),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ["collapse"]}),
    ]

    @admin.display(boolean=True, description="TOC active")
    def toc_active(self, obj):
        return is_toc_enabled(obj)

    @admin.action(description="Clear cached table of contents")
    def clear_cached_toc(self, request, queryset):
        count = 0
        for page in queryset:
            clear_toc_cache(page.pk)
            count += 1
        self.message_user(
            request, f"Cleared cached TOC for {count} page(s).", level=messages.SUCCESS
        )
