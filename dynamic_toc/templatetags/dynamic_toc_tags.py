# dynamic_toc/templatetags/dynamic_toc_tags.py

from django import template
from django.utils.safestring import mark_safe

from dynamic_toc.enablement import content_with_toc

register = template.Library()


@register.filter(name="with_toc")
def with_toc_filter(value, page):
    """Prepend the page's table of contents to ``value`` (HTML content)."""
    if page is None:
        return mark_safe(value or "")
    return mark_safe(content_with_toc(page, content=value or ""))


@register.simple_tag(takes_context=True)
def page_content_with_toc(context):
    """Template tag rendering ``page.content`` from the template context"""
    page = context.get("page")
    if page is None:
        return ""
    return mark_safe(content_with_toc(page))
