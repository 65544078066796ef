"""
Page model: an HTML content unit that can carry a generated table of contents.

Whether a page shows a TOC is decided per page when ``toc_enabled`` is set,
and by the site-wide ``DYNAMIC_TOC["ENABLED"]`` setting when it is left blank.
"""

from django.db import models
from django.template.defaultfilters import slugify

from .base import TimeStampedModel


class Page(TimeStampedModel):
    title = models.CharField(max_length=200)
    slug = models.SlugField(
        max_length=220,
        unique=True,
        blank=True,
        help_text="Auto-generated from title if blank.",
    )
    content = models.TextField(
        blank=True,
        help_text="HTML content. Headings in it become table of contents entries.",
    )
    toc_enabled = models.BooleanField(
        null=True,
        blank=True,
        default=None,
        verbose_name="Show Table of Contents",
        help_text="Leave blank to follow the site-wide default.",
    )

    class Meta:
        ordering = ["slug"]
        verbose_name = "Page"
        verbose_name_plural = "Pages"

    def __str__(self):
        return self.title or self.slug

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._unique_slug(slugify(self.title) or "page")
        super().save(*args, **kwargs)

    def _unique_slug(self, base: str) -> str:
        slug = base
        counter = 2
        while Page.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base}-{counter}"
            counter += 1
        return slug
