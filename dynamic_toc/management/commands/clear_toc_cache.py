"""
Management command to clear cached table of contents output.

Useful after changing DYNAMIC_TOC settings (levels, exclude class), which the
content hash check on read does not notice.
"""

from django.core.management.base import BaseCommand, CommandError

from dynamic_toc.models import Page
from dynamic_toc.toc.cache import cache_key, clear_toc_cache


class Command(BaseCommand):
    help = 'Clear cached table of contents output for pages'

    def add_arguments(self, parser):
        parser.add_argument(
            '--page-id',
            type=int,
            help='Clear the cache for a specific page by ID',
        )
        parser.add_argument(
            '--page-slug',
            type=str,
            help='Clear the cache for a specific page by slug',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show which cache keys would be cleared without clearing them',
        )

    def handle(self, *args, **options):
        page_id = options.get('page_id')
        page_slug = options.get('page_slug')
        dry_run = options.get('dry_run')

        if dry_run:
            self.stdout.write(
                self.style.WARNING('DRY RUN MODE: No cache entries will be cleared\n')
            )

        pages = Page.objects.all()
        if page_id is not None:
            pages = pages.filter(pk=page_id)
        if page_slug:
            pages = pages.filter(slug=page_slug)

        if (page_id is not None or page_slug) and not pages.exists():
            raise CommandError('No page matches the given --page-id/--page-slug')

        count = 0
        for page in pages:
            if dry_run:
                self.stdout.write(f'  would clear {cache_key(page.pk)} ({page.slug})')
            else:
                clear_toc_cache(page.pk)
            count += 1

        verb = 'Would clear' if dry_run else 'Cleared'
        self.stdout.write(self.style.SUCCESS(f'{verb} cached TOC for {count} page(s)'))
