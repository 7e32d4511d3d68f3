"""
Management command to list the shortcodes that have a UI.

Prints the shortcode configs the editor would receive (sanitized, filtered
by post type and sorted by label) as JSON. Useful for checking what the
registration callbacks actually registered.
"""

import json

from django.core.management.base import BaseCommand
from django.core.serializers.json import DjangoJSONEncoder

from shortcode_ui.apps import get_shortcode_ui
from shortcode_ui.editor import get_editor_shortcodes


class Command(BaseCommand):
    help = 'List registered shortcode UI as JSON'

    def add_arguments(self, parser):
        parser.add_argument(
            '--post-type',
            type=str,
            help='Only list shortcodes offered for this post type',
        )
        parser.add_argument(
            '--indent',
            type=int,
            default=2,
            help='JSON indentation (default: 2)',
        )

    def handle(self, *args, **options):
        post_type = options.get('post_type')
        indent = options.get('indent')

        registry = get_shortcode_ui().registry
        shortcodes = get_editor_shortcodes(registry, post_type)

        if not shortcodes:
            self.stderr.write(self.style.WARNING('No shortcode UI registered'))

        self.stdout.write(json.dumps(shortcodes, cls=DjangoJSONEncoder, indent=indent))
