"""
Data handed to the editor's client side.

The editor needs the shortcodes it may offer for the current post (sanitized,
restricted to the post type and sorted by label), its UI strings and the
preview endpoint URLs.
"""

import logging

from django.urls import reverse
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)

UI_STRINGS = {
    "media_frame_title": _("Insert Post Element"),
    "media_frame_menu_insert_label": _("Insert Post Element"),
    # %s is substituted client side
    "media_frame_menu_update_label": _("%s Details"),
    "media_frame_toolbar_insert_label": _("Insert Element"),
    "media_frame_toolbar_update_label": _("Update"),
    "media_frame_no_attributes_message": _("There are no attributes to configure for this Post Element."),
    "mce_view_error": _("Failed to load preview"),
    "search_placeholder": _("Search"),
    "insert_content_label": _("Insert Content"),
}


def editor_initialized(registry, editor_settings=None, editor_id=""):
    """Editor render hook: make sure shortcode UI has been registered."""
    registry.ensure_populated(editor_settings, editor_id)
    return editor_settings


def get_editor_shortcodes(registry, post_type=None):
    shortcodes = list(registry.get_all().values())
    shortcodes = registry.filter_for_document(shortcodes, post_type)
    return registry.sort_by_label(shortcodes)


def get_editor_data(registry, post_type=None):
    """
    Build the editor payload for a post of ``post_type``.

    Returns None when no shortcode UI applies, in which case the editor has
    nothing to offer.
    """
    shortcodes = get_editor_shortcodes(registry, post_type)
    if not shortcodes:
        logger.debug(f"No shortcode UI available for post type {post_type!r}")
        return None

    return {
        "shortcodes": shortcodes,
        "strings": UI_STRINGS,
        "urls": {
            "preview": reverse("shortcode_ui:preview"),
            "bulkPreview": reverse("shortcode_ui:bulk-preview"),
        },
    }
