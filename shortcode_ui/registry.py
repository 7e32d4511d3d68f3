"""
Registry of shortcodes that have a UI.

Collaborators describe a shortcode's editing form with ``register()``; the
editor payload and the preview endpoints read the registry back. The registry
is filled lazily: the first read (or the first editor render) runs the
registration callbacks, and only once.

Example config:

    registry.register("pullquote", {
        "label": "Pullquote",
        "listItemImage": "dashicons-editor-quote",
        "inner_content": True,
        "post_type": ["post", "page"],
        "attrs": [
            {"attr": "source", "type": "url", "label": "Source"},
            {"attr": "note", "type": "textarea", "label": "Note", "encode": True},
        ],
    })
"""

import copy
import logging
from urllib.parse import unquote

from django.utils.translation import gettext_lazy as _

from .fields import FieldTypeRegistry
from .sanitizer import kses_post

logger = logging.getLogger(__name__)

SANITIZED_FIELDS = ("label", "description")


class ShortcodeRegistry:
    def __init__(self, engine, fields=None):
        self.engine = engine
        self.fields = fields or FieldTypeRegistry()
        self._shortcodes = {}
        self._register_callbacks = []
        self._list_filters = []
        self._populated = False

    # --- Observers ---

    def on_register_shortcodes(self, callback):
        """
        Add a registration callback.

        Called once as ``callback(registry, settings, editor_id)`` the first
        time the registry is read or an editor is rendered.
        """
        self._register_callbacks.append(callback)
        return callback

    def on_filter_shortcode_list(self, callback):
        """
        Add a filter over the registered shortcodes.

        Called as ``callback(shortcodes)`` on every ``get_all()``; must return
        the (possibly reduced) mapping of tag to config.
        """
        self._list_filters.append(callback)
        return callback

    # --- Registration ---

    def register(self, tag, config=None):
        """Register UI for a shortcode, replacing any earlier registration of ``tag``."""
        config = dict(config) if isinstance(config, dict) else {}

        # inner_content=True is accepted as shorthand for the default descriptor
        if config.get("inner_content") is True:
            config["inner_content"] = {
                "label": _("Inner Content"),
                "description": "",
            }

        if "attrs" not in config:
            config["attrs"] = []

        if tag in self._shortcodes:
            logger.warning(f"Shortcode UI for [{tag}] registered twice; keeping the latest")

        config["shortcode_tag"] = tag
        self._shortcodes[tag] = config

        self.engine.add_atts_filter(tag, self.decode_encoded_attributes)

    def ensure_populated(self, settings=None, editor_id=""):
        """Run the registration callbacks unless they already ran."""
        if self._populated:
            return

        self._populated = True
        for callback in self._register_callbacks:
            callback(self, settings, editor_id)

        logger.info(f"Registered shortcode UI for {len(self._shortcodes)} shortcode(s)")

    @property
    def populated(self):
        return self._populated

    # --- Reading ---

    def get_all(self):
        """
        Return every registered config, keyed by tag.

        The result is a copy: list filters run over it and every label and
        description is reduced to post-content markup.
        """
        self.ensure_populated()

        shortcodes = copy.deepcopy(self._shortcodes)
        for callback in self._list_filters:
            shortcodes = callback(shortcodes)

        for args in shortcodes.values():
            self._sanitize_fields(args)

            for attr in args.get("attrs") or []:
                if isinstance(attr, dict):
                    self._sanitize_fields(attr)

            if isinstance(args.get("inner_content"), dict):
                self._sanitize_fields(args["inner_content"])

        return shortcodes

    def get_one(self, tag):
        """Return the config for ``tag``, or None when it has no UI."""
        return self.get_all().get(tag)

    @staticmethod
    def _sanitize_fields(item):
        for field in SANITIZED_FIELDS:
            if item.get(field):
                item[field] = kses_post(item[field])

    # --- List helpers ---

    @staticmethod
    def filter_for_document(shortcodes, post_type):
        """Drop configs restricted to other post types than ``post_type``."""
        if not post_type:
            return list(shortcodes)

        allowed = []
        for args in shortcodes:
            restriction = args.get("post_type")
            if isinstance(restriction, str):
                restriction = [restriction]
            if restriction and post_type not in restriction:
                continue
            allowed.append(args)
        return allowed

    @staticmethod
    def sort_by_label(shortcodes):
        return sorted(shortcodes, key=lambda args: str(args.get("label", "")))

    # --- Attribute decoding ---

    def decode_encoded_attributes(self, out, pairs, atts, tag):
        """
        Percent-decode attribute values whose field is marked as encoded.

        ``encode`` on the attribute wins; otherwise the field type's default
        applies.
        """
        args = self._shortcodes.get(tag)
        if args is None:
            return out

        for attr in args.get("attrs") or []:
            if not isinstance(attr, dict):
                continue
            default = self.fields.default_encode(attr.get("type"))
            encoded = attr.get("encode", default)
            name = attr.get("attr")

            if encoded and name in out and isinstance(out[name], str):
                out[name] = unquote(out[name])

        return out

    def __contains__(self, tag):
        return tag in self._shortcodes

    def __len__(self):
        return len(self._shortcodes)
