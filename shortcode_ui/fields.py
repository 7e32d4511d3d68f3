"""
Form field types available to shortcode UI attributes.

Each field type is a small dict of options. The only option the server side
cares about is ``encode``: whether values entered through the field are sent
percent-encoded inside the shortcode and must be decoded before the shortcode
handler sees them.
"""

import copy

FALLBACK_FIELD = {"encode": False}

DEFAULT_FIELDS = {
    "text": {"template": "shortcode-ui-field-text"},
    "url": {"template": "shortcode-ui-field-url"},
    "textarea": {"template": "shortcode-ui-field-textarea"},
    "select": {"template": "shortcode-ui-field-select"},
    "radio": {"template": "shortcode-ui-field-radio"},
    "checkbox": {"template": "shortcode-ui-field-checkbox"},
    "email": {"template": "shortcode-ui-field-email"},
    "number": {"template": "shortcode-ui-field-number"},
    "date": {"template": "shortcode-ui-field-date"},
    "hidden": {"template": "shortcode-ui-field-hidden"},
    "color": {"template": "shortcode-ui-field-color"},
    "range": {"template": "shortcode-ui-field-range"},
    "attachment": {"template": "shortcode-ui-field-attachment"},
    "post_select": {"template": "shortcode-ui-field-post-select"},
    "term_select": {"template": "shortcode-ui-field-term-select"},
    "user_select": {"template": "shortcode-ui-field-user-select"},
}


class FieldTypeRegistry:
    """Lookup table from field type id to its options."""

    def __init__(self, fields=None):
        self._fields = {}
        for type_id, options in DEFAULT_FIELDS.items():
            self.register(type_id, **options)
        for type_id, options in (fields or {}).items():
            self.register(type_id, **options)

    def register(self, type_id, encode=False, **options):
        """Add or replace a field type."""
        self._fields[type_id] = {"encode": bool(encode), **options}

    def get(self, type_id):
        """Return the options for ``type_id``, or the fallback for unknown types."""
        return copy.deepcopy(self._fields.get(type_id, FALLBACK_FIELD))

    def default_encode(self, type_id) -> bool:
        return self.get(type_id).get("encode", False)

    def __contains__(self, type_id):
        return type_id in self._fields
