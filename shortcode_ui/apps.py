from django.apps import AppConfig, apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string


def _import(path, setting):
    try:
        return import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(f"{setting}: cannot import {path!r}: {e}") from e


class ShortcodeUIConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'shortcode_ui'
    verbose_name = "Shortcode UI"

    def ready(self):
        """Build the shortcode engine, field types, registry and preview service."""
        from .fields import FieldTypeRegistry
        from .preview import PreviewService
        from .registry import ShortcodeRegistry
        from .shortcodes import ShortcodeEngine

        self.engine = ShortcodeEngine()
        for tag, path in getattr(settings, "SHORTCODE_UI_SHORTCODES", {}).items():
            self.engine.add_shortcode(tag, _import(path, "SHORTCODE_UI_SHORTCODES"))

        self.fields = FieldTypeRegistry(getattr(settings, "SHORTCODE_UI_FIELDS", {}))

        self.registry = ShortcodeRegistry(self.engine, self.fields)
        for path in getattr(settings, "SHORTCODE_UI_REGISTRATION_CALLBACKS", []):
            self.registry.on_register_shortcodes(
                _import(path, "SHORTCODE_UI_REGISTRATION_CALLBACKS")
            )
        for path in getattr(settings, "SHORTCODE_UI_LIST_FILTERS", []):
            self.registry.on_filter_shortcode_list(
                _import(path, "SHORTCODE_UI_LIST_FILTERS")
            )

        self.preview = PreviewService(self.engine, self.registry)


def get_shortcode_ui():
    """Return the app config holding the engine, registry and preview service."""
    return apps.get_app_config("shortcode_ui")
