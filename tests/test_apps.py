import pytest
from django.core.exceptions import ImproperlyConfigured

from shortcode_ui.apps import _import, get_shortcode_ui
from tests import collaborators


def test_app_config_builds_engine_from_settings():
    app = get_shortcode_ui()

    assert app.engine.shortcode_exists("pullquote")
    assert app.engine.shortcode_exists("nothing")
    assert app.fields.default_encode("code") is True
    assert app.preview.engine is app.engine
    assert app.preview.registry is app.registry


def test_app_registry_uses_configured_callbacks():
    registry = get_shortcode_ui().registry
    shortcodes = registry.get_all()

    assert set(shortcodes) == {"pullquote", "note"}
    assert "internal_debug" in registry
    assert registry._register_callbacks == [collaborators.register_shortcode_ui]


def test_bad_dotted_path_is_a_configuration_error():
    with pytest.raises(ImproperlyConfigured):
        _import("tests.collaborators.missing", "SHORTCODE_UI_SHORTCODES")
