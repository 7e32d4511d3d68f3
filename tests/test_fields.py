from shortcode_ui.fields import DEFAULT_FIELDS, FieldTypeRegistry


def test_builtin_fields_do_not_encode():
    fields = FieldTypeRegistry()

    for type_id in DEFAULT_FIELDS:
        assert type_id in fields
        assert fields.default_encode(type_id) is False


def test_unknown_field_falls_back():
    fields = FieldTypeRegistry()

    assert fields.get("nope") == {"encode": False}
    assert fields.default_encode("nope") is False


def test_custom_fields_override_builtins():
    fields = FieldTypeRegistry({"textarea": {"encode": True}, "code": {"encode": 1, "template": "t"}})

    assert fields.default_encode("textarea") is True
    assert fields.get("code") == {"encode": True, "template": "t"}


def test_get_returns_a_copy():
    fields = FieldTypeRegistry()
    fields.get("text")["encode"] = True

    assert fields.default_encode("text") is False


def test_register_adds_a_field_type():
    fields = FieldTypeRegistry()
    assert "markdown" not in fields

    fields.register("markdown", encode=True, template="shortcode-ui-field-markdown")

    assert "markdown" in fields
    assert fields.get("markdown") == {"encode": True, "template": "shortcode-ui-field-markdown"}
