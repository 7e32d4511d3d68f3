def test_encoded_attribute_is_decoded(engine, registry):
    registry.register("echo", {"attrs": [{"attr": "value", "type": "text", "encode": True}]})

    assert engine.do_shortcode('[echo value="hello%20world"]') == "hello world"


def test_attribute_without_encode_passes_through(engine, registry):
    registry.register("echo", {"attrs": [{"attr": "value", "type": "text"}]})

    assert engine.do_shortcode('[echo value="hello%20world"]') == "hello%20world"


def test_field_type_default_encode_applies(engine, registry):
    registry.register("echo", {"attrs": [{"attr": "value", "type": "code"}]})

    assert engine.do_shortcode('[echo value="%5Bb%5D%22x%22"]') == '[b]"x"'


def test_attribute_encode_overrides_field_type(engine, registry):
    registry.register("echo", {"attrs": [{"attr": "value", "type": "code", "encode": False}]})

    assert engine.do_shortcode('[echo value="a%20b"]') == "a%20b"


def test_unknown_field_type_does_not_decode(engine, registry):
    registry.register("echo", {"attrs": [{"attr": "value", "type": "no-such-field"}]})

    assert engine.do_shortcode('[echo value="a%20b"]') == "a%20b"


def test_plus_is_not_a_space(engine, registry):
    registry.register("echo", {"attrs": [{"attr": "value", "type": "text", "encode": True}]})

    assert engine.do_shortcode('[echo value="1+1%3D2"]') == "1+1=2"


def test_unregistered_tag_is_untouched(registry):
    out = registry.decode_encoded_attributes({"value": "a%20b"}, {"value": ""}, {}, "missing")

    assert out == {"value": "a%20b"}


def test_absent_attribute_is_left_alone(registry):
    registry.register("echo", {"attrs": [{"attr": "other", "type": "text", "encode": True}]})

    out = registry.decode_encoded_attributes({"value": "a%20b"}, {"value": ""}, {}, "echo")

    assert out == {"value": "a%20b"}


def test_reregistering_installs_filter_once(engine, registry):
    registry.register("echo", {"attrs": [{"attr": "value", "type": "text", "encode": True}]})
    registry.register("echo", {"attrs": [{"attr": "value", "type": "text", "encode": True}]})

    # decoding twice would turn %2520 into a space
    assert engine.do_shortcode('[echo value="%2520"]') == "%20"
