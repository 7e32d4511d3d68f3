import json

from django.http import QueryDict

from shortcode_ui.api.sanitizers import (
    MAX_POST_ID,
    parse_queries,
    sanitize_post_id,
    sanitize_queries,
    sanitize_shortcode,
    validate_queries,
)


def test_sanitize_shortcode_strips_slashes():
    assert sanitize_shortcode('[a title=\\"Hi\\"]') == '[a title="Hi"]'
    assert sanitize_shortcode("c:\\\\dir") == "c:\\dir"
    assert sanitize_shortcode("nul\\0") == "nul\0"
    assert sanitize_shortcode("trailing\\") == "trailing"
    assert sanitize_shortcode("[plain]") == "[plain]"


def test_sanitize_shortcode_non_string():
    assert sanitize_shortcode(None) == ""
    assert sanitize_shortcode(["[a]"]) == ""


def test_sanitize_post_id():
    assert sanitize_post_id("12") == 12
    assert sanitize_post_id(" 12abc") == 12
    assert sanitize_post_id("-5") == 5
    assert sanitize_post_id(-5) == 5
    assert sanitize_post_id(3.9) == 3
    assert sanitize_post_id("abc") == 0
    assert sanitize_post_id(None) == 0
    assert sanitize_post_id([1]) == 0


def test_sanitize_post_id_non_finite_float():
    assert sanitize_post_id(float("nan")) == 0
    assert sanitize_post_id(float("inf")) == 0
    assert sanitize_post_id(float("-inf")) == 0
    assert sanitize_post_id(json.loads("1e400")) == 0


def test_sanitize_post_id_saturates():
    assert sanitize_post_id("9" * 30) == MAX_POST_ID
    assert sanitize_post_id(-(10**30)) == MAX_POST_ID
    assert sanitize_post_id(1e30) == MAX_POST_ID
    assert sanitize_post_id(MAX_POST_ID) == MAX_POST_ID


def test_sanitize_queries_non_finite_counter():
    queries = json.loads('[{"counter": NaN, "shortcode": "[a]"}]')

    assert sanitize_queries(queries) == [{"counter": 0, "shortcode": "[a]"}]


def test_validate_queries():
    assert validate_queries([])
    assert validate_queries([{"counter": 1}])
    assert not validate_queries("[a]")
    assert not validate_queries({"counter": 1})
    assert not validate_queries(None)


def test_sanitize_queries():
    queries = [
        {"counter": "2", "shortcode": '[a x=\\"1\\"]'},
        {"counter": -1},
        "junk",
    ]

    assert sanitize_queries(queries) == [
        {"counter": 2, "shortcode": '[a x="1"]'},
        {"counter": 1, "shortcode": ""},
        {"counter": 0, "shortcode": ""},
    ]


def test_parse_queries_json():
    params = QueryDict(mutable=True)
    params["queries"] = '[{"counter": 1, "shortcode": "[a]"}]'

    assert parse_queries(params) == [{"counter": 1, "shortcode": "[a]"}]


def test_parse_queries_invalid_json_is_returned_raw():
    params = QueryDict(mutable=True)
    params["queries"] = "[a]"

    assert parse_queries(params) == "[a]"


def test_parse_queries_bracket_notation_orders_by_index():
    params = QueryDict(mutable=True)
    params["queries[10][counter]"] = "3"
    params["queries[10][shortcode]"] = "[c]"
    params["queries[2][shortcode]"] = "[b]"
    params["queries[2][counter]"] = "2"
    params["other[0][counter]"] = "9"

    assert parse_queries(params) == [
        {"counter": "2", "shortcode": "[b]"},
        {"counter": "3", "shortcode": "[c]"},
    ]


def test_parse_queries_missing():
    assert parse_queries(QueryDict("post_id=1")) is None
