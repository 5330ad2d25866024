"""Tests for map_js_html.values."""

from map_js_html.config import NewlinePolicy
from map_js_html.values import render_json_value


def test_null():
    assert render_json_value(None) == "null"


def test_booleans():
    assert render_json_value(True) == "true"
    assert render_json_value(False) == "false"


def test_numbers():
    assert render_json_value(3) == "3"
    assert render_json_value(2.5) == "2.5"


def test_string_is_quoted_and_escaped():
    assert render_json_value("it's</script>") == r"'it\'s<\/script>'"


def test_string_newline_policy():
    assert render_json_value("a\nb", NewlinePolicy.STRIP) == "'ab'"


def test_array_is_compact():
    assert render_json_value([1, 2, 3]) == "[1,2,3]"


def test_object_is_compact():
    assert render_json_value({"a": 1, "b": [True, None]}) == '{"a":1,"b":[true,null]}'


def test_nested_close_tag_escaped():
    assert render_json_value({"x": "</script>"}) == r'{"x":"<\/script>"}'


def test_nested_quotes_untouched():
    assert render_json_value(["it's"]) == '["it\'s"]'


def test_non_ascii_kept():
    assert render_json_value(["中文"]) == '["中文"]'


def test_tuple_as_array():
    assert render_json_value((1, "a")) == '[1,"a"]'
