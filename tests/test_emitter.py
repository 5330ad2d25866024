"""Tests for map_js_html.emitter."""

import io
import logging

import pytest

from map_js_html.config import (
    EmitOptions,
    IndentSpec,
    MissingKeyPolicy,
    NewlinePolicy,
    ValueStyle,
)
from map_js_html.emitter import Emitter
from map_js_html.errors import MissingKeyError
from map_js_html.sink import BufferSink, WriterSink


class FailingWriter:
    """Accepts *limit* writes, then raises OSError."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        if len(self.chunks) >= self.limit:
            raise OSError("disk full")
        self.chunks.append(data)
        return len(data)


def _emit_all(items, name="text", **kwargs) -> str:
    sink = BufferSink()
    Emitter(name, EmitOptions(**kwargs)).emit_all(items, sink)
    return sink.written().decode("utf-8")


def _emit_keys(lookup, keys, name="text", **kwargs) -> str:
    sink = BufferSink()
    Emitter(name, EmitOptions(**kwargs)).emit_keys(lookup, keys, sink)
    return sink.written().decode("utf-8")


# ---------------------------------------------------------------------------
# Full scan
# ---------------------------------------------------------------------------

class TestEmitAll:
    def test_single_text_entry(self):
        assert _emit_all([("test-1", "Test 1!")]) == "text['test-1']='Test 1!';"

    def test_numeric_key_and_value(self):
        assert _emit_all([(1, 2)], name="name") == "name[1]=2;"

    def test_numeric_key_text_value(self):
        assert _emit_all([(1, "Test 1'!")]) == r"text[1]='Test 1\'!';"

    def test_text_key_numeric_value(self):
        assert _emit_all([("test-1'", 2)]) == r"text['test-1\'']=2;"

    def test_bool_value_is_quoted(self):
        assert _emit_all([("flag", True)]) == "text['flag']='True';"

    def test_iteration_order_kept(self):
        items = [("b", "2"), ("a", "1")]
        assert _emit_all(items) == "text['b']='2';text['a']='1';"

    def test_empty(self):
        assert _emit_all([]) == ""

    def test_variable_name_not_escaped(self):
        assert _emit_all([("k", "v")], name="window['x']") == "window['x']['k']='v';"

    def test_offsets(self):
        sink = BufferSink()
        offsets = Emitter("t").emit_all([("a", 1), ("b", 2)], sink)
        assert offsets == [0, len("t['a']=1;")]

    def test_declared_types(self):
        sink = BufferSink()
        Emitter("t", key_type=str, value_type=str).emit_all([(1, 2)], sink)
        assert sink.written() == b"t['1']='2';"

    def test_beautified(self):
        out = _emit_all([("a", "1"), ("b", 2)], indent=IndentSpec.spaces(2))
        assert out == "  text['a'] = '1';\n  text['b'] = 2;"

    def test_newline_escape(self):
        assert _emit_all([("k", "a\nb")]) == r"text['k']='a\nb';"

    def test_newline_strip(self):
        assert _emit_all([("k", "a\nb")], newlines=NewlinePolicy.STRIP) == "text['k']='ab';"

    def test_json_values(self):
        items = [("a", None), ("b", [1, 2]), ("c", "x")]
        out = _emit_all(items, values=ValueStyle.JSON)
        assert out == "text['a']=null;text['b']=[1,2];text['c']='x';"


# ---------------------------------------------------------------------------
# Keyed scan
# ---------------------------------------------------------------------------

class TestEmitKeys:
    def test_request_order(self):
        text = {"hello": "Hello world!", "welcome": "Welcome to my website."}
        assert (
            _emit_keys(text, ["welcome", "hello"], name="_text")
            == "_text['welcome']='Welcome to my website.';_text['hello']='Hello world!';"
        )

    def test_missing_key_is_undefined(self):
        assert _emit_keys({"test-1": "x"}, ["test-3"]) == "text['test-3']=undefined;"

    def test_missing_key_beautified(self):
        out = _emit_keys({}, ["k"], indent=IndentSpec.spaces(0))
        assert out == "text['k'] = undefined;"

    def test_repeated_keys(self):
        assert _emit_keys({"a": "1"}, ["a", "a"]) == "text['a']='1';text['a']='1';"

    def test_none_value_is_not_missing(self):
        assert _emit_keys({"a": None}, ["a"]) == "text['a']='None';"

    def test_offsets_include_sentinels(self):
        sink = BufferSink()
        offsets = Emitter("t").emit_keys({"a": 1}, ["a", "x", "a"], sink)
        assert len(offsets) == 3

    def test_raise_policy(self):
        with pytest.raises(MissingKeyError) as exc_info:
            _emit_keys({"test-1": "x"}, ["test-1", "test-3"], missing_keys=MissingKeyPolicy.RAISE)
        assert exc_info.value.key == "test-3"
        assert str(exc_info.value) == "`test-3` is not found."

    def test_raise_policy_writes_nothing(self):
        out = io.BytesIO()
        emitter = Emitter("t", EmitOptions(missing_keys=MissingKeyPolicy.RAISE))
        with pytest.raises(KeyError):
            emitter.emit_keys({"a": 1}, ["a", "b"], WriterSink(out))
        assert out.getvalue() == b""

    def test_raise_policy_all_present(self):
        out = _emit_keys({"a": "1"}, ["a"], missing_keys=MissingKeyPolicy.RAISE)
        assert out == "text['a']='1';"


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TestSinks:
    ITEMS = [("test-'3'", "Test '3'!"), ("script", "<script>alert('hi');</script>"), (7, 8.5)]

    @pytest.mark.parametrize("indent", [None, IndentSpec.spaces(4), IndentSpec.tabs(1)])
    def test_buffer_and_writer_agree(self, indent):
        options = EmitOptions(indent=indent)
        buffer_sink = BufferSink()
        Emitter("t", options).emit_all(self.ITEMS, buffer_sink)
        out = io.BytesIO()
        Emitter("t", options).emit_all(self.ITEMS, WriterSink(out))
        assert out.getvalue() == buffer_sink.written()

    def test_keyed_buffer_and_writer_agree(self):
        options = EmitOptions(indent=IndentSpec.spaces(2))
        lookup = dict(self.ITEMS)
        keys = ["script", "missing", 7]
        buffer_sink = BufferSink()
        Emitter("t", options).emit_keys(lookup, keys, buffer_sink)
        out = io.BytesIO()
        Emitter("t", options).emit_keys(lookup, keys, WriterSink(out))
        assert out.getvalue() == buffer_sink.written()

    def test_writer_failure_aborts_scan(self):
        writer = FailingWriter(limit=3)
        with pytest.raises(OSError, match="disk full"):
            Emitter("t").emit_all([("a", "1"), ("b", "2"), ("c", "3")], WriterSink(writer))
        # two writes per statement: head, then value
        assert b"".join(writer.chunks) == b"t['a']='1';t['b']="


def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="map_js_html.emitter")
    _emit_keys({"a": "1"}, ["a", "b"])
    assert "1 of 2 keys absent" in caplog.text
    assert "Emitted 2 keyed statements for text" in caplog.text
