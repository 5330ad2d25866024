"""ScriptMap — public entry points for turning a mapping into ``<script>`` code.

Usage::

    text = {"hello": "Hello world!", "welcome": "Welcome to my website."}
    ScriptMap(text).to_script_with_keys("_text", ["welcome", "hello"])
    # → "_text['welcome']='Welcome to my website.';_text['hello']='Hello world!';"

The template is expected to declare the variable itself, e.g.
``<script>var _text = {}; {{ text }}</script>``.  The variable name is copied
into the output as is; callers must make sure it is safe.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import IO, Any

from .config import EmitOptions, IndentSpec, NewlinePolicy, ValueStyle
from .emitter import Emitter
from .escape import quote_text
from .sink import BufferSink, WriterSink


class ScriptMap:
    """Wraps a mapping and renders it as JavaScript assignment statements.

    Any mapping works: iteration order of ``items()`` decides the order of
    :meth:`to_script`, lookups back :meth:`to_script_with_keys`.

    *key_type* / *value_type* fix the numeric-vs-text decision for all
    entries (like a typed container would); by default it follows each
    entry's runtime type.
    """

    def __init__(
        self,
        source: Mapping[Any, Any],
        key_type: type | None = None,
        value_type: type | None = None,
        values: ValueStyle = ValueStyle.DISPLAY,
    ) -> None:
        self.source = source
        self.key_type = key_type
        self.value_type = value_type
        self.values = values

    def __len__(self) -> int:
        return len(self.source)

    # -- Full scan ------------------------------------------------------

    def to_script(self, variable_name: object, indent: IndentSpec | None = None, **options: Any) -> str:
        """All entries, minified unless *indent* is given."""
        return self.to_script_to_buffer(variable_name, bytearray(), indent, **options).decode("utf-8")

    def to_script_to_buffer(
        self,
        variable_name: object,
        buffer: bytearray,
        indent: IndentSpec | None = None,
        **options: Any,
    ) -> bytes:
        """Append all entries to *buffer*; returns the bytes written by this call."""
        sink = BufferSink(buffer)
        self._emitter(variable_name, indent, options).emit_all(self.source.items(), sink)
        return sink.written()

    def to_script_to_writer(
        self,
        variable_name: object,
        writer: IO[bytes] | IO[str],
        indent: IndentSpec | None = None,
        **options: Any,
    ) -> None:
        """Write all entries to *writer*; writer errors propagate."""
        self._emitter(variable_name, indent, options).emit_all(self.source.items(), WriterSink(writer))

    # -- Keyed scan -----------------------------------------------------

    def to_script_with_keys(
        self,
        variable_name: object,
        keys: Iterable[Any],
        indent: IndentSpec | None = None,
        **options: Any,
    ) -> str:
        """One statement per key in *keys*; absent keys become ``undefined``."""
        return self.to_script_with_keys_to_buffer(
            variable_name, keys, bytearray(), indent, **options
        ).decode("utf-8")

    def to_script_with_keys_to_buffer(
        self,
        variable_name: object,
        keys: Iterable[Any],
        buffer: bytearray,
        indent: IndentSpec | None = None,
        **options: Any,
    ) -> bytes:
        sink = BufferSink(buffer)
        self._emitter(variable_name, indent, options).emit_keys(self.source, keys, sink)
        return sink.written()

    def to_script_with_keys_to_writer(
        self,
        variable_name: object,
        keys: Iterable[Any],
        writer: IO[bytes] | IO[str],
        indent: IndentSpec | None = None,
        **options: Any,
    ) -> None:
        self._emitter(variable_name, indent, options).emit_keys(self.source, keys, WriterSink(writer))

    # -- Internals ------------------------------------------------------

    def _emitter(self, variable_name: object, indent: IndentSpec | None, options: dict[str, Any]) -> Emitter:
        options.setdefault("values", self.values)
        opts = EmitOptions(indent=indent, **options)
        return Emitter(variable_name, opts, key_type=self.key_type, value_type=self.value_type)


class JsonScriptMap(ScriptMap):
    """ScriptMap over a decoded JSON object: nested values render as literals."""

    def __init__(self, source: Mapping[str, Any]) -> None:
        super().__init__(source, values=ValueStyle.JSON)


# ---------------------------------------------------------------------------
# One-shot helpers
# ---------------------------------------------------------------------------

def to_script(source: Mapping[Any, Any], variable_name: object, indent: IndentSpec | None = None, **options: Any) -> str:
    return ScriptMap(source).to_script(variable_name, indent, **options)


def to_script_with_keys(
    source: Mapping[Any, Any],
    variable_name: object,
    keys: Iterable[Any],
    indent: IndentSpec | None = None,
    **options: Any,
) -> str:
    return ScriptMap(source).to_script_with_keys(variable_name, keys, indent, **options)


def text_to_script(text: object, newlines: NewlinePolicy = NewlinePolicy.ESCAPE) -> str:
    """A single value as a quoted JavaScript string, safe inside ``<script>``."""
    return quote_text(str(text), newlines)
