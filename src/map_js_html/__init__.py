"""map_js_html — serialize mappings into JavaScript statements safe inside HTML ``<script>``."""

from .beautify import beautify
from .classify import Classifier, ValueKind, classify_type, render_number
from .config import (
    EmitOptions,
    IndentSpec,
    IndentUnit,
    MissingKeyPolicy,
    NewlinePolicy,
    ValueStyle,
)
from .emitter import Emitter
from .errors import MapJsHtmlError, MissingKeyError
from .escape import (
    escape_newlines,
    escape_quote,
    escape_script_close_tag,
    escape_text,
    quote_text,
)
from .script_map import (
    JsonScriptMap,
    ScriptMap,
    text_to_script,
    to_script,
    to_script_with_keys,
)
from .sink import BufferSink, WriterSink
from .values import render_json_value

__all__ = [
    "ScriptMap",
    "JsonScriptMap",
    "to_script",
    "to_script_with_keys",
    "text_to_script",
    "Emitter",
    "beautify",
    "BufferSink",
    "WriterSink",
    "EmitOptions",
    "IndentSpec",
    "IndentUnit",
    "MissingKeyPolicy",
    "NewlinePolicy",
    "ValueStyle",
    "Classifier",
    "ValueKind",
    "classify_type",
    "render_number",
    "render_json_value",
    "escape_quote",
    "escape_script_close_tag",
    "escape_newlines",
    "escape_text",
    "quote_text",
    "MapJsHtmlError",
    "MissingKeyError",
]
