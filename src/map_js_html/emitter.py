"""Statement emission: full scan and keyed scan.

Every statement has the shape ``<name>[<key>]=<value>;`` (or ``<name>[<key>] = <value>;``
when beautifying).  The variable name is written verbatim; it is never escaped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .beautify import beautify
from .classify import Classifier, render_number
from .config import EmitOptions, MissingKeyPolicy, ValueStyle
from .errors import MissingKeyError
from .escape import quote_text
from .sink import BufferSink, Sink
from .values import render_json_value

logger = logging.getLogger(__name__)

_MISSING = object()


class Emitter:
    """Writes assignment statements for one variable into a sink.

    *key_type* / *value_type* pin the numeric-vs-text decision for every
    entry; left as ``None`` each runtime type is classified once per call.
    """

    def __init__(
        self,
        variable_name: object,
        options: EmitOptions | None = None,
        key_type: type | None = None,
        value_type: type | None = None,
    ) -> None:
        self.variable_name = str(variable_name)
        self.options = options or EmitOptions()
        self.key_type = key_type
        self.value_type = value_type

    # -- Public scans ---------------------------------------------------

    def emit_all(self, items: Iterable[tuple[Any, Any]], sink: Sink) -> list[int]:
        """One statement per ``(key, value)`` pair, in iteration order.

        Returns the start offset of every statement, relative to the sink.
        """
        keys, values = self._classifiers()

        def scan(target: Sink) -> list[int]:
            offsets: list[int] = []
            for key, value in items:
                offsets.append(target.position)
                self._write_head(target, key, keys)
                target.write(self._render_value(value, values).encode("utf-8"))
            return offsets

        offsets = self._run(scan, sink)
        logger.debug(f"Emitted {len(offsets)} statements for {self.variable_name}")
        return offsets

    def emit_keys(self, lookup: Mapping[Any, Any], request: Iterable[Any], sink: Sink) -> list[int]:
        """One statement per requested key, in request order.

        Absent keys become ``undefined`` or raise :class:`MissingKeyError`,
        depending on ``options.missing_keys``.  With ``RAISE`` every key is
        checked before anything reaches the sink.
        """
        request = list(request)
        if self.options.missing_keys is MissingKeyPolicy.RAISE:
            for key in request:
                if key not in lookup:
                    raise MissingKeyError(key)

        keys, values = self._classifiers()

        def scan(target: Sink) -> list[int]:
            offsets: list[int] = []
            missing = 0
            for key in request:
                offsets.append(target.position)
                self._write_head(target, key, keys)
                value = lookup.get(key, _MISSING)
                if value is _MISSING:
                    missing += 1
                    target.write(b"undefined;")
                else:
                    target.write(self._render_value(value, values).encode("utf-8"))
            if missing:
                logger.debug(f"{missing} of {len(request)} keys absent, emitted as undefined")
            return offsets

        offsets = self._run(scan, sink)
        logger.debug(f"Emitted {len(offsets)} keyed statements for {self.variable_name}")
        return offsets

    # -- Internals ------------------------------------------------------

    def _classifiers(self) -> tuple[Classifier, Classifier]:
        return Classifier(self.key_type), Classifier(self.value_type)

    def _run(self, scan, sink: Sink) -> list[int]:
        indent = self.options.indent
        if indent is None:
            return scan(sink)

        if isinstance(sink, BufferSink):
            offsets = scan(sink)
            # earlier buffer content is left untouched
            beautify(sink.buffer, offsets, indent, start=sink.start)
            return offsets

        # Writers cannot be edited after the fact: stage, retrofit, write once
        staging = BufferSink()
        offsets = scan(staging)
        beautify(staging.buffer, offsets, indent)
        sink.write(bytes(staging.buffer))
        return offsets

    def _write_head(self, sink: Sink, key: Any, keys: Classifier) -> None:
        if keys.is_number(key):
            rendered = render_number(key)
        else:
            rendered = quote_text(str(key), self.options.newlines)
        sink.write(f"{self.variable_name}[{rendered}]{self.options.separator}".encode("utf-8"))

    def _render_value(self, value: Any, values: Classifier) -> str:
        if self.options.values is ValueStyle.JSON:
            body = render_json_value(value, self.options.newlines)
        elif values.is_number(value):
            body = render_number(value)
        else:
            body = quote_text(str(value), self.options.newlines)
        return body + ";"
