"""Retrofit line breaks and indentation into an emitted statement stream."""

from __future__ import annotations

from collections.abc import Sequence

from .config import IndentSpec


def beautify(
    buffer: bytearray,
    offsets: Sequence[int],
    indent: IndentSpec,
    start: int = 0,
) -> bytearray:
    """Insert ``\\n`` + indent before every statement but the first.

    *offsets* are statement start positions relative to *start*, in emission
    order.  The first statement only gets the indent.  Insertions run from
    the highest offset down so lower offsets stay valid; the buffer is never
    re-scanned, since escaped content may contain ``;`` of its own.
    """
    if not offsets:
        return buffer

    tab = indent.text.encode("ascii")
    line_break = b"\n" + tab
    for offset in reversed(offsets[1:]):
        at = start + offset
        buffer[at:at] = line_break
    at = start + offsets[0]
    buffer[at:at] = tab
    return buffer
