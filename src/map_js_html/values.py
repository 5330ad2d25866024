"""Rendering of JSON-model values as bare JavaScript expressions."""

from __future__ import annotations

import json
from typing import Any

from .classify import render_number
from .config import NewlinePolicy
from .escape import escape_script_close_tag, quote_text


def render_json_value(value: Any, policy: NewlinePolicy = NewlinePolicy.ESCAPE) -> str:
    """Render one JSON value as JavaScript source.

    - ``None`` → ``null``; booleans → ``true`` / ``false``
    - numbers → bare decimal text
    - strings → single-quoted and escaped like any other text
    - objects / arrays → compact JSON with only ``</script>`` escaped, since
      the result is a bare literal rather than a quoted string
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return render_number(value)
    if isinstance(value, str):
        return quote_text(value, policy)
    if isinstance(value, (dict, list, tuple)):
        return escape_script_close_tag(_compact_json(value))
    # Anything outside the JSON model is treated as text
    return quote_text(str(value), policy)


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
