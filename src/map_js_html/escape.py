"""Text transforms for single-quoted JavaScript strings inside ``<script>``.

Two grammars apply at once: the HTML tokenizer ends the script element at the
first ``</script>``, and the JavaScript parser ends the string at the first
unescaped ``'`` or raw line break.  Each transform here neutralises one of
those surfaces; :func:`escape_text` runs them in the only safe order.
"""

from __future__ import annotations

import re

from .config import NewlinePolicy

_UNESCAPED_QUOTE_RE = re.compile(r"(?<!\\)'")
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")

_SCRIPT_CLOSE_TAG = "</script>"


def escape_quote(text: str) -> str:
    r"""Put a backslash before every ``'`` that does not already follow one.

    A quote at position 0 has no preceding character and is always escaped.
    ``\'`` sequences already present in *text* are left alone.
    """
    return _UNESCAPED_QUOTE_RE.sub(r"\\'", text)


def escape_script_close_tag(text: str) -> str:
    """Turn every literal ``</script>`` into ``<\\/script>``.

    Matching is case-sensitive, left to right and non-overlapping.
    """
    parts: list[str] = []
    offset = 0
    while True:
        index = text.find(_SCRIPT_CLOSE_TAG, offset)
        if index < 0:
            break
        # keep the '<', insert the backslash before '/'
        parts.append(text[offset:index + 1])
        parts.append("\\")
        offset = index + 1
    if not parts:
        return text
    parts.append(text[offset:])
    return "".join(parts)


def escape_newlines(text: str, policy: NewlinePolicy = NewlinePolicy.ESCAPE) -> str:
    r"""Remove line breaks or rewrite them as the two characters ``\n``.

    ``\r\n`` and a lone ``\r`` count as one line break each.
    """
    if policy is NewlinePolicy.STRIP:
        return _NEWLINE_RE.sub("", text)
    return _NEWLINE_RE.sub(r"\\n", text)


def escape_text(text: str, policy: NewlinePolicy = NewlinePolicy.ESCAPE) -> str:
    """Apply quote, close-tag and newline escaping, in that order."""
    return escape_newlines(escape_script_close_tag(escape_quote(text)), policy)


def quote_text(text: str, policy: NewlinePolicy = NewlinePolicy.ESCAPE) -> str:
    """Escape *text* and wrap it in single quotes, ready for a ``<script>``."""
    return "'" + escape_text(text, policy) + "'"
