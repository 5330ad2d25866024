"""Exceptions raised by map_js_html."""

from __future__ import annotations


class MapJsHtmlError(Exception):
    """Base class for all map_js_html errors."""


class MissingKeyError(MapJsHtmlError, KeyError):
    """A requested key is absent and the policy forbids the ``undefined`` sentinel."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"`{key}` is not found.")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.args[0]
