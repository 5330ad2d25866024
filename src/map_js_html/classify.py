"""Numeric-vs-text classification of keys and values."""

from __future__ import annotations

import math
from enum import Enum, auto


class ValueKind(Enum):
    NUMBER = auto()   # rendered bare
    TEXT = auto()     # rendered quoted and escaped


def classify_type(tp: type) -> ValueKind:
    """Classify a type; ``bool`` is text even though it subclasses ``int``."""
    if issubclass(tp, bool):
        return ValueKind.TEXT
    if issubclass(tp, (int, float)):
        return ValueKind.NUMBER
    return ValueKind.TEXT


class Classifier:
    """Per-call classifier that looks at each distinct type only once.

    When *declared* is given it decides the kind for every object, except
    that a declared numeric type only applies to objects that really are
    numbers; anything else falls back to text and gets quoted and escaped.
    """

    def __init__(self, declared: type | None = None) -> None:
        self._declared = declared
        self._declared_kind = classify_type(declared) if declared is not None else None
        self._cache: dict[type, ValueKind] = {}

    def kind_of(self, obj: object) -> ValueKind:
        if self._declared_kind is ValueKind.TEXT:
            return ValueKind.TEXT
        tp = type(obj)
        kind = self._cache.get(tp)
        if kind is None:
            kind = self._cache[tp] = classify_type(tp)
        return kind

    def is_number(self, obj: object) -> bool:
        return self.kind_of(obj) is ValueKind.NUMBER


def render_number(value: int | float) -> str:
    """Decimal text for a number, with JavaScript names for non-finite floats."""
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    return str(value)
