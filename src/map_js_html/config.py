"""Emission options: indentation, newline and missing-key policies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


# ---------------------------------------------------------------------------
# Indentation
# ---------------------------------------------------------------------------

class IndentUnit(Enum):
    SPACE = auto()
    TAB = auto()


_UNIT_CHARS: dict[IndentUnit, str] = {
    IndentUnit.SPACE: " ",
    IndentUnit.TAB: "\t",
}


@dataclass(frozen=True, slots=True)
class IndentSpec:
    """Indentation prefixed to every beautified statement.

    ``count`` copies of the unit character make up one indent; ``count = 0``
    is legal and only puts each statement on its own line.
    """

    unit: IndentUnit = IndentUnit.SPACE
    count: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.unit, IndentUnit):
            raise ValueError(f"indent unit must be an IndentUnit, got {self.unit!r}")
        if self.count < 0:
            raise ValueError(f"indent count must be >= 0, got {self.count}")

    @classmethod
    def spaces(cls, count: int) -> IndentSpec:
        return cls(IndentUnit.SPACE, count)

    @classmethod
    def tabs(cls, count: int) -> IndentSpec:
        return cls(IndentUnit.TAB, count)

    @property
    def text(self) -> str:
        return _UNIT_CHARS[self.unit] * self.count


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------

class NewlinePolicy(Enum):
    ESCAPE = auto()   # newline → \n
    STRIP = auto()    # newline removed


class MissingKeyPolicy(Enum):
    UNDEFINED = auto()   # name['k']=undefined;
    RAISE = auto()       # MissingKeyError, no output


class ValueStyle(Enum):
    DISPLAY = auto()   # str(value), numeric types bare
    JSON = auto()      # null / booleans / numbers / compact containers bare


@dataclass(frozen=True, slots=True)
class EmitOptions:
    """Everything that shapes one emission call besides the data itself."""

    indent: IndentSpec | None = None
    newlines: NewlinePolicy = NewlinePolicy.ESCAPE
    missing_keys: MissingKeyPolicy = MissingKeyPolicy.UNDEFINED
    values: ValueStyle = ValueStyle.DISPLAY

    @property
    def beautify(self) -> bool:
        return self.indent is not None

    @property
    def separator(self) -> str:
        return " = " if self.beautify else "="
