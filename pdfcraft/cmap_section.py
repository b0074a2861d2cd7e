"""Sections of a ToUnicode CMap.

Source codes are integers with a byte length; targets are lists of
UTF-16 code units.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class CsRange:
    """Code space ranges: ``(low, high, code_length)`` tuples."""

    ranges: list = field(default_factory=list)


@dataclass
class BfChar:
    """Single mappings: ``((code, code_length), utf16_units)`` tuples."""

    mappings: list = field(default_factory=list)


@dataclass
class BfRange:
    """Range mappings: ``((low, high, code_length), [utf16_units, ...])`` tuples."""

    mappings: list = field(default_factory=list)


class CMapParseErrorKind(Enum):
    INCOMPLETE = "incomplete"
    ERROR = "error"


class CMapParseError(Exception):
    """A CMap could not be parsed."""

    def __init__(self, kind=CMapParseErrorKind.ERROR):
        self.kind = kind
        super().__init__(f"cmap parse error: {kind.value}")

    @property
    def incomplete(self):
        return self.kind is CMapParseErrorKind.INCOMPLETE