"""Enumerations for checkreport type-safe constants.

Uses StrEnum so members compare equal to the type-checker's own wire
spellings ("Blame", "LibFile", ...). Decoding a report is then a plain
``UnitType(value)`` call.

Python 3.11+.
"""

from enum import StrEnum

__all__ = [
    "LocationKind",
    "UnitType",
]


class UnitType(StrEnum):
    """Kind of message unit.

    StrEnum provides automatic string conversion: str(UnitType.ANCHORED) == "Blame"
    """

    ANCHORED = "Blame"
    """Unit pointing at (or expected to point at) a source location."""

    COMMENT = "Comment"
    """Free text with no location, folded into the preceding anchored unit."""


class LocationKind(StrEnum):
    """Kind of file a source location refers to."""

    LIB_FILE = "LibFile"
    """Library definition file."""

    SOURCE_FILE = "SourceFile"
    """Checked project source file."""

    JSON_FILE = "JsonFile"
    """JSON module."""

    BUILTIN = "Builtin"
    """Synthetic location inside the checker's builtins."""
