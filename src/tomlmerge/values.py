"""
Value model for parsed TOML documents.

A document value is one of a closed set of variants, represented by the
native Python types the TOML parser produces:

- Scalars: str, int, float, bool, datetime.datetime, datetime.date,
  datetime.time
- Compounds: list (sequence) and dict (table, insertion ordered)

kind_of() classifies a value into exactly one ValueKind. Anything outside
the variant set is a TypeError, so functions that branch over ValueKind
are total over real documents.
"""

from __future__ import annotations

import datetime as _datetime
import enum as _enum
import typing as _typing

# Key path from the document root to a value.
# Strings are table keys, ints are sequence indices.
# Example: ("servers", 0, "host") represents servers[0].host
Path: _typing.TypeAlias = tuple[str | int, ...]

Scalar: _typing.TypeAlias = (
    str | int | float | bool | _datetime.datetime | _datetime.date | _datetime.time
)

if _typing.TYPE_CHECKING:
    Value: _typing.TypeAlias = Scalar | list["Value"] | dict[str, "Value"]
else:
    # Runtime-safe fallback (mypy uses TYPE_CHECKING branch)
    Value: _typing.TypeAlias = _typing.Any

Table: _typing.TypeAlias = dict[str, Value]


class ValueKind(_enum.Enum):
    """The variants a document value can take."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    SEQUENCE = "sequence"
    MAPPING = "mapping"

    @property
    def is_scalar(self) -> bool:
        """True for every variant that is not a sequence or mapping."""
        return self not in (ValueKind.SEQUENCE, ValueKind.MAPPING)


def kind_of(value: _typing.Any) -> ValueKind:
    """
    Classify a value into its ValueKind.

    bool is checked before int (bool subclasses int), and all three
    datetime-like types share the DATETIME variant.

    Raises:
        TypeError: If value is not a document value.
    """
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (_datetime.datetime, _datetime.date, _datetime.time)):
        return ValueKind.DATETIME
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Not a document value: {type(value).__name__}")


def format_path(path: Path) -> str:
    """
    Render a key path the way a reader would write it.

    Example:
        >>> format_path(("servers", 0, "host"))
        'servers[0].host'
        >>> format_path(())
        '<root>'
    """
    if not path:
        return "<root>"
    parts: list[str] = []
    for element in path:
        if isinstance(element, int):
            parts.append(f"[{element}]")
        elif parts:
            parts.append(f".{element}")
        else:
            parts.append(element)
    return "".join(parts)
