"""
Conversion of TOML document values into JSON-compatible values.

The result is built from str, int, float, bool, None, list and dict only,
so it can be handed to json.dumps directly. Datetime-like values become
their TOML textual form. Non-finite floats, which JSON cannot express,
follow a NonFinitePolicy:

- "error": raise ConversionError naming the value's key path
- "null": encode as null
- "string": encode as the TOML spelling ("nan", "inf", "-inf")
"""

from __future__ import annotations

import datetime as _datetime
import math as _math
import re as _re
import typing as _typing

import tomlmerge.errors as errors
import tomlmerge.values as values

NonFinitePolicy: _typing.TypeAlias = _typing.Literal["error", "null", "string"]

NON_FINITE_POLICIES: tuple[str, ...] = _typing.get_args(NonFinitePolicy)

JsonValue: _typing.TypeAlias = _typing.Any

# isoformat() pads microseconds to six digits: ".500000" -> ".5"
_FRACTION_ZEROS_RE = _re.compile(r"(\.\d*?[1-9])0+(?!\d)")


def format_datetime(value: _datetime.datetime | _datetime.date | _datetime.time) -> str:
    """
    Render a datetime-like value as TOML writes it.

    A UTC offset is written as "Z"; other offsets, local date-times,
    local dates and local times use their RFC 3339 form. Fractional
    seconds carry no trailing zeros.

    Example:
        >>> format_datetime(_datetime.datetime(1979, 5, 27, 7, 32, tzinfo=_datetime.timezone.utc))
        '1979-05-27T07:32:00Z'
        >>> format_datetime(_datetime.time(7, 32, 0, 500000))
        '07:32:00.5'
        >>> format_datetime(_datetime.date(1979, 5, 27))
        '1979-05-27'
    """
    text = _FRACTION_ZEROS_RE.sub(r"\1", value.isoformat(), count=1)
    if isinstance(value, _datetime.datetime):
        return text.replace("+00:00", "Z")
    return text


def _format_non_finite(value: float) -> str:
    if _math.isnan(value):
        return "nan"
    return "inf" if value > 0 else "-inf"


def to_json_value(
    value: values.Value,
    *,
    non_finite: NonFinitePolicy = "error",
    path: values.Path = (),
) -> JsonValue:
    """
    Convert a document value into a JSON-compatible value.

    Args:
        value: The document value to convert. Not modified.
        non_finite: How to handle NaN and infinite floats.
        path: Key path of value within its document, used in errors.

    Returns:
        A new tree of JSON-compatible values.

    Raises:
        ConversionError: If a float is non-finite and non_finite is "error".
        TypeError: If value is not a document value.
    """
    kind = values.kind_of(value)

    if kind is values.ValueKind.STRING:
        return value
    if kind is values.ValueKind.INTEGER:
        return value
    if kind is values.ValueKind.BOOLEAN:
        return value
    if kind is values.ValueKind.FLOAT:
        if _math.isfinite(value):
            return value
        if non_finite == "null":
            return None
        if non_finite == "string":
            return _format_non_finite(value)
        raise errors.ConversionError(
            path,
            f"{_format_non_finite(value)} has no JSON representation",
        )
    if kind is values.ValueKind.DATETIME:
        return format_datetime(value)
    if kind is values.ValueKind.SEQUENCE:
        return [
            to_json_value(item, non_finite=non_finite, path=path + (index,))
            for index, item in enumerate(value)
        ]
    if kind is values.ValueKind.MAPPING:
        return {
            key: to_json_value(item, non_finite=non_finite, path=path + (key,))
            for key, item in value.items()
        }
    raise TypeError(f"Unhandled value kind: {kind}")
