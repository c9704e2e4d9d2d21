"""
Recursive merge of TOML documents.

Documents are folded left to right into a single accumulator table.
Later documents take precedence:

- Scalars always replace whatever the accumulator holds.
- Sequences merge element-wise by index when both sides are sequences.
  Extra accumulator elements are kept, extra incoming elements are appended.
- Tables merge key-wise when both sides are tables. Keys only in the
  accumulator are kept.
- A sequence meeting a table (or either meeting a scalar) is replaced
  wholesale by the incoming value.

Example:
    >>> base = {"model": {"name": "llama", "size": "7b"}, "ports": [1, 2, 3]}
    >>> merge(base, {"model": {"size": "70b"}, "ports": [9]})
    >>> base
    {'model': {'name': 'llama', 'size': '70b'}, 'ports': [9, 2, 3]}

The accumulator is mutated in place. Incoming documents are never mutated;
anything taken from them is deep-copied, so the result shares no
containers with its inputs.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging

import tomlmerge.values as values

_logger = _logging.getLogger(__name__)


def merge(accumulator: values.Table, incoming: values.Table) -> None:
    """
    Overlay one table onto the accumulator, in place.

    Args:
        accumulator: The running merge result. Modified in place.
        incoming: The higher-precedence table to merge in. Not modified.
    """
    _merge_table(accumulator, incoming)


def merge_value(current: values.Value, incoming: values.Value) -> values.Value:
    """
    Merge one value onto another and return the value for that position.

    When current and incoming are the same compound kind, current is
    updated in place and returned. Otherwise a copy of incoming is returned
    and the caller stores it in place of current.

    Args:
        current: The value already at this position in the accumulator.
        incoming: The higher-precedence value.

    Returns:
        The value that now belongs at this position.

    Raises:
        TypeError: If incoming is not a document value.
    """
    kind = values.kind_of(incoming)

    # Scalars win outright. All scalar variants are immutable, so no copy.
    if kind.is_scalar:
        return incoming

    if kind is values.ValueKind.SEQUENCE:
        if isinstance(current, list):
            _merge_sequence(current, incoming)
            return current
        return _copy.deepcopy(incoming)

    if kind is values.ValueKind.MAPPING:
        if isinstance(current, dict):
            _merge_table(current, incoming)
            return current
        return _copy.deepcopy(incoming)

    raise TypeError(f"Unhandled value kind: {kind}")


def _merge_sequence(target: list[values.Value], incoming: list[values.Value]) -> None:
    """Merge incoming into target by index."""
    for index, value in enumerate(incoming):
        if index < len(target):
            target[index] = merge_value(target[index], value)
        else:
            target.append(_copy.deepcopy(value))


def _merge_table(target: values.Table, incoming: values.Table) -> None:
    """Merge incoming into target by key."""
    for key, value in incoming.items():
        if key in target:
            target[key] = merge_value(target[key], value)
        else:
            target[key] = _copy.deepcopy(value)


def fold(documents: _abc.Iterable[values.Table]) -> values.Table:
    """
    Merge documents in order into a fresh table.

    Args:
        documents: Tables in ascending precedence order (last wins).

    Returns:
        The merged table. Empty if there are no documents.
    """
    merged: values.Table = {}
    count = 0
    for document in documents:
        merge(merged, document)
        count += 1
        _logger.debug("Folded document %d (%d top-level keys)", count, len(document))
    _logger.debug("Merged %d document(s) into %d top-level keys", count, len(merged))
    return merged
