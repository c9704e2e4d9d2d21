"""
Loading TOML documents from disk.

Each file is read in full and closed before it is parsed. Problems are
reported as DocumentLoadError (the file could not be read) or
DocumentParseError (the file is not a TOML table), both naming the file.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import pathlib as _pathlib
import re as _re
import tomllib as _tomllib

import tomlmerge.errors as errors
import tomlmerge.values as values

_logger = _logging.getLogger(__name__)

# tomllib appends the position to its messages: "... (at line 3, column 7)"
_POSITION_RE = _re.compile(r"\s*\(at line (\d+), column (\d+)\)$")


def _split_decode_error(error: _tomllib.TOMLDecodeError) -> tuple[str, int | None, int | None]:
    """Extract (message, line, column) from a TOMLDecodeError."""
    message = str(error)
    match = _POSITION_RE.search(message)
    if match is None:
        return message, None, None
    return message[: match.start()], int(match.group(1)), int(match.group(2))


def parse_document(content: str, path: _pathlib.Path) -> values.Table:
    """
    Parse TOML text into a table.

    Args:
        content: TOML source text.
        path: File the text came from, used in errors.

    Returns:
        The parsed top-level table.

    Raises:
        DocumentParseError: If content is not valid TOML or its top level
            is not a table.
    """
    try:
        parsed = _tomllib.loads(content)
    except _tomllib.TOMLDecodeError as e:
        message, line, column = _split_decode_error(e)
        raise errors.DocumentParseError(path, message, line=line, column=column) from e

    # Top level is always a table
    if not isinstance(parsed, dict):
        raise errors.DocumentParseError(
            path,
            f"top level must be a table, got {type(parsed).__name__}",
        )

    return parsed


def load_document(path: _pathlib.Path) -> values.Table:
    """
    Read and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        The parsed top-level table.

    Raises:
        DocumentLoadError: If the file cannot be read.
        DocumentParseError: If the file is not UTF-8 TOML with a table at
            the top level.
    """
    try:
        raw = path.read_bytes()
    except PermissionError as e:
        raise errors.DocumentLoadError(path, f"permission denied: {e.strerror}") from e
    except FileNotFoundError as e:
        raise errors.DocumentLoadError(path, "no such file") from e
    except OSError as e:
        raise errors.DocumentLoadError(path, f"cannot read file: {e.strerror or e}") from e

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise errors.DocumentParseError(path, f"not valid UTF-8: {e.reason}") from e

    document = parse_document(content, path)
    _logger.debug("Loaded %s (%d bytes, %d top-level keys)", path, len(raw), len(document))
    return document


def load_documents(paths: _abc.Iterable[_pathlib.Path]) -> list[values.Table]:
    """
    Load several TOML files, strictly in the given order.

    Every file is loaded before any result is returned, so a failure on a
    later file means no document is used.

    Raises:
        DocumentLoadError: If any file cannot be read.
        DocumentParseError: If any file is not a TOML table.
    """
    return [load_document(path) for path in paths]
