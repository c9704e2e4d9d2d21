"""
Exceptions raised while loading, parsing and converting documents.

All of them derive from TomlMergeError so the CLI can report any of them
the same way.
"""

from __future__ import annotations

import pathlib as _pathlib

import tomlmerge.values as values


class TomlMergeError(Exception):
    """Base class for tomlmerge errors."""

    pass


class DocumentLoadError(TomlMergeError):
    """An input file could not be read."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error reading {path}: {message}")


class DocumentParseError(TomlMergeError):
    """An input file is not a TOML table."""

    def __init__(
        self,
        path: _pathlib.Path,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.path = path
        self.line = line
        self.column = column
        location = str(path)
        if line is not None:
            location += f":{line}"
            if column is not None:
                location += f":{column}"
        super().__init__(f"Expected TOML table in {location}: {message}")


class ConversionError(TomlMergeError):
    """A value has no representation in the output format."""

    def __init__(self, path: values.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot convert {values.format_path(path)}: {message}")
