"""
Rendering merged documents as text.

Two output formats:
- "toml": the document in TOML syntax (tomli_w)
- "json": the document converted via tomlmerge.convert and written as
  compact, single-line JSON
"""

from __future__ import annotations

import json as _json
import typing as _typing

import tomli_w as _tomli_w

import tomlmerge.convert as convert
import tomlmerge.values as values

OutputFormat: _typing.TypeAlias = _typing.Literal["toml", "json"]


def render_toml(document: values.Table) -> str:
    """Render a table as TOML text, without a trailing newline."""
    return _tomli_w.dumps(document).rstrip("\n")


def render_json(
    document: values.Table,
    *,
    non_finite: convert.NonFinitePolicy = "error",
) -> str:
    """
    Render a table as a single line of JSON.

    Raises:
        ConversionError: If a non-finite float is found and non_finite
            is "error".
    """
    converted = convert.to_json_value(document, non_finite=non_finite)
    return _json.dumps(converted, ensure_ascii=False, allow_nan=False, separators=(",", ":"))


def render(
    document: values.Table,
    output_format: OutputFormat = "toml",
    *,
    non_finite: convert.NonFinitePolicy = "error",
) -> str:
    """
    Render a table in the requested format.

    Args:
        document: The merged document.
        output_format: "toml" or "json".
        non_finite: Non-finite float policy, used for JSON only.

    Returns:
        The rendered text, without a trailing newline.

    Raises:
        ConversionError: If JSON output cannot represent a value.
        ValueError: If output_format is unknown.
    """
    if output_format == "toml":
        return render_toml(document)
    if output_format == "json":
        return render_json(document, non_finite=non_finite)
    raise ValueError(f"Unknown output format: {output_format!r}")
