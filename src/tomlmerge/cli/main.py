"""
Main CLI entry point for tomlmerge.

Provides the command-line interface using Click.

    tomlmerge [OPTIONS] [FILE]...

Files are merged in the order given, so later files take precedence.
The merged document is written to stdout as TOML, or as one line of JSON
with --json-out. Nothing is written to stdout if any file fails.
"""

import logging as _logging
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic

import tomlmerge
import tomlmerge.config as config
import tomlmerge.convert as convert
import tomlmerge.errors as errors
import tomlmerge.loader as loader
import tomlmerge.merge as merge
import tomlmerge.render as render

_logger = _logging.getLogger(__name__)

CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

# Handler installed by the most recent invocation
_log_handler: _logging.Handler | None = None


def _configure_logging(level: int) -> None:
    """Send tomlmerge's log records to the current stderr at the given level."""
    global _log_handler

    package_logger = _logging.getLogger("tomlmerge")
    if _log_handler is not None:
        package_logger.removeHandler(_log_handler)

    _log_handler = _logging.StreamHandler(_sys.stderr)
    _log_handler.setFormatter(_logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(_log_handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def _load_settings(**overrides: _typing.Any) -> config.Settings:
    """Build Settings, exiting with a diagnostic if the environment is invalid."""
    try:
        return config.Settings(**overrides)
    except _pydantic.ValidationError as e:
        _click.echo(f"Invalid configuration: {e}", err=True)
        raise SystemExit(1) from None


@_click.command(context_settings=CONTEXT_SETTINGS)
@_click.version_option(tomlmerge.__version__, "-V", "--version", prog_name="tomlmerge")
@_click.option(
    "-j",
    "--json-out",
    "json_out",
    is_flag=True,
    help="Output as JSON",
)
@_click.option(
    "--non-finite",
    type=_click.Choice(convert.NON_FINITE_POLICIES),
    default=None,
    help="How NaN and infinite floats are written in JSON output (default: error)",
)
@_click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log progress to stderr",
)
@_click.argument(
    "files",
    metavar="FILE...",
    nargs=-1,
    type=_click.Path(path_type=_pathlib.Path),
)
def cli(
    json_out: bool,
    non_finite: str | None,
    verbose: bool,
    files: tuple[_pathlib.Path, ...],
) -> None:
    """Merge TOML files. Later files take precedence over earlier ones."""
    overrides: dict[str, _typing.Any] = {}
    if json_out:
        overrides["json_out"] = True
    if non_finite is not None:
        overrides["non_finite"] = non_finite
    if verbose:
        overrides["log_level"] = "DEBUG"

    settings = _load_settings(**overrides)
    _configure_logging(settings.log_level_number)

    try:
        documents = loader.load_documents(files)
        merged = merge.fold(documents)
        _logger.debug("Rendering %s output", settings.output_format)
        text = render.render(
            merged,
            settings.output_format,
            non_finite=settings.non_finite,
        )
    except errors.TomlMergeError as e:
        _click.echo(str(e), err=True)
        raise SystemExit(1) from None

    _click.echo(text)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="tomlmerge")


if __name__ == "__main__":
    main()
