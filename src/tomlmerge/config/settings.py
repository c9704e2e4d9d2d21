"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence, used for CLI flags)
2. Environment variables with TOMLMERGE_ prefix
3. .env file named by TOMLMERGE_ENV_FILE (if present)
4. Field defaults (lowest)

Examples:
  TOMLMERGE_JSON_OUT=1
  TOMLMERGE_NON_FINITE=null
  TOMLMERGE_LOG_LEVEL=DEBUG
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import tomlmerge.convert as convert
import tomlmerge.render as render


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only TOMLMERGE_ENV_FILE is honoured. A .env in the working directory is
    ignored so that merging files inside some project never picks up that
    project's environment.
    """
    if env_file := _os.environ.get("TOMLMERGE_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    tomlmerge configuration settings.

    All settings can be overridden via environment variables with the
    TOMLMERGE_ prefix. Command-line flags take precedence over both.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="TOMLMERGE_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    json_out: bool = _pydantic.Field(
        default=False,
        description="Render JSON instead of TOML",
    )

    non_finite: convert.NonFinitePolicy = _pydantic.Field(
        default="error",
        description="How NaN and infinite floats are written in JSON output",
    )

    log_level: str = _pydantic.Field(
        default="WARNING",
        description="Logging level for diagnostics on stderr",
    )

    @_pydantic.field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(_logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    @property
    def output_format(self) -> render.OutputFormat:
        """The output format selected by json_out."""
        return "json" if self.json_out else "toml"

    @property
    def log_level_number(self) -> int:
        """log_level as a logging module constant."""
        level: int = _logging.getLevelName(self.log_level)
        return level
