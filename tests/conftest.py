"""
Shared pytest fixtures for tomlmerge tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing
import unittest.mock as _mock

import click.testing as _click_testing
import pytest as _pytest

import tomlmerge.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "TOMLMERGE_JSON_OUT",
    "TOMLMERGE_NON_FINITE",
    "TOMLMERGE_LOG_LEVEL",
    "TOMLMERGE_ENV_FILE",
]


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with test-related keys removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture
def isolated_env(clean_env: dict[str, str]):
    """
    Context manager that isolates tests from environment variables.

    Usage:
        def test_something(isolated_env):
            with isolated_env:
                settings = config.Settings.construct_without_dotenv()
    """
    return _mock.patch.dict(_os.environ, clean_env, clear=True)


@_pytest.fixture
def clean_settings(isolated_env) -> config.Settings:
    """Settings instance isolated from environment and .env file."""
    with isolated_env:
        return config.Settings.construct_without_dotenv()


@_pytest.fixture
def runner(clean_env: dict[str, str]) -> _click_testing.CliRunner:
    """CliRunner whose environment has no TOMLMERGE_ settings."""
    env: dict[str, str | None] = dict(clean_env)
    for key in ENV_KEYS_TO_CLEAR:
        env[key] = None
    return _click_testing.CliRunner(env=env)


@_pytest.fixture
def write_toml(tmp_path: _pathlib.Path) -> _typing.Callable[[str, str], _pathlib.Path]:
    """
    Factory writing TOML text to a file under tmp_path.

    Usage:
        def test_something(write_toml):
            path = write_toml("base.toml", 'name = "x"\\n')
    """

    def _write(name: str, content: str) -> _pathlib.Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@_pytest.fixture
def layered_files(
    write_toml: _typing.Callable[[str, str], _pathlib.Path],
) -> list[_pathlib.Path]:
    """Three config layers in ascending precedence order."""
    base = write_toml(
        "base.toml",
        """
title = "base"
ports = [8000, 8001, 8002]

[server]
host = "localhost"
port = 8000

[database]
url = "sqlite://"
pool = { min = 1, max = 4 }
""",
    )
    site = write_toml(
        "site.toml",
        """
ports = [9000]

[server]
port = 9000

[database.pool]
max = 16
""",
    )
    local = write_toml(
        "local.toml",
        """
title = "local"

[database]
url = "postgres://db"
""",
    )
    return [base, site, local]


@_pytest.fixture(autouse=True)
def reset_package_logger() -> _typing.Iterator[None]:
    """Drop handlers the CLI installs so later tests don't write to stale streams."""
    yield
    package_logger = _logging.getLogger("tomlmerge")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(_logging.NOTSET)
    package_logger.propagate = True
