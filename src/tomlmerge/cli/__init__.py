"""
CLI module for tomlmerge.

Provides the command-line interface using Click.
"""

from tomlmerge.cli.main import cli, main

__all__ = ["main", "cli"]
