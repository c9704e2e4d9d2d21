"""
Configuration module for tomlmerge.

Uses pydantic-settings for environment variable loading.
"""

from tomlmerge.config.settings import Settings

__all__ = ["Settings"]
