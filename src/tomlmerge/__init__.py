"""
tomlmerge - merge TOML documents by precedence.

Folds any number of TOML files into one document, later files overriding
earlier ones, and renders the result as TOML or JSON.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("tomlmerge")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from tomlmerge.merge import fold, merge_value  # noqa: E402
from tomlmerge.convert import to_json_value  # noqa: E402

__all__ = ["__version__", "__version_info__", "fold", "merge_value", "to_json_value"]
