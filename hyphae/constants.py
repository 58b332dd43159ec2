"""Shared constants for component directory resolution."""

from __future__ import annotations

PATH_SEPARATOR = "/"
DEFAULT_SEPARATOR = "."

SOURCE_EXT = ".py"
SOURCE_GLOB = "*.py"

# Word segments of a relative source path, e.g. "admin/users.py" -> admin, users
WORD_REGEX = r"\w+"
