"""Exceptions raised by hyphae."""

from __future__ import annotations

from pathlib import Path


class HyphaeError(Exception):
    """Base class for all hyphae errors."""


class ComponentDirNotFoundError(HyphaeError):
    """A configured component directory does not exist on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Component dir '{self.path}' not found")


class NamespaceAlreadyAddedError(HyphaeError):
    """A namespace for the same path was already added."""

    def __init__(self, path: str | None) -> None:
        self.path = path
        label = "root path" if path is None else f"path '{path}'"
        super().__init__(f"Namespace for {label} already added")


class InvalidComponentKeyError(HyphaeError, ValueError):
    """A component key was empty or otherwise unusable."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Invalid component key: {key!r}")
