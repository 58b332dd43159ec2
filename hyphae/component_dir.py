"""Locating component source files within a configured component dir.

A component dir is a directory under the container root, optionally split
into namespaces. Each namespace maps a sub-path to a key prefix, so a file
at ``admin/users.py`` inside a namespace ``admin`` with key ``admin`` is the
component ``admin.users``.
"""

from __future__ import annotations

import glob
import logging
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from hyphae.component import Component
from hyphae.config import ComponentDirConfig, Namespace
from hyphae.constants import PATH_SEPARATOR, SOURCE_EXT, SOURCE_GLOB, WORD_REGEX
from hyphae.errors import ComponentDirNotFoundError, InvalidComponentKeyError
from hyphae.identifier import Identifier
from hyphae.magic_comments import parse_magic_comments

if TYPE_CHECKING:
    from hyphae.container import Container

logger = logging.getLogger(__name__)


class ComponentDir:
    """A component dir within a container's root.

    Nothing is cached: every lookup and scan reads the filesystem again.
    """

    def __init__(self, config: ComponentDirConfig, container: Container) -> None:
        self.config = config
        self.container = container

    @property
    def path(self) -> str:
        return self.config.path

    @property
    def separator(self) -> str:
        return self.container.config.namespace_separator

    @property
    def full_path(self) -> Path:
        return self.container.root / self.config.path

    def normalized_namespaces(self) -> list[Namespace]:
        """Configured namespaces with path separators removed from defaulted keys.

        A namespace added for a nested path without a key gets ``key ==
        path``, e.g. ``admin/reports``. The config layer does not know the
        container's separator, so the key is rewritten here.
        """
        return [self._normalize_namespace(ns) for ns in self.config.namespaces.to_list()]

    def _normalize_namespace(self, namespace: Namespace) -> Namespace:
        if (
            namespace.path is not None
            and PATH_SEPARATOR in namespace.path
            and namespace.default_key
            and namespace.key is not None
        ):
            return namespace.with_key(namespace.key.replace(PATH_SEPARATOR, self.separator))
        return namespace

    def component_for_identifier(self, key: str) -> Component | None:
        """Return the component for ``key`` if a matching source file exists.

        Namespaces are tried in declaration order and the first one with an
        existing file wins. A missing component dir is a miss, not an error.
        """
        if not key:
            raise InvalidComponentKeyError(key)

        namespaces = self.normalized_namespaces()
        for namespace in namespaces:
            identifier = Identifier(key, separator=self.separator)

            if not identifier.start_with(namespace.key):
                continue

            file_path = self._find_component_file(identifier, namespace, namespaces)
            if file_path is not None:
                return self.build_component(identifier, namespace, file_path)

        return None

    def each_component(self) -> Iterator[Component]:
        """Yield a component for every source file in the dir.

        Raises ComponentDirNotFoundError if the dir does not exist.
        """
        for file_path, namespace in self._each_file():
            yield self._component_for_path(file_path, namespace)

    def _each_file(self) -> Iterator[tuple[Path, Namespace]]:
        full_path = self.full_path
        if not full_path.is_dir():
            raise ComponentDirNotFoundError(full_path)

        namespaces = self.normalized_namespaces()
        for namespace in namespaces:
            for file_path in self._files(namespace, namespaces):
                yield file_path, namespace

    def _files(self, namespace: Namespace, namespaces: list[Namespace]) -> list[Path]:
        full_path = str(self.full_path)

        if namespace.path is not None:
            # Literal directory names may contain glob characters, e.g. "proj[1]"
            pattern = os.path.join(glob.escape(os.path.join(full_path, namespace.path)), "**", SOURCE_GLOB)
            return [Path(p) for p in sorted(glob.glob(pattern, recursive=True)) if os.path.isfile(p)]

        files = []
        for p in sorted(glob.glob(os.path.join(glob.escape(full_path), "**", SOURCE_GLOB), recursive=True)):
            relative = Path(p).relative_to(full_path).as_posix()
            if _claimed_by_other_namespace(relative, namespaces) or not os.path.isfile(p):
                continue
            files.append(Path(p))
        return files

    def _component_for_path(self, file_path: Path, namespace: Namespace) -> Component:
        separator = self.separator

        relative = file_path.relative_to(self.full_path).as_posix()
        key = separator.join(re.findall(WORD_REGEX, relative[: -len(SOURCE_EXT)]))

        from_ = namespace.path.replace(PATH_SEPARATOR, separator) if namespace.path is not None else None
        identifier = Identifier(key, separator=separator).namespaced(from_=from_, to=namespace.key)

        logger.debug(f"{relative} -> {identifier.key}")
        return self.build_component(identifier, namespace, file_path)

    def _find_component_file(
        self, identifier: Identifier, namespace: Namespace, namespaces: list[Namespace],
    ) -> Path | None:
        # Keys within a namespace are relative to its key
        if namespace.key is not None:
            identifier = identifier.namespaced(from_=namespace.key, to=None)

        file_name = f"{identifier.key_with_separator(PATH_SEPARATOR)}{SOURCE_EXT}"

        if namespace.path is not None:
            component_file = self.full_path / namespace.path / file_name
        elif _claimed_by_other_namespace(file_name, namespaces):
            return None
        else:
            component_file = self.full_path / file_name

        if component_file.exists():
            return component_file
        return None

    def build_component(self, identifier: Identifier, namespace: Namespace, file_path: Path) -> Component:
        """Merge inflector, dir defaults and the file's magic comments, later wins."""
        options = {
            "inflector": self.container.config.inflector,
            **self.config.component_options(),
            **parse_magic_comments(file_path),
        }
        return Component(identifier, namespace=namespace, file_path=file_path, options=options)


def _claimed_by_other_namespace(relative_path: str, namespaces: list[Namespace]) -> bool:
    """True if a root-relative path lies under a non-root namespace's path.

    Literal string prefix: a namespace at "adm" also claims "admin/users.py".
    """
    other_paths = tuple(ns.path for ns in namespaces if ns.path is not None)
    return relative_path.startswith(other_paths)
