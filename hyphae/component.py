"""Component descriptors produced by component dir resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from hyphae.config import Namespace
from hyphae.constants import PATH_SEPARATOR
from hyphae.identifier import Identifier
from hyphae.inflector import Inflector


@dataclass(frozen=True)
class Component:
    """A source file resolved to a component key.

    ``options`` holds the merged loading options: the container's
    inflector, the component dir defaults, then the file's own magic
    comments.
    """
    identifier: Identifier
    namespace: Namespace
    file_path: Path
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return self.identifier.key

    @property
    def root_key(self) -> str:
        return self.identifier.root_key

    @property
    def auto_register(self) -> Any:
        return self.options.get("auto_register", True)

    @property
    def loader(self) -> Any:
        return self.options.get("loader")

    @property
    def memoize(self) -> Any:
        return self.options.get("memoize", False)

    @property
    def inflector(self) -> Inflector:
        return self.options.get("inflector") or Inflector()

    @property
    def is_loadable(self) -> bool:
        return True

    @property
    def module_name(self) -> str:
        """Dotted module path, e.g. ``admin.users`` for namespace const ``admin``."""
        local = self.identifier.namespaced(from_=self.namespace.key, to=None)
        parts = local.key_with_separator(PATH_SEPARATOR).split(PATH_SEPARATOR)
        if self.namespace.const:
            parts = self.namespace.const.split(PATH_SEPARATOR) + parts
        return ".".join(parts)

    @property
    def const_name(self) -> str:
        """Conventional class name for the component, e.g. ``UserRepo``."""
        inflector = self.inflector
        return inflector.camelize(inflector.underscore(self.identifier.segments[-1]))
