"""Configuration types for containers, component dirs and namespaces."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Iterator, Union

from hyphae.constants import DEFAULT_SEPARATOR
from hyphae.errors import NamespaceAlreadyAddedError
from hyphae.inflector import Inflector

if TYPE_CHECKING:
    from hyphae.component import Component

AutoRegister = Union[bool, Callable[["Component"], bool]]

_UNSET: Any = object()


@dataclass(frozen=True)
class Namespace:
    """Maps a sub-path of a component dir to a key prefix and a module prefix.

    ``path`` is relative to the component dir (``None`` for the root
    namespace). ``key`` is prepended to the keys of components found under
    ``path``. ``const`` is the module prefix used when loading them.
    ``default_key`` records that ``key`` was not given explicitly and was
    copied from ``path``.
    """
    path: str | None
    key: str | None = None
    const: str | None = None
    default_key: bool = False

    @classmethod
    def root(cls, key: str | None = None, const: str | None = None) -> Namespace:
        return cls(path=None, key=key, const=const)

    @property
    def is_root(self) -> bool:
        return self.path is None

    @property
    def has_path(self) -> bool:
        return self.path is not None

    def with_key(self, key: str | None) -> Namespace:
        """Return a copy with an explicit ``key``."""
        return replace(self, key=key, default_key=False)


class Namespaces:
    """Ordered namespaces of a component dir, at most one per path."""

    def __init__(self) -> None:
        self._namespaces: dict[str | None, Namespace] = {}

    def add(self, path: str, key: str | None = _UNSET, const: str | None = _UNSET) -> Namespace:
        if path in self._namespaces:
            raise NamespaceAlreadyAddedError(path)

        default_key = key is _UNSET
        namespace = Namespace(
            path=path,
            key=path if default_key else key,
            const=path if const is _UNSET else const,
            default_key=default_key,
        )
        self._namespaces[path] = namespace
        return namespace

    def add_root(self, key: str | None = None, const: str | None = None) -> Namespace:
        if None in self._namespaces:
            raise NamespaceAlreadyAddedError(None)

        namespace = Namespace.root(key=key, const=const)
        self._namespaces[None] = namespace
        return namespace

    def delete(self, path: str) -> Namespace | None:
        return self._namespaces.pop(path, None)

    def delete_root(self) -> Namespace | None:
        return self._namespaces.pop(None, None)

    @property
    def paths(self) -> list[str]:
        return [ns.path for ns in self._namespaces.values() if ns.path is not None]

    def to_list(self) -> list[Namespace]:
        """Namespaces in declaration order, ending with an implicit root if none was added."""
        namespaces = list(self._namespaces.values())
        if not any(ns.is_root for ns in namespaces):
            namespaces.append(Namespace.root())
        return namespaces

    def __iter__(self) -> Iterator[Namespace]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._namespaces)


@dataclass
class ComponentDirConfig:
    path: str
    namespaces: Namespaces = field(default_factory=Namespaces)
    auto_register: AutoRegister = True
    loader: Any = None
    memoize: bool | Callable[["Component"], bool] = False

    def component_options(self) -> dict[str, Any]:
        return {
            "auto_register": self.auto_register,
            "loader": self.loader,
            "memoize": self.memoize,
        }


@dataclass
class ContainerConfig:
    root: Path = field(default_factory=Path.cwd)
    namespace_separator: str = DEFAULT_SEPARATOR
    inflector: Inflector = field(default_factory=Inflector)
    component_dirs: list[ComponentDirConfig] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    def add_component_dir(self, path: str, **options: Any) -> ComponentDirConfig:
        dir_config = ComponentDirConfig(path=path, **options)
        self.component_dirs.append(dir_config)
        return dir_config
