"""Hyphae - resolve component keys to source files across namespaced directories."""

from hyphae.component import Component
from hyphae.component_dir import ComponentDir
from hyphae.config import ComponentDirConfig, ContainerConfig, Namespace, Namespaces
from hyphae.container import Container
from hyphae.identifier import Identifier

__version__ = "0.1.0"
__all__ = [
    "Component",
    "ComponentDir",
    "ComponentDirConfig",
    "Container",
    "ContainerConfig",
    "Identifier",
    "Namespace",
    "Namespaces",
]
