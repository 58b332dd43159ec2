"""Container facade over the configured component dirs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

from hyphae.component import Component
from hyphae.component_dir import ComponentDir
from hyphae.config import ContainerConfig

logger = logging.getLogger(__name__)


class Container:
    """Resolves component keys across a container's component dirs.

    Component dirs are searched in the order they were added.
    """

    def __init__(self, config: ContainerConfig | None = None, **options: Any) -> None:
        self.config = config if config is not None else ContainerConfig(**options)

    @property
    def root(self) -> Path:
        return self.config.root

    @property
    def component_dirs(self) -> list[ComponentDir]:
        return [ComponentDir(config=dir_config, container=self) for dir_config in self.config.component_dirs]

    def find_component(self, key: str) -> Component | None:
        for component_dir in self.component_dirs:
            component = component_dir.component_for_identifier(key)
            if component is not None:
                logger.debug(f"Resolved {key} to {component.file_path}")
                return component
        logger.debug(f"No component file found for {key}")
        return None

    def each_component(self) -> Iterator[Component]:
        for component_dir in self.component_dirs:
            yield from component_dir.each_component()

    def auto_registered_components(self) -> Iterator[Component]:
        """Components whose ``auto_register`` option (or callable) allows it."""
        for component in self.each_component():
            auto_register = component.auto_register
            if callable(auto_register):
                auto_register = auto_register(component)
            if auto_register:
                yield component
