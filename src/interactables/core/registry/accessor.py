from __future__ import annotations

from collections.abc import Iterator

from ..entries import InteractableEntry
from .service import InteractableRegistry


class RegistryView:
    """Read-only facade over a registry, handed to renderers and pollers."""

    def __init__(self, registry: InteractableRegistry) -> None:
        self._registry = registry

    def get(self, element_id: str) -> InteractableEntry | None:
        return self._registry.get(element_id)

    def list(self) -> Iterator[InteractableEntry]:
        return self._registry.list()

    def ids(self) -> list[str]:
        return self._registry.ids()

    def global_revision(self) -> int:
        return self._registry.global_revision()

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._registry
