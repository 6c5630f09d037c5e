from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any

from .props import Props


@dataclass(frozen=True, kw_only=True)
class InteractableEntry:
    """A registered interactable unit.

    Notes:
    - `component` and `props_schema` are opaque; the registry only carries them.
    - `props` is replaced wholesale on every committed update, never edited in place.
    - `revision` is bumped on every committed update.
    """

    id: str
    name: str
    description: str
    component: Any
    props: Props = field(default_factory=dict)
    props_schema: Any = None
    revision: int = 1
    created_at: float = 0.0
    updated_at: float = 0.0

    @property
    def has_schema(self) -> bool:
        return self.props_schema is not None

    def detached(self) -> "InteractableEntry":
        # Copy of the entry whose props can be mutated without reaching the registry.
        return replace(self, props=copy.deepcopy(self.props))
