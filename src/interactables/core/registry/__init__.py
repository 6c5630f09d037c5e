from __future__ import annotations

from .accessor import RegistryView
from .service import InteractableRegistry
from .updates import shallow_merge

__all__ = ["InteractableRegistry", "RegistryView", "shallow_merge"]
