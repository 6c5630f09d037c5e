from __future__ import annotations

from .core.entries import InteractableEntry
from .core.registry import InteractableRegistry, RegistryView
from .core.schema import PropsValidationError
from .core.status import UPDATED_SUCCESSFULLY
from .runtime.server import InteractablesServer, run
from .sdk.client import InteractablesClient

__all__ = [
    "run",
    "InteractablesServer",
    "InteractablesClient",
    "InteractableRegistry",
    "RegistryView",
    "InteractableEntry",
    "PropsValidationError",
    "UPDATED_SUCCESSFULLY",
]
