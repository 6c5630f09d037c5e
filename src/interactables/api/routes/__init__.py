from __future__ import annotations

from .interactables import mount_interactables_api

__all__ = ["mount_interactables_api"]
