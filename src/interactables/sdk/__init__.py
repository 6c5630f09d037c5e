from __future__ import annotations

from .client import InteractablesClient

__all__ = ["InteractablesClient"]
