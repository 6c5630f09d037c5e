from __future__ import annotations

from .server import InteractablesServer, run

__all__ = ["InteractablesServer", "run"]
