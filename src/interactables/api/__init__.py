from __future__ import annotations

from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.registry import InteractableRegistry
from .routes import mount_interactables_api


def create_api_app(
    registry: InteractableRegistry | None = None,
    *,
    cors_origins: Sequence[str] = (),
) -> FastAPI:
    """Build the HTTP app around ``registry`` (a fresh one when omitted).

    Cross-origin controllers are only admitted for the listed ``cors_origins``
    (INTERACTABLES_CORS_ORIGINS when started through `run()`).
    """

    if registry is None:
        registry = InteractableRegistry()

    app = FastAPI(title="interactables", version="0.1.0")
    app.state.registry = registry

    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cors_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    mount_interactables_api(app, registry)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app
