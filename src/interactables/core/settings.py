from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .schema import SchemaPolicy, parse_schema_policy


def normalize_base_url(url: str) -> str:
    """Turn ``host:port`` or a full URL into ``http(s)://host:port`` without a trailing slash."""

    value = str(url).strip()
    if value and "://" not in value:
        value = f"http://{value}"
    return value.rstrip("/")


@dataclass(frozen=True)
class RegistrySettings:
    """Process-level settings, read from ``INTERACTABLES_*`` environment variables.

    Values are kept raw; `resolved_schema_policy` parses the policy only when
    a caller actually needs the environment's choice.
    """

    schema_policy: str = "lenient"
    log_level: str = "info"
    url: str = ""
    cors_origins: tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> "RegistrySettings":
        origins = os.getenv("INTERACTABLES_CORS_ORIGINS", "")
        return cls(
            schema_policy=os.getenv("INTERACTABLES_SCHEMA_POLICY", "lenient"),
            log_level=os.getenv("INTERACTABLES_LOG_LEVEL", "info").strip().lower() or "info",
            url=normalize_base_url(os.getenv("INTERACTABLES_URL", "")),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )

    def resolved_schema_policy(self, override: SchemaPolicy | None = None) -> SchemaPolicy:
        if override is not None:
            return parse_schema_policy(override)
        return parse_schema_policy(self.schema_policy)


def configure_logging(level: str = "info") -> None:
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
