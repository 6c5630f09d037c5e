from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterator, Mapping
from dataclasses import replace
from typing import Any

from ..entries import InteractableEntry
from ..ids import IdGenerator
from ..props import normalize_props
from ..schema import SchemaPolicy, parse_schema_policy, validate_props
from ..status import UPDATED_SUCCESSFULLY, no_props_status, not_found_status
from .updates import shallow_merge


logger = logging.getLogger(__name__)


class InteractableRegistry:
    """Owns the id -> entry mapping for one session.

    Every public method takes the registry lock, so add/update/remove/get are
    linearizable. Entries are frozen; an update swaps in a new entry, which is
    what makes it atomic for readers.
    """

    def __init__(
        self,
        *,
        schema_policy: SchemaPolicy = "lenient",
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, InteractableEntry] = {}
        self._ids = id_generator if id_generator is not None else IdGenerator()
        self._schema_policy: SchemaPolicy = parse_schema_policy(schema_policy)
        self._global_revision = 0

    @property
    def schema_policy(self) -> SchemaPolicy:
        return self._schema_policy

    def global_revision(self) -> int:
        with self._lock:
            return self._global_revision

    def add(
        self,
        *,
        name: str,
        description: str = "",
        component: Any = None,
        props: Mapping[str, Any] | None = None,
        props_schema: Any = None,
    ) -> str:
        initial = normalize_props(props)

        with self._lock:
            element_id = self._ids.next_id(name)
            now = time.time()
            self._entries[element_id] = InteractableEntry(
                id=element_id,
                name=str(name),
                description=str(description),
                component=component,
                props=initial,
                props_schema=props_schema,
                revision=1,
                created_at=now,
                updated_at=now,
            )
            self._global_revision += 1
            logger.debug("Registered %s (%s) with %d props", element_id, name, len(initial))
            return element_id

    register = add

    def get(self, element_id: str) -> InteractableEntry | None:
        with self._lock:
            entry = self._entries.get(element_id)
            return entry.detached() if entry is not None else None

    def list(self) -> Iterator[InteractableEntry]:
        with self._lock:
            snapshot = list(self._entries.values())
        return (e.detached() for e in snapshot)

    def ids(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def remove(self, element_id: str) -> bool:
        with self._lock:
            if self._entries.pop(element_id, None) is None:
                return False
            self._global_revision += 1
            logger.debug("Removed %s", element_id)
            return True

    def clear(self) -> int:
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            if removed:
                self._global_revision += 1
            logger.debug("Cleared %d interactables", removed)
            return removed

    def update_props(self, element_id: str, partial_props: Mapping[str, Any]) -> str:
        """Apply a shallow partial update and report the outcome as a status string.

        Returns ``"Updated successfully"``, or a warning/error status when the
        mapping is empty or the id is unknown; in those cases nothing changes.
        Invalid values raise before anything is written. Under the strict
        policy a schema violation raises `PropsValidationError`.
        """

        with self._lock:
            latest = self._entries.get(element_id)
            if latest is None:
                state = "removed" if self._ids.issued(element_id) else "unknown"
                logger.debug("Update for %s interactable %s", state, element_id)
                return not_found_status(element_id)
            if not partial_props:
                logger.debug("Empty update for interactable %s", element_id)
                return no_props_status(element_id)

            merged = shallow_merge(latest.props, normalize_props(partial_props))
            if self._schema_policy == "strict" and latest.has_schema:
                validate_props(element_id, latest.props_schema, merged)

            self._entries[element_id] = replace(
                latest,
                props=merged,
                revision=latest.revision + 1,
                updated_at=time.time(),
            )
            self._global_revision += 1
            logger.debug("Updated %s keys %s", element_id, sorted(partial_props))
            return UPDATED_SUCCESSFULLY

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, element_id: object) -> bool:
        with self._lock:
            return element_id in self._entries
