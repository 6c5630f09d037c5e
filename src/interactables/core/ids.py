from __future__ import annotations

import re
import threading
import uuid


_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    slug = _SLUG_RE.sub("-", str(name).strip().lower()).strip("-")
    return slug or "interactable"


class IdGenerator:
    """Issues opaque ids of the form ``<slug(name)>-<7 hex chars>``.

    Every id handed out is remembered, so an id is never issued twice by the
    same generator, even after the owning entry has been removed.
    """

    def __init__(self, *, suffix_len: int = 7) -> None:
        if int(suffix_len) <= 0:
            raise ValueError("suffix_len must be a positive integer")
        self._lock = threading.Lock()
        self._suffix_len = int(suffix_len)
        self._issued: set[str] = set()

    def next_id(self, name: str = "") -> str:
        prefix = slugify(name)
        with self._lock:
            while True:
                candidate = f"{prefix}-{uuid.uuid4().hex[: self._suffix_len]}"
                if candidate not in self._issued:
                    self._issued.add(candidate)
                    return candidate

    def issued(self, element_id: str) -> bool:
        with self._lock:
            return element_id in self._issued

    def __len__(self) -> int:
        with self._lock:
            return len(self._issued)
