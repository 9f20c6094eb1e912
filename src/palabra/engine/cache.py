"""In-memory key/value cache with per-entry expiry."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class _Entry:
    value: Any
    expires_at: float


class TTLCache:
    """Process-lifetime cache; nothing is persisted.

    Expired entries are dropped lazily on read.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._data: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._data[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        with self._lock:
            self._data[key] = _Entry(value=value, expires_at=self._clock() + ttl)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def stats(self) -> dict:
        """Size and keys currently held (expired entries included)."""
        with self._lock:
            return {"size": len(self._data), "keys": list(self._data)}

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
