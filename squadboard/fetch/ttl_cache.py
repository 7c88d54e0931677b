"""In-memory TTL cache for aggregated upstream results."""

from __future__ import annotations

import time
from typing import Any, Callable, Generic, Iterable, TypeVar

import cachetools

T = TypeVar("T")

# Team combinations actually requested stay far below this.
MAX_ENTRIES = 1024


def _now_ms() -> float:
    return time.time() * 1000


def cache_key(ids: Iterable[Any]) -> str:
    """Order-independent key for a set of identifiers."""
    return ",".join(sorted({str(value) for value in ids}))


class TTLCache(Generic[T]):
    """Key/value store whose entries expire *ttl_ms* after being written.

    An entry written at ``t`` is served while ``now - t < ttl_ms``. Times are
    in milliseconds from *clock*.
    """

    def __init__(
        self,
        ttl_ms: float,
        *,
        clock: Callable[[], float] = _now_ms,
        maxsize: int = MAX_ENTRIES,
    ) -> None:
        if ttl_ms <= 0:
            raise ValueError("ttl_ms must be > 0")
        self.ttl_ms = ttl_ms
        self._entries: cachetools.TTLCache = cachetools.TTLCache(
            maxsize=maxsize,
            ttl=ttl_ms,
            timer=clock,
        )

    def get(self, key: str) -> T | None:
        return self._entries.get(key)

    def set(self, key: str, value: T) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
