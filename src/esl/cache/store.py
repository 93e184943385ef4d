"""Cache – KeyValueStore port consumed by :class:`~esl.cache.tagged.TaggedCache`."""
from __future__ import annotations

import enum
from typing import Any, Protocol, runtime_checkable

__all__ = ["KeyValueStore", "StoreResult"]


class StoreResult(enum.IntEnum):
    """Outcome of the last store call."""

    SUCCESS = 0
    NOT_FOUND = 1
    NOT_STORED = 2
    FAILURE = 3


@runtime_checkable
class KeyValueStore(Protocol):
    """Memcached-style store shared by any number of processes.

    ``expire_at`` is an absolute unix timestamp, ``0`` means never expire.
    ``increment`` must fail with ``NOT_FOUND`` on an absent key instead of
    creating it, and ``add`` must only write when the key is absent.
    """

    @property
    def result_code(self) -> StoreResult: ...

    def get(self, key: str) -> Any: ...
    def set(self, key: str, value: Any, expire_at: int = 0) -> bool: ...
    def add(self, key: str, value: Any, expire_at: int = 0) -> bool: ...
    def delete(self, key: str) -> bool: ...
    def increment(self, key: str) -> int | None: ...
