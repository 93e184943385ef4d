"""Redis adapter – RedisStore, a KeyValueStore over redis-py."""
from __future__ import annotations

import pickle
from typing import Any

from esl.cache.store import StoreResult
from esl.kernel.errors import SerializationError
from esl.observability.logging import get_logger

log = get_logger(__name__)

# INCR on a missing key would create it at 1; counters must fail instead.
_INCR_EXISTING = """
if redis.call("EXISTS", KEYS[1]) == 1 then
    return redis.call("INCR", KEYS[1])
else
    return nil
end
"""


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise ImportError("Install 'esl[redis]' to use the Redis adapter") from exc


def encode(value: Any) -> bytes:
    """Plain ints are stored as decimal text so ``INCR`` can work on them.

    Subclasses of int (bool, IntEnum, IntFlag) are pickled to keep their type.
    """
    if type(value) is int:
        return str(value).encode("ascii")
    try:
        return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
    except (pickle.PicklingError, TypeError, AttributeError) as exc:
        raise SerializationError(
            f"Value of type {type(value).__name__} can not be serialized",
            payload_type=type(value).__name__,
            cause=exc,
        ) from exc


def decode(raw: bytes) -> Any:
    # pickles (protocol >= 2) always start with the PROTO opcode
    if raw[:1] == pickle.PROTO:
        return pickle.loads(raw)  # noqa: S301
    return int(raw)


class RedisStore:
    """Synchronous Redis store with memcached-like semantics.

    Every redis error is logged and turned into ``StoreResult.FAILURE``; the
    cache layer decides what a failure means.
    """

    def __init__(self, client: Any) -> None:
        self._client = client
        self._result = StoreResult.SUCCESS
        self._incr = client.register_script(_INCR_EXISTING)
        self._errors = _require_redis().RedisError

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> RedisStore:
        redis = _require_redis()
        return cls(redis.Redis.from_url(url, **kwargs))

    @property
    def result_code(self) -> StoreResult:
        return self._result

    def get(self, key: str) -> Any:
        try:
            raw = self._client.get(key)
        except self._errors as exc:
            return self._failure("get", key, exc)
        if raw is None:
            self._result = StoreResult.NOT_FOUND
            return None
        self._result = StoreResult.SUCCESS
        return decode(raw)

    def set(self, key: str, value: Any, expire_at: int = 0) -> bool:
        return self._write(key, value, expire_at, nx=False)

    def add(self, key: str, value: Any, expire_at: int = 0) -> bool:
        return self._write(key, value, expire_at, nx=True)

    def delete(self, key: str) -> bool:
        try:
            removed = self._client.delete(key)
        except self._errors as exc:
            return bool(self._failure("delete", key, exc, default=False))
        self._result = StoreResult.SUCCESS if removed else StoreResult.NOT_FOUND
        return bool(removed)

    def increment(self, key: str) -> int | None:
        try:
            version = self._incr(keys=[key])
        except self._errors as exc:
            return self._failure("increment", key, exc)
        if version is None:
            self._result = StoreResult.NOT_FOUND
            return None
        self._result = StoreResult.SUCCESS
        return int(version)

    def close(self) -> None:
        self._client.close()

    def _write(self, key: str, value: Any, expire_at: int, *, nx: bool) -> bool:
        data = encode(value)
        try:
            stored = self._client.set(key, data, exat=expire_at or None, nx=nx)
        except self._errors as exc:
            return bool(self._failure("set", key, exc, default=False))
        if not stored:
            self._result = StoreResult.NOT_STORED
            return False
        self._result = StoreResult.SUCCESS
        return True

    def _failure(self, operation: str, key: str, exc: Exception, default: Any = None) -> Any:
        self._result = StoreResult.FAILURE
        log.warning("redis.operation_failed", operation=operation, key=key, error=repr(exc))
        return default


__all__ = ["RedisStore", "decode", "encode"]
