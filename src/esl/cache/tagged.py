"""Cache – TaggedCache, a namespace and tag versioned cache.

Nothing is ever enumerated or deleted in bulk. Flushing a namespace or a tag
bumps a version counter in the store; since the counters are part of every
physical key (see :mod:`esl.cache.keys`), entries written under an older
version simply become unreachable and expire on their own.

Tag versions are remembered per instance after the first lookup. A flush of
the same tag by another process is therefore only seen by instances that
had not looked the tag up yet; use short-lived instances (one per request
or job) to bound that staleness.
"""
from __future__ import annotations

import enum
import io
import mmap
import pickle
import selectors
import socket
from typing import TYPE_CHECKING, Any, Iterable

from esl.cache.entity import assert_entity, is_valid_entity
from esl.cache.keys import CacheKeyBuilder
from esl.cache.options import SetOptions, validate_ttl
from esl.cache.store import KeyValueStore, StoreResult
from esl.kernel.errors import CacheUnavailableError, ValidationError
from esl.kernel.time import Clock, SystemClock, unix_time
from esl.observability.logging import get_logger

if TYPE_CHECKING:
    from esl.cache.settings import CacheSettings

__all__ = ["ResultCode", "TaggedCache"]

log = get_logger(__name__)

_RESOURCE_TYPES = (io.IOBase, socket.socket, mmap.mmap, selectors.BaseSelector)


def _assert_serializable(value: Any) -> None:
    if isinstance(value, _RESOURCE_TYPES):
        raise ValidationError(
            "The value can not be a resource. Resources can not be serialized.",
            errors=[{"field": "value", "type": type(value).__name__}],
        )
    try:
        pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
    except (pickle.PicklingError, TypeError, AttributeError) as exc:
        raise ValidationError(
            f"Value of type {type(value).__name__} can not be serialized.",
            errors=[{"field": "value", "type": type(value).__name__}],
            cause=exc,
        ) from exc


class ResultCode(enum.IntEnum):
    """Outcome of the last cache operation.

    More failure codes may be added later; compare against ``OK`` only.
    """

    OK = 0
    FAIL = 1


class TaggedCache:
    """Versioned cache over a shared :class:`KeyValueStore`.

    Args:
        store: The key-value store holding both data and version counters.
        namespace: Name unique to the application using the cache. Follows
            the same naming rule as keys and tags.
        default_ttl: TTL in seconds used when ``set`` is not given one.
            ``0`` means forever.
        clock: Source of the current time for absolute expiry timestamps.

    Raises:
        InvalidEntityError: The namespace is not a valid entity name.
        CacheUnavailableError: The namespace version could not be read.
    """

    DEFAULT_TTL = 3600

    is_valid_entity = staticmethod(is_valid_entity)

    def __init__(
        self,
        store: KeyValueStore,
        namespace: str,
        *,
        default_ttl: int = DEFAULT_TTL,
        clock: Clock | None = None,
    ) -> None:
        assert_entity(namespace)
        self._store = store
        self._namespace = namespace
        self._default_ttl = validate_ttl(default_ttl)
        self._clock: Clock = clock or SystemClock()
        self._tags: dict[str, int] = {}
        self._result = ResultCode.OK

        version = self._read_counter(CacheKeyBuilder.for_namespace(namespace))
        if version is None:
            raise CacheUnavailableError(namespace)
        self._keys = CacheKeyBuilder(namespace, version)
        log.debug("cache.namespace_loaded", namespace=namespace, version=version)

    @classmethod
    def from_settings(cls, settings: CacheSettings, *, clock: Clock | None = None) -> TaggedCache:
        """Build a cache backed by Redis at ``settings.redis_url``."""
        from esl.adapters.redis import RedisStore  # lazy import

        store = RedisStore.from_url(settings.redis_url)
        return cls(store, settings.namespace, default_ttl=settings.default_ttl, clock=clock)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def namespace_version(self) -> int:
        return self._keys.namespace_version

    @property
    def default_ttl(self) -> int:
        return self._default_ttl

    @property
    def result_code(self) -> ResultCode:
        """Result of the last ``set``/``get``/``delete``/``flush``/``flush_tag``."""
        return self._result

    def last_result_was_ok(self) -> bool:
        return self._result == ResultCode.OK

    def set_default_ttl(self, ttl: int) -> None:
        """Set the TTL used when none is given. Pass 0 for forever."""
        self._default_ttl = validate_ttl(ttl)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def set(
        self,
        key: str,
        value: Any,
        options: SetOptions | None = None,
        *,
        ttl: int | None = None,
        tags: Iterable[str] | None = None,
    ) -> bool:
        """Store *value* under *key*.

        TTL and tags come from *options* or from the ``ttl``/``tags``
        shortcuts. Tags are sorted before they are stored, so the order in
        which they were added never changes the physical key.

        The taglist is written before the value. When the value write
        fails afterwards, the next ``get`` computes a key that holds
        nothing and misses; it can never return an outdated value.

        Returns ``True`` when both writes succeeded. A value that can not be
        pickled raises ``ValidationError`` before anything is written, so an
        entry stored earlier under *key* stays readable.
        """
        assert_entity(key)
        _assert_serializable(value)
        options = self._resolve_options(options, ttl, tags)
        taglist = sorted(assert_entity(tag) for tag in options.tags)
        ttl_seconds = self._default_ttl if options.ttl is None else options.ttl
        expire_at = unix_time(self._clock) + ttl_seconds if ttl_seconds > 0 else 0

        if not self._store.set(self._keys.for_taglist(key), taglist, expire_at):
            return self._fail("cache.set_failed", key=key, stage="taglist")

        data_key = self._data_key(key)
        if data_key is None:
            return self._fail("cache.set_failed", key=key, stage="data_key")

        if not self._store.set(data_key, value, expire_at):
            return self._fail("cache.set_failed", key=key, stage="value")

        log.debug("cache.set", key=key, tags=taglist, expire_at=expire_at)
        return self._ok()

    def get(self, key: str) -> Any:
        """Return the value stored under *key*, or ``None``.

        A stored ``None`` and a miss both return ``None``; use
        :meth:`last_result_was_ok` to tell them apart.
        """
        assert_entity(key)
        data_key = self._data_key(key)
        if data_key is None:
            self._result = ResultCode.FAIL
            return None

        value = self._store.get(data_key)
        if self._store.result_code != StoreResult.SUCCESS:
            self._result = ResultCode.FAIL
            return None

        self._result = ResultCode.OK
        return value

    def delete(self, key: str) -> bool:
        """Delete *key*. Only the removal of the value decides the outcome."""
        assert_entity(key)
        data_key = self._data_key(key)
        deleted = data_key is not None and self._store.delete(data_key)
        self._store.delete(self._keys.for_taglist(key))
        if not deleted:
            return self._fail("cache.delete_failed", key=key)
        return self._ok()

    def flush(self) -> bool:
        """Invalidate every entry in the namespace.

        Memory is not freed; old entries are overwritten or expire over
        time.
        """
        version = self._bump_counter(CacheKeyBuilder.for_namespace(self._namespace))
        if version is None:
            return self._fail("cache.flush_failed")

        self._keys = self._keys.with_version(version)
        # tag counters live under the namespace version
        self._tags.clear()
        log.info("cache.flush", namespace=self._namespace, version=version)
        return self._ok()

    def flush_tag(self, tag: str) -> bool:
        """Invalidate every entry carrying *tag*."""
        assert_entity(tag)
        version = self._bump_counter(self._keys.for_tag(tag))
        if version is None:
            self._tags.pop(tag, None)
            return self._fail("cache.flush_tag_failed", tag=tag)

        self._tags[tag] = version
        log.info("cache.flush_tag", namespace=self._namespace, tag=tag, version=version)
        return self._ok()

    # ------------------------------------------------------------------
    # Versions
    # ------------------------------------------------------------------

    def _read_counter(self, counter_key: str) -> int | None:
        """Current value of a version counter, created at 1 when absent.

        Returns ``None`` when the store failed.
        """
        version = self._store.get(counter_key)
        code = self._store.result_code
        if code == StoreResult.SUCCESS:
            return int(version)
        if code != StoreResult.NOT_FOUND:
            return None

        if self._store.add(counter_key, 1):
            return 1
        if self._store.result_code != StoreResult.NOT_STORED:
            return None

        # created by someone else in the meantime
        version = self._store.get(counter_key)
        if self._store.result_code != StoreResult.SUCCESS:
            return None
        return int(version)

    def _bump_counter(self, counter_key: str) -> int | None:
        """Increment a version counter. An absent counter counts as 1."""
        version = self._store.increment(counter_key)
        if version is not None:
            return version
        if self._store.result_code != StoreResult.NOT_FOUND:
            return None

        if self._store.add(counter_key, 2):
            return 2
        if self._store.result_code != StoreResult.NOT_STORED:
            return None
        return self._store.increment(counter_key)

    def _version_for_tag(self, tag: str) -> int | None:
        if tag in self._tags:
            return self._tags[tag]

        version = self._read_counter(self._keys.for_tag(tag))
        if version is not None:
            self._tags[tag] = version
        return version

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def _taglist(self, key: str) -> list[str] | None:
        """Tags stored for *key*, or ``None`` when the entry does not exist."""
        tags = self._store.get(self._keys.for_taglist(key))
        if self._store.result_code != StoreResult.SUCCESS:
            return None
        return list(tags)

    def _data_key(self, key: str) -> str | None:
        taglist = self._taglist(key)
        if taglist is None:
            return None

        tag_versions: list[tuple[str, int]] = []
        for tag in taglist:
            version = self._version_for_tag(tag)
            if version is None:
                return None
            tag_versions.append((tag, version))
        return self._keys.for_data(key, tag_versions)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_options(
        options: SetOptions | None,
        ttl: int | None,
        tags: Iterable[str] | None,
    ) -> SetOptions:
        if options is not None:
            if ttl is not None or tags is not None:
                raise ValidationError("Pass either SetOptions or the ttl/tags shortcuts, not both")
            return options

        options = SetOptions.create()
        if ttl is not None:
            options.set_ttl(ttl)
        if tags is not None:
            if isinstance(tags, str):
                raise ValidationError(
                    "Tags should be given as a list of names",
                    errors=[{"field": "tags", "value": tags}],
                )
            options.add_tags(tags)
        return options

    def _ok(self) -> bool:
        self._result = ResultCode.OK
        return True

    def _fail(self, event: str, **kw: Any) -> bool:
        self._result = ResultCode.FAIL
        log.debug(event, namespace=self._namespace, **kw)
        return False

    def __repr__(self) -> str:
        return f"TaggedCache(namespace={self._namespace!r}, version={self._keys.namespace_version})"
