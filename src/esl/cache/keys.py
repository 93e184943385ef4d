"""Cache – physical key templates.

Every key handed to the store starts with :data:`PREFIX` so that entries
written by this library never collide with other users of the same daemon::

    ESL;n:<namespace>                              namespace version
    ESL;<namespace>=<version>;t:<tag>              tag version
    ESL;<namespace>=<version>;l:<key>              taglist of a key
    ESL;<namespace>=<version>;v:<key>;<md5 hex>    value of a key

The format is shared with existing deployments and must not change.
"""
from __future__ import annotations

import hashlib
from typing import Iterable

__all__ = ["PREFIX", "CacheKeyBuilder", "tag_hash"]

PREFIX = "ESL"


def tag_hash(tag_versions: Iterable[tuple[str, int]]) -> str:
    """MD5 hex digest of ``;<tag>=<version>`` pairs, in the order given."""
    content = "".join(f";{tag}={version}" for tag, version in tag_versions)
    return hashlib.md5(content.encode("utf-8")).hexdigest()  # noqa: S324


class CacheKeyBuilder:
    """Build physical keys for one namespace at one namespace version."""

    def __init__(self, namespace: str, namespace_version: int) -> None:
        self._namespace = namespace
        self._namespace_version = namespace_version
        self._prefix = f"{PREFIX};{namespace}={namespace_version}"

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def namespace_version(self) -> int:
        return self._namespace_version

    @property
    def prefix(self) -> str:
        return self._prefix

    @staticmethod
    def for_namespace(namespace: str) -> str:
        return f"{PREFIX};n:{namespace}"

    def for_tag(self, tag: str) -> str:
        return f"{self._prefix};t:{tag}"

    def for_taglist(self, key: str) -> str:
        return f"{self._prefix};l:{key}"

    def for_data(self, key: str, tag_versions: Iterable[tuple[str, int]]) -> str:
        return f"{self._prefix};v:{key};{tag_hash(tag_versions)}"

    def with_version(self, namespace_version: int) -> CacheKeyBuilder:
        return CacheKeyBuilder(self._namespace, namespace_version)
