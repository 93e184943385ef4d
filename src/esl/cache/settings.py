"""Cache – CacheSettings read from ``ESL_CACHE_*`` environment variables."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from esl.cache.entity import is_valid_entity
from esl.config.errors import InvalidSettingValueError
from esl.config.settings import Settings

__all__ = ["CacheSettings"]


@dataclasses.dataclass
class CacheSettings(Settings):
    """Settings for :meth:`TaggedCache.from_settings`.

    ``ESL_CACHE_NAMESPACE`` is required; the others have defaults.
    """

    _prefix: ClassVar[str] = "ESL_CACHE"

    namespace: str
    redis_url: str = "redis://localhost:6379/0"
    default_ttl: int = 3600

    def _validate(self) -> None:
        if not is_valid_entity(self.namespace):
            raise InvalidSettingValueError("namespace", self.namespace, "not a valid entity name")
        if self.default_ttl < 0:
            raise InvalidSettingValueError("default_ttl", self.default_ttl, "must be >= 0")
