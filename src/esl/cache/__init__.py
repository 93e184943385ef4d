"""Cache – namespace and tag versioned cache over a shared key-value store.

Usage::

    from esl.cache import SetOptions, TaggedCache

    cache = TaggedCache(store, "shop")
    cache.set("product_42", product, ttl=60, tags=["price", "category_5"])
    cache.flush_tag("price")
    cache.get("product_42")  # None, last_result_was_ok() is False
"""
from esl.cache.entity import ENTITY_FORMAT, assert_entity, is_valid_entity
from esl.cache.keys import PREFIX, CacheKeyBuilder, tag_hash
from esl.cache.options import SetOptions
from esl.cache.settings import CacheSettings
from esl.cache.store import KeyValueStore, StoreResult
from esl.cache.tagged import ResultCode, TaggedCache

__all__ = [
    "ENTITY_FORMAT",
    "PREFIX",
    "CacheKeyBuilder",
    "CacheSettings",
    "KeyValueStore",
    "ResultCode",
    "SetOptions",
    "StoreResult",
    "TaggedCache",
    "assert_entity",
    "is_valid_entity",
    "tag_hash",
]
