"""Testing support – fakes for code built on :mod:`esl.cache`.

Example::

    from esl.cache import TaggedCache
    from esl.testing import FakeClock, InMemoryKeyValueStore

    cache = TaggedCache(InMemoryKeyValueStore(FakeClock()), "shop")
"""

from esl.testing.fakes import FakeClock, FrozenClock, InMemoryKeyValueStore, StoreCall

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryKeyValueStore",
    "StoreCall",
]
