"""Testing fakes – in-memory doubles for the cache ports."""
from esl.kernel.time import FrozenClock
from esl.testing.fakes.store import FAKE_NOW, FakeClock, InMemoryKeyValueStore, StoreCall

__all__ = [
    "FAKE_NOW",
    "FakeClock",
    "FrozenClock",
    "InMemoryKeyValueStore",
    "StoreCall",
]
