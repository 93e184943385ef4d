"""Redis adapter – KeyValueStore backed by redis-py."""
from esl.adapters.redis.store import RedisStore

__all__ = ["RedisStore"]
