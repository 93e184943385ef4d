"""
esl – Versioned tag cache and its supporting kernel.

Import path convention::

    from esl.cache import SetOptions, TaggedCache
    from esl.adapters.redis import RedisStore
    from esl.kernel.errors import InvalidEntityError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
