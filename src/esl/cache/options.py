"""Cache – SetOptions builder for TTL and tags."""
from __future__ import annotations

from typing import Any, Iterable

from esl.kernel.errors import ValidationError

__all__ = ["SetOptions", "validate_ttl"]


def _invalid_ttl(
    ttl: Any,
    cause: Exception | None = None,
    reason: str = "Expecting numeric value larger or equal to 0",
) -> ValidationError:
    return ValidationError(
        f"Invalid TTL given. {reason}",
        errors=[{"field": "ttl", "value": repr(ttl)}],
        cause=cause,
    )


def validate_ttl(ttl: Any) -> int:
    """Coerce *ttl* to whole seconds, rejecting negatives and non-numbers.

    Fractions are truncated. A positive TTL below one second is rejected
    since truncating it would give 0, which means forever.
    """
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float, str)):
        raise _invalid_ttl(ttl)
    try:
        number = float(ttl) if isinstance(ttl, str) else ttl
        seconds = int(number)
    except (ValueError, OverflowError) as exc:
        raise _invalid_ttl(ttl, exc) from exc
    if number < 0:
        raise _invalid_ttl(ttl)
    if seconds == 0 and number > 0:
        raise _invalid_ttl(ttl, reason="Positive TTLs must be at least 1 second")
    return seconds


class SetOptions:
    """Options applied when storing a key.

    TTL is an offset in seconds from now. It is turned into an absolute
    timestamp before it reaches the store, so offsets beyond the 30 day
    relative limit of memcached-like daemons are fine::

        options = SetOptions.create().set_ttl(SetOptions.TTL_DAY).add_tags(["price", "stock"])
        cache.set("product_42", product, options)
    """

    TTL_FOREVER = 0
    TTL_MINUTE = 60
    TTL_HOUR = 3600
    TTL_DAY = 86400
    TTL_WEEK = 604800

    def __init__(self) -> None:
        self._ttl: int | None = None
        self._tags: list[str] = []

    @classmethod
    def create(cls) -> SetOptions:
        return cls()

    @property
    def ttl(self) -> int | None:
        """TTL in seconds, or ``None`` when the cache default applies."""
        return self._ttl

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    def set_ttl(self, ttl: int) -> SetOptions:
        self._ttl = validate_ttl(ttl)
        return self

    def add_tag(self, tag: str) -> SetOptions:
        if tag in self._tags:
            raise ValidationError(
                f"Tag '{tag}' is already set.",
                errors=[{"field": "tags", "value": tag}],
            )
        self._tags.append(tag)
        return self

    def add_tags(self, tags: Iterable[str]) -> SetOptions:
        for tag in tags:
            self.add_tag(tag)
        return self

    def __repr__(self) -> str:
        return f"SetOptions(ttl={self._ttl!r}, tags={self._tags!r})"
