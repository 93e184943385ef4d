"""Cache – naming rule shared by namespaces, keys and tags."""
from __future__ import annotations

import re
from typing import Any

from esl.kernel.errors import InvalidEntityError

__all__ = ["ENTITY_FORMAT", "assert_entity", "is_valid_entity"]

# A letter, then letters/digits optionally separated by single underscores.
ENTITY_FORMAT = "[a-z](?:_?[a-z0-9])*"

_ENTITY_RE = re.compile(ENTITY_FORMAT, re.IGNORECASE | re.ASCII)


def assert_entity(name: Any) -> str:
    """Return *name* unchanged or raise :class:`InvalidEntityError`."""
    if not isinstance(name, str):
        raise InvalidEntityError(name, ENTITY_FORMAT)
    if _ENTITY_RE.fullmatch(name) is None:
        raise InvalidEntityError(name, ENTITY_FORMAT)
    return name


def is_valid_entity(name: Any) -> bool:
    """Whether *name* can be used as namespace, key or tag."""
    try:
        assert_entity(name)
    except InvalidEntityError:
        return False
    return True
