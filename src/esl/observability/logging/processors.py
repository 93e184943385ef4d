"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

PAYLOAD_FIELDS: frozenset[str] = frozenset({"value", "payload", "data"})


class PayloadRedactor:
    """structlog processor that masks cached payloads before rendering.

    Cache values may hold anything an application chooses to store, so
    they never reach a log sink verbatim::

        structlog.configure(processors=[PayloadRedactor(), ...])
    """

    REDACTED = "[REDACTED]"

    def __init__(self, fields: frozenset[str] | None = None) -> None:
        self._fields = fields if fields is not None else PAYLOAD_FIELDS

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key in event_dict:
            if key.lower() in self._fields:
                event_dict[key] = self.REDACTED
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["PAYLOAD_FIELDS", "PayloadRedactor", "get_logger"]
