"""Infrastructure errors – key-value store and serialisation failures."""

from __future__ import annotations

from typing import Any

from esl.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller mistake."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to talk to an external resource (cache daemon, broker, ...)."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class CacheUnavailableError(ConnectionError):
    """The key-value store could not deliver the namespace version."""

    default_code = "cache_unavailable"

    def __init__(self, namespace: str, **kwargs: Any) -> None:
        super().__init__(
            "cache",
            f"Unable to read the version of namespace '{namespace}'",
            detail={"namespace": namespace},
            **kwargs,
        )
        self.namespace = namespace


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "CacheUnavailableError",
    "ConnectionError",
    "InfrastructureError",
    "SerializationError",
]
