"""Kernel – framework-agnostic building blocks shared by every esl module."""

from esl.kernel.errors import (
    ApplicationError,
    BaseError,
    CacheUnavailableError,
    DomainError,
    InfrastructureError,
    InvalidEntityError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CacheUnavailableError",
    "DomainError",
    "InfrastructureError",
    "InvalidEntityError",
    "SerializationError",
    "ValidationError",
]
