"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── InvalidEntityError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (esl.config.errors)
    └── InfrastructureError      (infrastructure.py)
        ├── ConnectionError
        │   └── CacheUnavailableError
        └── SerializationError
"""

from esl.kernel.errors.application import ApplicationError
from esl.kernel.errors.base import BaseError
from esl.kernel.errors.domain import DomainError, InvalidEntityError, ValidationError
from esl.kernel.errors.infrastructure import (
    CacheUnavailableError,
    ConnectionError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CacheUnavailableError",
    "ConnectionError",
    "DomainError",
    "InfrastructureError",
    "InvalidEntityError",
    "SerializationError",
    "ValidationError",
]
