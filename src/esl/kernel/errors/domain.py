"""Domain errors – caller mistakes rejected before any I/O happens."""

from __future__ import annotations

from typing import Any

from esl.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a rule of the library contract is violated by the caller."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidEntityError(ValidationError):
    """A namespace, key or tag name does not follow the entity grammar."""

    default_code = "invalid_entity"

    def __init__(self, name: Any, pattern: str, **kwargs: Any) -> None:
        if isinstance(name, str):
            msg = f"Invalid entity name. {name!r} does not conform to {pattern!r}."
        else:
            msg = f"Entities should be strings, {type(name).__name__} given: {name!r}"
        super().__init__(
            msg,
            errors=[{"field": "name", "value": repr(name), "pattern": pattern}],
            **kwargs,
        )
        self.name = name
        self.pattern = pattern


__all__ = [
    "DomainError",
    "InvalidEntityError",
    "ValidationError",
]
