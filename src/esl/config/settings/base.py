"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, TypeVar

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from prefixed environment variables.

    ``_prefix`` is a class attribute, never a field: with prefix
    ``ESL_CACHE`` the ``namespace`` field is read from
    ``ESL_CACHE_NAMESPACE``. ``_validate`` runs after every construction,
    whether the values came from the environment or from code.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def from_env(cls: type[S]) -> S:
        """Shortcut for ``EnvSettingsLoader().load(cls)``."""
        from esl.config.settings.loaders import EnvSettingsLoader

        return EnvSettingsLoader().load(cls)

    def _validate(self) -> None:
        """Raise ``InvalidSettingValueError`` for values the subclass rejects."""


__all__ = ["Settings"]
