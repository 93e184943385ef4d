"""Config – errors raised while reading or validating settings."""
from __future__ import annotations

from typing import Any

from esl.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No environment variable holds a setting that has no default."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable {setting_name} must be set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value is rejected.

    ``setting_name`` is the environment variable when the value could not be
    coerced, and the field name when ``Settings._validate`` rejected it.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
