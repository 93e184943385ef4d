"""Config – dataclass settings read from the environment."""

from esl.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from esl.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
