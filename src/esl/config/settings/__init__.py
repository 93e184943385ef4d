"""Config settings – 12-factor env-based configuration."""
from esl.config.settings.base import Settings
from esl.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
