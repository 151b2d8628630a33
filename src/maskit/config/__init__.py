"""Config – 12-factor env-based configuration for maskit."""
from maskit.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from maskit.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from maskit.config.settings import MaskitSettings, Settings

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MaskitSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
