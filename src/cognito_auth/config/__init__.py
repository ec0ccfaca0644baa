"""Configuration loading for cognito-auth."""

from .loader import CONFIG_ENV_VAR, DEFAULT_CONFIG_NAME, interpolate_env, load_config
from .models import AppConfigModel, LoggingConfigModel

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_NAME",
    "AppConfigModel",
    "LoggingConfigModel",
    "interpolate_env",
    "load_config",
]
