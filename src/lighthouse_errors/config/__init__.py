"""Configuration - YAML files with environment variable references."""

from .loader import (
    CONFIG_ENV_VAR,
    ConfigError,
    ConfigLoader,
    get_config_loader,
    load_config,
    resolve_env_vars,
)
from .models import I18nConfig, LighthouseErrorsConfig, LoggingConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "ConfigLoader",
    "I18nConfig",
    "LighthouseErrorsConfig",
    "LoggingConfig",
    "get_config_loader",
    "load_config",
    "resolve_env_vars",
]
