"""Configuration loader."""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from lighthouse_errors.types import LogFormat, LogLevel, ValidationIssue, ValidationResult

from .models import I18nConfig, LighthouseErrorsConfig, LoggingConfig

CONFIG_ENV_VAR = "LIGHTHOUSE_ERRORS_CONFIG"

# ${VAR}, ${VAR:-default}, ${VAR:?error}
_ENV_REF = re.compile(r"\$\{([^}:]+)(?::([?-])([^}]*))?\}")

_SECTIONS: dict[str, set[str]] = {
    "i18n": {"locale", "locales_dir"},
    "logging": {"level", "format", "truncate_at"},
}


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded."""


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        ConfigError: If required var not set
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)  # default value or error message

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        if operator == "?":
            raise ConfigError(operand or f"Required environment variable {var_name} not set")
        raise ConfigError(f"Required environment variable {var_name} not set")

    return _ENV_REF.sub(replacer, value)


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    if isinstance(data, str):
        return resolve_env_vars(data)
    return data


class ConfigLoader:
    """Load and validate lighthouse-errors configuration."""

    def __init__(self) -> None:
        self._config: LighthouseErrorsConfig | None = None
        self._config_path: Path | None = None

    @property
    def config_path(self) -> Path | None:
        """Path the current configuration was loaded from, if any."""
        return self._config_path

    def load(
        self, path: str | Path | None = None, use_defaults: bool = True
    ) -> LighthouseErrorsConfig:
        """Load configuration from file.

        Resolution order if path not specified:
        1. LIGHTHOUSE_ERRORS_CONFIG environment variable
        2. ./lighthouse-errors.yaml
        3. ~/.lighthouse-errors/config.yaml
        4. If use_defaults=True and no file found, use default configuration

        Args:
            path: Optional path to config file
            use_defaults: If True, use default config when no file found

        Returns:
            Loaded LighthouseErrorsConfig instance

        Raises:
            ConfigError: If file not found (when use_defaults=False) or invalid
        """
        config_path = Path(path) if path is not None else self._resolve_config_path()

        if not config_path.exists():
            if use_defaults:
                return self.load_defaults()
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {config_path}")

        data = _resolve_env_vars_recursive(data)
        return self.load_from_dict(data, config_path)

    def load_defaults(self) -> LighthouseErrorsConfig:
        """Load default configuration without a file."""
        return self.load_from_dict({})

    def load_from_dict(
        self, data: dict[str, Any], config_path: Path | None = None
    ) -> LighthouseErrorsConfig:
        """Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            config_path: Optional path to config file (for tracking)

        Returns:
            Loaded LighthouseErrorsConfig instance

        Raises:
            ConfigError: If configuration is invalid
        """
        validation = self.validate(data)
        if not validation.valid:
            error_messages = [f"- {issue.path}: {issue.message}" for issue in validation.errors]
            raise ConfigError("Configuration validation failed:\n" + "\n".join(error_messages))

        i18n = data.get("i18n") or {}
        logging = data.get("logging") or {}

        config = LighthouseErrorsConfig(
            i18n=I18nConfig(**{k: v for k, v in i18n.items() if k in _SECTIONS["i18n"]}),
            logging=LoggingConfig(
                level=LogLevel(logging.get("level", LogLevel.INFO.value)),
                format=LogFormat(logging.get("format", LogFormat.JSON.value)),
                truncate_at=logging.get("truncate_at") or 200,
            ),
        )

        self._config = config
        self._config_path = config_path
        return config

    def validate(self, data: dict[str, Any]) -> ValidationResult:
        """Validate config data without loading.

        Args:
            data: Configuration dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        for key, section in data.items():
            if key not in _SECTIONS:
                warnings.append(
                    ValidationIssue(
                        path=key,
                        message=f"Unknown configuration key: {key}",
                        severity="warning",
                    )
                )
                continue
            if section is None:
                continue
            if not isinstance(section, dict):
                errors.append(ValidationIssue(path=key, message=f"{key} must be a dictionary"))
                continue
            for sub_key in section:
                if sub_key not in _SECTIONS[key]:
                    warnings.append(
                        ValidationIssue(
                            path=f"{key}.{sub_key}",
                            message=f"Unknown configuration key: {key}.{sub_key}",
                            severity="warning",
                        )
                    )

        i18n = data.get("i18n")
        if isinstance(i18n, dict):
            if "locale" in i18n and (not isinstance(i18n["locale"], str) or not i18n["locale"]):
                errors.append(
                    ValidationIssue(path="i18n.locale", message="locale must be a non-empty string")
                )
            locales_dir = i18n.get("locales_dir")
            if locales_dir is not None and not isinstance(locales_dir, str):
                errors.append(
                    ValidationIssue(path="i18n.locales_dir", message="locales_dir must be a string")
                )

        logging = data.get("logging")
        if isinstance(logging, dict):
            if "level" in logging and logging["level"] not in {lvl.value for lvl in LogLevel}:
                errors.append(
                    ValidationIssue(
                        path="logging.level",
                        message=f"level must be one of {[lvl.value for lvl in LogLevel]}",
                    )
                )
            if "format" in logging and logging["format"] not in {fmt.value for fmt in LogFormat}:
                errors.append(
                    ValidationIssue(
                        path="logging.format",
                        message=f"format must be one of {[fmt.value for fmt in LogFormat]}",
                    )
                )
            truncate_at = logging.get("truncate_at")
            if truncate_at is not None and (
                isinstance(truncate_at, bool)
                or not isinstance(truncate_at, int)
                or truncate_at <= 0
            ):
                errors.append(
                    ValidationIssue(
                        path="logging.truncate_at",
                        message="truncate_at must be a positive integer",
                    )
                )

        return ValidationResult(valid=True, errors=errors, warnings=warnings)

    def get(self) -> LighthouseErrorsConfig:
        """Get current configuration, loading it on first use."""
        if self._config is None:
            return self.load()
        return self._config

    def _resolve_config_path(self) -> Path:
        """Resolve config file path using resolution order."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)

        local_path = Path("lighthouse-errors.yaml")
        if local_path.exists():
            return local_path

        home_path = Path.home() / ".lighthouse-errors" / "config.yaml"
        if home_path.exists():
            return home_path

        # Not found - use local path as default
        return local_path


# Convenience singleton
_default_loader: ConfigLoader | None = None


def get_config_loader() -> ConfigLoader:
    """Get default config loader singleton."""
    global _default_loader  # noqa: PLW0603
    if _default_loader is None:
        _default_loader = ConfigLoader()
    return _default_loader


def load_config(path: str | Path | None = None) -> LighthouseErrorsConfig:
    """Convenience function to load config.

    Args:
        path: Optional path to config file

    Returns:
        Loaded LighthouseErrorsConfig instance
    """
    return get_config_loader().load(path)
