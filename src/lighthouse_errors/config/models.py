"""Configuration data models."""

from dataclasses import dataclass, field

from lighthouse_errors.i18n import DEFAULT_LOCALE
from lighthouse_errors.types import LogFormat, LogLevel


@dataclass
class I18nConfig:
    """Message localization configuration."""

    locale: str = DEFAULT_LOCALE
    locales_dir: str | None = None  # Directory of <locale>.yaml template overrides


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    truncate_at: int = 200


@dataclass
class LighthouseErrorsConfig:
    """Root configuration object."""

    i18n: I18nConfig = field(default_factory=I18nConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
