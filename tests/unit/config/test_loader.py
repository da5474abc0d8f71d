"""Tests for configuration loading."""

from pathlib import Path

import pytest

from lighthouse_errors.config import (
    CONFIG_ENV_VAR,
    ConfigError,
    ConfigLoader,
    LighthouseErrorsConfig,
    load_config,
    resolve_env_vars,
)
from lighthouse_errors.types import LogFormat, LogLevel


class TestResolveEnvVars:
    """Test environment variable references."""

    def test_set_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test ${VAR} resolves to the environment value."""
        monkeypatch.setenv("LH_LOCALE", "de-DE")

        assert resolve_env_vars("${LH_LOCALE}") == "de-DE"

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test ${VAR:-default} falls back when unset."""
        monkeypatch.delenv("LH_LOCALE", raising=False)

        assert resolve_env_vars("${LH_LOCALE:-en-US}") == "en-US"

    def test_required_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test ${VAR} and ${VAR:?message} fail when unset."""
        monkeypatch.delenv("LH_LOCALE", raising=False)

        with pytest.raises(ConfigError, match="LH_LOCALE"):
            resolve_env_vars("${LH_LOCALE}")
        with pytest.raises(ConfigError, match="locale required"):
            resolve_env_vars("${LH_LOCALE:?locale required}")


class TestConfigLoader:
    """Test ConfigLoader."""

    def test_defaults_without_file(self) -> None:
        """Test defaults are used when no config file exists."""
        config = ConfigLoader().load()

        assert config == LighthouseErrorsConfig()
        assert config.i18n.locale == "en-US"
        assert config.logging.format == LogFormat.JSON

    def test_missing_file_without_defaults(self, tmp_path: Path) -> None:
        """Test a missing explicit file fails when defaults are disabled."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader().load(tmp_path / "missing.yaml", use_defaults=False)

    def test_load_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a YAML file with env references is loaded."""
        monkeypatch.setenv("LH_LOCALE", "fr-FR")
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "i18n:\n"
            "  locale: ${LH_LOCALE}\n"
            "  locales_dir: /srv/locales\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  format: colored\n",
            encoding="utf-8",
        )
        loader = ConfigLoader()

        config = loader.load(config_file)

        assert config.i18n.locale == "fr-FR"
        assert config.i18n.locales_dir == "/srv/locales"
        assert config.logging.level == LogLevel.DEBUG
        assert config.logging.format == LogFormat.COLORED
        assert loader.config_path == config_file
        assert loader.get() is config

    def test_env_var_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the config path can come from the environment."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("i18n:\n  locale: es-ES\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert load_config().i18n.locale == "es-ES"

    def test_local_file_found(self, tmp_path: Path) -> None:
        """Test ./lighthouse-errors.yaml is picked up from the working directory."""
        (tmp_path / "lighthouse-errors.yaml").write_text(
            "logging:\n  level: ERROR\n", encoding="utf-8"
        )

        assert ConfigLoader().load().logging.level == LogLevel.ERROR

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML is reported as a ConfigError."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("i18n: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigLoader().load(config_file)

    def test_invalid_values(self) -> None:
        """Test invalid values fail with every problem listed."""
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load_from_dict(
                {"logging": {"level": "LOUD", "format": "xml", "truncate_at": 0}}
            )

        message = str(exc_info.value)
        assert "logging.level" in message
        assert "logging.format" in message
        assert "logging.truncate_at" in message


class TestValidate:
    """Test ConfigLoader.validate()."""

    def test_unknown_keys_are_warnings(self) -> None:
        """Test unknown keys warn but do not invalidate."""
        result = ConfigLoader().validate({"server": {}, "i18n": {"region": "eu"}})

        assert result.valid
        assert [w.path for w in result.warnings] == ["server", "i18n.region"]

    def test_section_must_be_mapping(self) -> None:
        """Test sections must be dictionaries."""
        result = ConfigLoader().validate({"i18n": "de-DE"})

        assert not result.valid
        assert result.errors[0].path == "i18n"

    def test_empty_locale(self) -> None:
        """Test the locale must be a non-empty string."""
        result = ConfigLoader().validate({"i18n": {"locale": ""}})

        assert not result.valid
        assert result.errors[0].path == "i18n.locale"
