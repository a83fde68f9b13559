"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from country_explorer.config import (
    AppConfig,
    ConfigurationError,
    HttpConfig,
    load_config,
    validate_config_file,
)
from country_explorer.config.environment import DEFAULT_PORT, load_environment_config
from country_explorer.main import load_runtime_config

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "config"


class TestConfigurationLoading:
    """Loading configuration from YAML files."""

    def test_load_valid_config(self, clean_env):
        app_config, env_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.http.base_url == "https://countries.internal.example/v3.1"
        assert app_config.http.timeout_seconds == 5
        assert app_config.http.user_agent == "Explorer-Staging/2.0"
        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"
        assert app_config.server.host == "0.0.0.0"
        assert env_config.port == DEFAULT_PORT

    def test_load_minimal_config_uses_defaults(self, clean_env):
        app_config, _ = load_config(FIXTURES_DIR / "minimal_config.yaml")

        assert app_config.http.base_url == "https://restcountries.com/v3.1"
        assert app_config.http.timeout_seconds == 10
        assert app_config.http.user_agent == "Global-Country-Explorer/1.0"
        assert app_config.logging.level == "INFO"
        assert app_config.logging.format == "json"
        assert app_config.server.host == "127.0.0.1"

    def test_empty_file_means_defaults(self, clean_env):
        app_config, _ = load_config(FIXTURES_DIR / "empty_config.yaml")

        assert app_config == AppConfig()

    def test_no_file_found_uses_defaults(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)

        app_config, env_config = load_config()

        assert app_config == AppConfig()
        assert env_config.environment == "local"

    def test_default_location_is_discovered(self, clean_env, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("server:\n  host: 10.0.0.5\n", encoding="utf-8")
        clean_env.chdir(tmp_path)

        app_config, _ = load_config()

        assert app_config.server.host == "10.0.0.5"

    def test_explicit_missing_file(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError, match="Specified configuration file not found"):
            load_config(tmp_path / "nope.yaml")


class TestConfigurationValidation:
    """Invalid configuration files."""

    def test_invalid_values_collects_all_errors(self, clean_env):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_values.yaml")

        error = exc_info.value
        assert error.message == "Configuration validation failed"
        assert len(error.errors) == 4
        message = str(error)
        assert "Validation Errors:" in message
        assert "http -> base_url" in message
        assert "Suggestions:" in message

    def test_malformed_yaml(self, clean_env):
        with pytest.raises(ConfigurationError, match="Failed to parse YAML configuration"):
            load_config(FIXTURES_DIR / "malformed.yaml")

    def test_non_mapping_root(self, clean_env):
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_config(FIXTURES_DIR / "list_root.yaml")

    def test_http_config_rejects_blank_user_agent(self):
        with pytest.raises(ValidationError):
            HttpConfig(user_agent="   ")

    @pytest.mark.parametrize("timeout", [0, 301])
    def test_http_config_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            HttpConfig(timeout_seconds=timeout)

    def test_validate_config_file_valid(self, capsys):
        assert validate_config_file(FIXTURES_DIR / "valid_config.yaml") is True
        assert "✓" in capsys.readouterr().out

    def test_validate_config_file_invalid(self, capsys):
        assert validate_config_file(FIXTURES_DIR / "invalid_values.yaml") is False
        assert "✗" in capsys.readouterr().out


class TestEnvironmentVariables:
    """Values read from the process environment."""

    def test_defaults(self, clean_env):
        env_config = load_environment_config()

        assert env_config.api_key is None
        assert env_config.has_api_key is False
        assert env_config.port == 3000
        assert env_config.log_level is None
        assert env_config.environment == "local"

    def test_all_set(self, clean_env):
        clean_env.setenv("COUNTRYLAYER_API_KEY", "secret-key")
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("LOG_LEVEL", "warning")
        clean_env.setenv("ENVIRONMENT", "production")

        env_config = load_environment_config()

        assert env_config.has_api_key is True
        assert env_config.port == 8080
        assert env_config.log_level == "WARNING"
        assert env_config.environment == "production"

    def test_empty_api_key_is_absent(self, clean_env):
        clean_env.setenv("COUNTRYLAYER_API_KEY", "")

        assert load_environment_config().has_api_key is False

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_invalid_port(self, clean_env, port):
        clean_env.setenv("PORT", port)

        with pytest.raises(ConfigurationError, match="Invalid PORT"):
            load_environment_config()

    def test_errors_are_collected(self, clean_env):
        clean_env.setenv("PORT", "abc")
        clean_env.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert len(exc_info.value.errors) == 2


class TestLogLevelPriority:
    """CLI flag > LOG_LEVEL > config file."""

    def test_config_file_level(self, clean_env):
        _, env_config = load_runtime_config(FIXTURES_DIR / "valid_config.yaml", None)
        assert env_config.log_level == "DEBUG"

    def test_environment_beats_config(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "ERROR")

        _, env_config = load_runtime_config(FIXTURES_DIR / "valid_config.yaml", None)

        assert env_config.log_level == "ERROR"

    def test_cli_beats_environment(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "ERROR")

        _, env_config = load_runtime_config(FIXTURES_DIR / "valid_config.yaml", "WARNING")

        assert env_config.log_level == "WARNING"


class TestExampleFiles:
    def test_config_example_is_valid(self):
        example = Path(__file__).parent.parent / "config.example.yaml"

        assert validate_config_file(example) is True
