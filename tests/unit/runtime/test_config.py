"""Configuration loading and the context override system."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.catalog.runtime.config.config_data import AppConfig, ConfigData, DatabaseConfig
from src.catalog.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)
from src.catalog.runtime.config.settings import EnvironmentVariables
from src.catalog.runtime.context import get_config, load_default_config, with_context

REPOSITORY_CONFIG = Path(__file__).resolve().parents[3] / "config.yaml"


class TestSubstituteEnvVars:
    def test_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_default_when_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-fallback}") == "fallback"

    def test_required_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="MISSING_VAR"):
                substitute_env_vars("${MISSING_VAR}")

    def test_required_with_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="set me"):
                substitute_env_vars("${MISSING_VAR:?set me}")


class TestEnvironmentOverrides:
    def test_prefixed_variable_is_copied(self):
        with patch.dict(os.environ, {"PRODUCTION_DATABASE_URL": "sqlite:///prod.db"}, clear=True):
            applied = apply_environment_overrides("production")

            assert applied == ["DATABASE_URL"]
            assert os.environ["DATABASE_URL"] == "sqlite:///prod.db"


class TestLoadTemplatedYaml:
    def test_loads_config_section(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  app:\n"
            "    title: ${TITLE:-Branch Library}\n"
            "    port: 9000\n"
            "  database:\n"
            "    url: \"sqlite:///:memory:\"\n"
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(path)

        assert config.app.title == "Branch Library"
        assert config.app.port == 9000
        assert config.database.is_sqlite
        assert config.logging.level == "INFO"

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config: [unclosed")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_invalid_values(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    port: not-a-port\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_repository_config_file(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(REPOSITORY_CONFIG)

        assert config.app.title == "Local Library"
        assert config.database.url == "sqlite:///./catalog.db"
        assert config.logging.file is None

    def test_repository_config_accepts_memory_database(self):
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite:///:memory:"}, clear=True):
            config = load_templated_yaml(REPOSITORY_CONFIG)

        assert config.database.url == "sqlite:///:memory:"


class TestLoadDefaultConfig:
    def test_missing_file_uses_defaults(self, tmp_path: Path):
        env = EnvironmentVariables(
            app_environment="test", app_config_file=str(tmp_path / "absent.yaml")
        )

        config = load_default_config(env)

        assert config.app.environment == "test"
        assert config.database.url == "sqlite:///./catalog.db"


class TestConfigModels:
    def test_diagnostic_only_in_development(self):
        assert AppConfig(environment="development").diagnostic
        assert not AppConfig(environment="production").diagnostic


class TestWithContext:
    def test_override_is_scoped(self):
        original = get_config()

        with with_context(ConfigData(app=AppConfig(environment="production"))):
            assert get_config().app.environment == "production"
            assert get_config().database.url == original.database.url

        assert get_config() is original

    def test_nested_overrides_merge(self):
        with with_context(ConfigData(database=DatabaseConfig(url="sqlite:///:memory:"))):
            with with_context(ConfigData(app=AppConfig(title="Branch"))):
                config = get_config()
                assert config.database.url == "sqlite:///:memory:"
                assert config.app.title == "Branch"

    def test_rejects_other_types(self):
        with pytest.raises(ValueError):
            with with_context({"app": {}}):
                pass
