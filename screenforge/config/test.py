"""Tests for configuration management."""

import logging
from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_output_dir,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("SCREENFORGE_APP_TITLE", raising=False)
        assert get_environment(EnvVar.APP_TITLE) == "Flutter UI App"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("SCREENFORGE_ID_PREFIX", "env")
        assert get_environment(EnvVar.ID_PREFIX, override="manual") == "manual"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("SCREENFORGE_ID_PREFIX", "ai")
        assert get_environment(EnvVar.ID_PREFIX) == "ai"

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("SCREENFORGE_DARK_MODE", value)
            assert get_environment(EnvVar.DARK_MODE) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("SCREENFORGE_DARK_MODE", value)
            assert get_environment(EnvVar.DARK_MODE) is False

    @pytest.mark.unit
    def test_bool_unrecognized_uses_default(self, monkeypatch, caplog):
        """Unrecognized boolean strings fall back to the default."""
        monkeypatch.setenv("SCREENFORGE_DARK_MODE", "maybe")
        assert get_environment(EnvVar.DARK_MODE) is False
        assert "SCREENFORGE_DARK_MODE" in caplog.text

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch, tmp_path):
        """Path variables are converted to Path objects."""
        monkeypatch.setenv("SCREENFORGE_OUTPUT_DIR", str(tmp_path))
        result = get_environment(EnvVar.OUTPUT_DIR)
        assert isinstance(result, Path)
        assert result == tmp_path


class TestEnvironmentInfo:
    """Tests for metadata introspection."""

    @pytest.mark.unit
    def test_info_is_env_config(self):
        info = get_environment_info(EnvVar.LOG_LEVEL)
        assert isinstance(info, EnvConfig)
        assert info.name == "SCREENFORGE_LOG_LEVEL"
        assert info.category == "logging"

    @pytest.mark.unit
    def test_all_names_are_prefixed(self):
        """Every variable lives in the SCREENFORGE_ namespace."""
        for var in EnvVar:
            assert var.value.name.startswith("SCREENFORGE_")

    @pytest.mark.unit
    def test_list_by_category(self):
        codegen = list_environment_variables("codegen")
        assert set(codegen) == {EnvVar.DARK_MODE, EnvVar.APP_TITLE}
        assert list_environment_variables() == list(EnvVar)


class TestConvenienceFunctions:
    """Tests for derived configuration helpers."""

    @pytest.mark.unit
    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("SCREENFORGE_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    @pytest.mark.unit
    def test_log_level_default(self, monkeypatch):
        monkeypatch.delenv("SCREENFORGE_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO

    @pytest.mark.unit
    def test_output_dir_override(self, tmp_path):
        assert get_output_dir(tmp_path) == tmp_path

    @pytest.mark.unit
    def test_output_dir_defaults_to_cwd(self, monkeypatch):
        monkeypatch.delenv("SCREENFORGE_OUTPUT_DIR", raising=False)
        assert get_output_dir() == Path.cwd()
