"""Unit tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from freelancerpro.config import FreelancerProConfig, get_config, reload_config


class TestFreelancerProConfig:
    """Test suite for FreelancerProConfig."""

    def test_defaults(self, monkeypatch):
        for name in ("FREELANCERPRO_DATA_DIR", "LOG_LEVEL", "KANBAN_STRICT_TRANSITIONS"):
            monkeypatch.delenv(name, raising=False)
        config = FreelancerProConfig(_env_file=None)
        assert config.data_dir == Path(".freelancerpro")
        assert config.data_key == "freelancer_app_data"
        assert config.session_key == "current_user"
        assert config.log_level == "WARNING"
        assert config.kanban_strict_transitions is False

    def test_environment_overrides(self, test_config, test_env_vars):
        assert test_config.data_dir == Path(test_env_vars["FREELANCERPRO_DATA_DIR"])
        assert test_config.environment == "testing"
        assert test_config.password_hash_method == "pbkdf2:sha256:1000"

    def test_data_file_path(self, test_config):
        assert test_config.data_file_path() == test_config.data_dir / "freelancer_app_data.json"

    def test_strict_transitions_from_env(self, mock_env, monkeypatch):
        monkeypatch.setenv("KANBAN_STRICT_TRANSITIONS", "true")
        assert reload_config().kanban_strict_transitions is True

    def test_log_level_normalised(self):
        assert FreelancerProConfig(LOG_LEVEL="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("LOG_LEVEL", "LOUD"),
            ("LOG_FORMAT", "xml"),
            ("ENVIRONMENT", "staging"),
            ("PASSWORD_HASH_METHOD", "md5"),
            ("FREELANCERPRO_DATA_KEY", "../escape"),
            ("FREELANCERPRO_SESSION_KEY", "   "),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            FreelancerProConfig(**{field: value})

    def test_get_config_is_cached(self, mock_env):
        assert get_config() is get_config()

    def test_reload_config_replaces_instance(self, mock_env):
        first = get_config()
        assert reload_config() is not first
