"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from ..config import Settings, load_settings
from ..session import GameMode


class TestLoadSettings:
    """Tests for reading settings from the environment."""

    def test_defaults(self):
        settings = load_settings({})
        assert settings == Settings()
        assert settings.env == "development"
        assert settings.log_level == "WARNING"
        assert settings.mode == GameMode.PVC
        assert settings.automa_delay == pytest.approx(0.35)

    def test_reads_prefixed_variables(self):
        settings = load_settings({
            "TICTAC_ENV": "production",
            "TICTAC_LOG_LEVEL": "debug",
            "TICTAC_MODE": " PVP ",
            "TICTAC_AUTOMA_DELAY": "0",
        })
        assert settings.env == "production"
        assert settings.log_level == "DEBUG"
        assert settings.mode == GameMode.PVP
        assert settings.automa_delay == 0.0

    def test_empty_values_use_defaults(self):
        assert load_settings({"TICTAC_MODE": ""}).mode == GameMode.PVC

    def test_unrelated_variables_ignored(self):
        assert load_settings({"MODE": "pvp"}).mode == GameMode.PVC

    @pytest.mark.parametrize("name,value", [
        ("TICTAC_MODE", "online"),
        ("TICTAC_LOG_LEVEL", "LOUD"),
        ("TICTAC_AUTOMA_DELAY", "-1"),
        ("TICTAC_AUTOMA_DELAY", "slow"),
    ])
    def test_invalid_values(self, name, value):
        with pytest.raises(ValidationError):
            load_settings({name: value})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TICTAC_ENV", "staging")
        assert load_settings().env == "staging"
