"""
Unit tests for settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from shadowscore import config
from shadowscore.config import ShadowScoreSettings, configure, get_settings


@pytest.fixture(autouse=True)
def reset_default_settings(monkeypatch):
    """Keep the module-level default isolated per test."""
    monkeypatch.setattr(config, "_default_settings", None)


class TestSettings:
    """Test ShadowScoreSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SHADOWSCORE_STORE_PATH", raising=False)
        settings = ShadowScoreSettings(_env_file=None)

        assert settings.store_path == Path("practice_sessions.json")
        assert settings.store_indent == 2
        assert (settings.excellent_threshold, settings.good_threshold, settings.fair_threshold) == (90.0, 70.0, 50.0)

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SHADOWSCORE_STORE_PATH", str(tmp_path / "env.json"))
        monkeypatch.setenv("SHADOWSCORE_GOOD_THRESHOLD", "75")

        settings = ShadowScoreSettings(_env_file=None)

        assert settings.store_path == tmp_path / "env.json"
        assert settings.good_threshold == 75.0

    def test_string_path_converted(self):
        settings = ShadowScoreSettings(store_path="~/sessions.json", _env_file=None)
        assert isinstance(settings.store_path, Path)
        assert "~" not in str(settings.store_path)

    @pytest.mark.parametrize("kwargs", [
        {"excellent_threshold": 60.0},
        {"fair_threshold": 80.0},
        {"good_threshold": 120.0},
        {"store_indent": -1},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            ShadowScoreSettings(_env_file=None, **kwargs)


class TestDefaultSettings:
    """Test get_settings / configure."""

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_configure_replaces_default(self, tmp_path):
        settings = configure(store_path=tmp_path / "configured.json")

        assert get_settings() is settings
        assert get_settings().store_path == tmp_path / "configured.json"
