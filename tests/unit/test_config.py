"""Tests for settings loading."""

import os
from unittest.mock import patch

import pytest

from tea.config import DEFAULT_AUTOSTART, load_settings

_VARS = ("TEA_AUTOSTART", "TEA_PROMPT_USER_HOST", "TEA_PROMPT_COLOR", "TEA_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env():
    """Drop TEA_* variables, and anything load_dotenv adds, for each test."""
    with patch.dict(os.environ):
        for name in _VARS:
            os.environ.pop(name, None)
        yield


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults(self, tmp_path) -> None:
        settings = load_settings(tmp_path / "missing.env")
        assert settings.autostart == os.path.expanduser(DEFAULT_AUTOSTART)
        assert settings.show_user_host is False
        assert settings.prompt_color == "green"
        assert settings.log_level == "WARNING"

    def test_reads_env_file(self, tmp_path) -> None:
        env = tmp_path / ".env"
        env.write_text(
            "TEA_AUTOSTART=/opt/tea/start\nTEA_PROMPT_USER_HOST=yes\nTEA_LOG_LEVEL=debug\n",
            encoding="utf-8",
        )
        settings = load_settings(env)
        assert settings.autostart == "/opt/tea/start"
        assert settings.show_user_host is True
        assert settings.log_level == "DEBUG"

    def test_environment_wins_over_env_file(self, tmp_path, monkeypatch) -> None:
        env = tmp_path / ".env"
        env.write_text("TEA_PROMPT_COLOR=blue\n", encoding="utf-8")
        monkeypatch.setenv("TEA_PROMPT_COLOR", "magenta")
        assert load_settings(env).prompt_color == "magenta"

    def test_empty_autostart_disables(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("TEA_AUTOSTART", "")
        assert load_settings(tmp_path / "missing.env").autostart is None

    def test_unknown_log_level_falls_back(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("TEA_LOG_LEVEL", "chatty")
        assert load_settings(tmp_path / "missing.env").log_level == "WARNING"
