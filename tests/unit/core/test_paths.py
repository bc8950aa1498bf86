"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from coco.core.paths import APP_NAME, get_config_dir, get_settings_path, get_user_theme_path


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ):
            os.environ.pop("XDG_CONFIG_HOME", None)
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME


class TestConfigFiles:
    """Tests for files inside the config directory."""

    def test_settings_path(self, tmp_path: Path) -> None:
        """Settings live in config.toml."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_settings_path() == tmp_path / "coco" / "config.toml"

    def test_user_theme_path(self, tmp_path: Path) -> None:
        """The theme override lives in theme.toml."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_user_theme_path() == tmp_path / "coco" / "theme.toml"
