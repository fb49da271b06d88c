"""Tests for centsible.config."""

import stat
from pathlib import Path

import pytest

from centsible.config import (
    Settings,
    create_default_config,
    get_config_path,
    load_config,
    load_settings,
    save_config,
)


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "centsible" / "config.toml"

    def test_falls_back_to_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use ~/.config when XDG_CONFIG_HOME is unset."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_config_path() == tmp_path / ".config" / "centsible" / "config.toml"


class TestLoadSettings:
    """Tests for config round trips and load_settings."""

    def test_default_config(self, tmp_path: Path) -> None:
        """Should write defaults with owner-only permissions."""
        config_path = tmp_path / "centsible" / "config.toml"
        create_default_config(config_path)

        assert load_config(config_path) == {"currency": "USD", "locale": "en-US", "max_amount": 999_999_999}
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should not require a config file."""
        assert load_settings(tmp_path / "missing.toml") == Settings()

    def test_partial_file_merges_over_defaults(self, tmp_path: Path) -> None:
        """Should keep defaults for keys the file does not set."""
        config_path = tmp_path / "config.toml"
        save_config({"currency": "GBP", "locale": "en-GB"}, config_path)

        settings = load_settings(config_path)

        assert settings.currency == "GBP"
        assert settings.locale == "en-GB"
        assert settings.max_amount == 999_999_999

    def test_missing_file_raises_on_load_config(self, tmp_path: Path) -> None:
        """load_config should surface the missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")
