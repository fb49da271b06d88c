"""Configuration file management for centsible."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from centsible.domain.models import MAX_AMOUNT

DEFAULT_CONFIG: dict[str, Any] = {
    "currency": "USD",
    "locale": "en-US",
    "max_amount": MAX_AMOUNT,
}


@dataclass(frozen=True)
class Settings:
    """Display and validation defaults for the CLI."""

    currency: str = "USD"
    locale: str = "en-US"
    max_amount: int = MAX_AMOUNT


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "centsible" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(dict(DEFAULT_CONFIG), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults for a missing file or keys.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings with file values merged over defaults.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}

    merged = {**DEFAULT_CONFIG, **config}
    return Settings(
        currency=str(merged["currency"]),
        locale=str(merged["locale"]),
        max_amount=int(merged["max_amount"]),
    )
