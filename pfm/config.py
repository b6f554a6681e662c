"""Configuration file management for pfm.

The config file only holds display and logging preferences. Accounts and
budgets are never written to disk.
"""

import logging
import os
import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import tomli_w

from pfm.domain.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Immutable user preferences."""

    currency_symbol: str = "$"
    history_limit: int = 10
    log_level: str = "WARNING"


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
    return get_xdg_config_home() / "pfm" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    save_config({"preferences": asdict(Settings())}, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
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


def settings_from_config(config: dict[str, Any]) -> Settings:
    """Build Settings from a config dictionary, filling in defaults.

    Args:
        config: Parsed config file contents.

    Returns:
        Validated Settings.

    Raises:
        ConfigError: If a value has the wrong type or is out of range.
    """
    preferences = config.get("preferences", {})
    if not isinstance(preferences, dict):
        raise ConfigError("[preferences] must be a table")

    defaults = Settings()
    symbol = preferences.get("currency_symbol", defaults.currency_symbol)
    limit = preferences.get("history_limit", defaults.history_limit)
    level = str(preferences.get("log_level", defaults.log_level)).upper()

    if not isinstance(symbol, str):
        raise ConfigError("currency_symbol must be a string")
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ConfigError("history_limit must be a positive integer")
    if level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    return Settings(currency_symbol=symbol, history_limit=limit, log_level=level)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load Settings, using defaults when no config file exists.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings from the file, or defaults.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()
    return settings_from_config(config)


def configure_logging(level: str) -> None:
    """Configure root logging for the CLI process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
