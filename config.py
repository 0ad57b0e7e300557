"""Configuration management for Pennywise.

Reads configuration from ~/.config/pennywise.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w

from models.currency import find_currency


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    default_user: Optional[str] = None
    currency: str = "USD"
    enable_reset: bool = False

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "pennywise"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="pennywise.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "pennywise.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Args:
        config_path: Optional override for the config file location.

    Returns:
        Config object with loaded or default values.

    Raises:
        ValueError: If the configured currency is not a supported code.
    """
    config_path = config_path or get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "pennywise"))
    default_user = data.get("default_user") or None
    currency = data.get("currency", "USD")
    enable_reset = data.get("enable_reset", False)

    if find_currency(currency) is None:
        raise ValueError(f"Unsupported currency in config: {currency}")

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", "pennywise.db")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        default_user=default_user,
        currency=currency,
        enable_reset=enable_reset,
    )


def write_config(config: Config, config_path: Optional[Path] = None) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
        config_path: Optional override for the config file location.
    """
    config_path = config_path or get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # TOML has no null, so an unset default user is written as ""
    data = {
        "base_dir": str(config.base_dir),
        "default_user": config.default_user or "",
        "currency": config.currency,
        "enable_reset": config.enable_reset,
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
