"""Configuration management for Tally.

Reads configuration from ~/.config/tally.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    log_level: str
    log_dir: Path
    log_to_file: bool
    currency_symbol: str
    top_expenses: int

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "tally"
        return cls(
            base_dir=base_dir,
            log_level="INFO",
            log_dir=base_dir / "logs",
            log_to_file=True,
            currency_symbol="₹",
            top_expenses=5,
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "tally.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    defaults = Config.default()
    base_dir = Path(data.get("base_dir", defaults.base_dir))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))
    log_to_file = bool(log_config.get("to_file", defaults.log_to_file))

    display_config = data.get("display", {})
    currency_symbol = display_config.get("currency_symbol", defaults.currency_symbol)

    reports_config = data.get("reports", {})
    top_expenses = int(reports_config.get("top_expenses", defaults.top_expenses))

    return Config(
        base_dir=base_dir,
        log_level=log_level,
        log_dir=log_dir,
        log_to_file=log_to_file,
        currency_symbol=currency_symbol,
        top_expenses=top_expenses,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
            "to_file": config.log_to_file,
        },
        "display": {
            "currency_symbol": config.currency_symbol,
        },
        "reports": {
            "top_expenses": config.top_expenses,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
