"""
Configuration management for Play Charts
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger


@dataclass
class StoreConfig:
    """Configuration for the play history store."""

    name: str = "traktor_charts"  # Store file is <data dir>/<name>.db
    reset_on_start: bool = True


@dataclass
class ChartsConfig:
    """Configuration for chart windows and sizes."""

    min_year: int = 2011
    max_year: int = 2020
    year_limit: int = 15
    month_limit: int = 10

    def validate(self) -> None:
        """Validate chart configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) is after max_year ({self.max_year})"
            )
        if self.year_limit < 1 or self.month_limit < 1:
            raise ValueError(
                f"Chart limits must be positive "
                f"(year_limit={self.year_limit}, month_limit={self.month_limit})"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/play-charts/play-charts.log)
    )
    console_output: bool = False


@dataclass
class Config:
    """Main configuration object."""

    store: StoreConfig = field(default_factory=StoreConfig)
    charts: ChartsConfig = field(default_factory=ChartsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "play-charts"
    return Path.home() / ".config" / "play-charts"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks the current working directory first, then
    XDG_CONFIG_HOME/play-charts (or ~/.config/play-charts).
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "play-charts"
    return Path.home() / ".local" / "share" / "play-charts"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Play Charts Configuration

[store]
# Store file name (without extension) inside the data directory
name = "traktor_charts"

# Delete the store before each import run
reset_on_start = true

[charts]
# Inclusive year window, reported newest first
min_year = 2011
max_year = 2020

# Entries per yearly and monthly chart
year_limit = 15
month_limit = 10

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/play-charts/play-charts.log)
# log_file = "/path/to/play-charts.log"

# Also output logs to stderr
console_output = false
""".strip()


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - PLAY_CHARTS_STORE
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()
    config = Config()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error(f"Error loading configuration from {config_path}: {e}")
            logger.warning("Using default configuration.")
            toml_data = {}

        if "store" in toml_data:
            store_data = toml_data["store"]
            config.store = StoreConfig(
                name=store_data.get("name", config.store.name),
                reset_on_start=store_data.get(
                    "reset_on_start", config.store.reset_on_start
                ),
            )

        if "charts" in toml_data:
            charts_data = toml_data["charts"]
            config.charts = ChartsConfig(
                min_year=charts_data.get("min_year", config.charts.min_year),
                max_year=charts_data.get("max_year", config.charts.max_year),
                year_limit=charts_data.get("year_limit", config.charts.year_limit),
                month_limit=charts_data.get(
                    "month_limit", config.charts.month_limit
                ),
            )
            try:
                config.charts.validate()
            except ValueError as e:
                logger.warning(f"Invalid charts configuration: {e}")
                logger.warning("Using default charts configuration.")
                config.charts = ChartsConfig()

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=logging_data.get("level", config.logging.level).upper(),
                log_file=log_file,
                console_output=logging_data.get(
                    "console_output", config.logging.console_output
                ),
            )

    store_override = os.environ.get("PLAY_CHARTS_STORE")
    if store_override:
        config.store.name = store_override

    return config


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
