"""Tests for configuration loading and logging setup."""

import sys

import pytest
from loguru import logger

from play_charts.core.config import (
    ChartsConfig,
    Config,
    LoggingConfig,
    create_default_config,
    ensure_directories,
    get_data_dir,
    load_config,
)
from play_charts.core.output import setup_from_config, setup_loguru


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Isolate XDG_CONFIG_HOME and the store override."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("PLAY_CHARTS_STORE", raising=False)
    return tmp_path


def test_missing_file_gives_defaults(config_home):
    config = load_config(config_home / "absent.toml")
    assert config == Config()
    assert config.charts.min_year == 2011
    assert config.charts.max_year == 2020
    assert config.store.name == "traktor_charts"


def test_reads_sections(config_home):
    path = config_home / "config.toml"
    path.write_text(
        """
[store]
name = "sessions"
reset_on_start = false

[charts]
min_year = 2005
max_year = 2024
month_limit = 5

[logging]
level = "debug"
console_output = true
"""
    )

    config = load_config(path)

    assert config.store.name == "sessions"
    assert config.store.reset_on_start is False
    assert config.charts == ChartsConfig(min_year=2005, max_year=2024, month_limit=5)
    assert config.logging.level == "DEBUG"
    assert config.logging.console_output is True


def test_inverted_window_falls_back_to_defaults(config_home):
    path = config_home / "config.toml"
    path.write_text("[charts]\nmin_year = 2020\nmax_year = 2010\n")

    config = load_config(path)

    assert config.charts == ChartsConfig()


def test_invalid_toml_falls_back_to_defaults(config_home):
    path = config_home / "config.toml"
    path.write_text("[charts\nmin_year = ")

    assert load_config(path) == Config()


def test_environment_overrides_store_name(config_home, monkeypatch):
    monkeypatch.setenv("PLAY_CHARTS_STORE", "from_env")
    config = load_config(config_home / "absent.toml")
    assert config.store.name == "from_env"


def test_charts_validate_rejects_bad_limits():
    with pytest.raises(ValueError):
        ChartsConfig(year_limit=0).validate()


def test_data_dir_honors_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert get_data_dir() == tmp_path / "play-charts"


def test_setup_loguru_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "play-charts.log"
    try:
        setup_loguru(log_file, level="DEBUG")
        logger.debug("chart run started")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    contents = log_file.read_text()
    assert "Loguru initialized" in contents
    assert "chart run started" in contents


def test_default_config_file_matches_defaults(config_home):
    path = config_home / "config.toml"
    path.write_text(create_default_config())

    assert load_config(path) == Config()


def test_ensure_directories(config_home, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(config_home / "data"))

    ensure_directories()

    assert (config_home / "config" / "play-charts").is_dir()
    assert (config_home / "data" / "play-charts").is_dir()


def test_setup_from_config_uses_custom_log_file(tmp_path):
    log_file = tmp_path / "custom.log"
    try:
        setup_from_config(LoggingConfig(level="WARNING", log_file=str(log_file)))
        logger.info("below threshold")
        logger.warning("import skipped a play")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    contents = log_file.read_text()
    assert "import skipped a play" in contents
    assert "below threshold" not in contents
