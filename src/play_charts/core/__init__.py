"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Store operations (SQLite)
- Logging (Loguru)
"""

# Configuration
from .config import (
    ChartsConfig,
    Config,
    LoggingConfig,
    StoreConfig,
    create_default_config,
    ensure_directories,
    get_config_dir,
    get_config_path,
    get_data_dir,
    load_config,
)

# Store
from .database import (
    COUNTABLE_TABLES,
    StoreError,
    WriteOutcome,
    classify_write_error,
    count_rows,
    create_schema,
    get_store_path,
    initialize_store,
    open_store,
    require_store,
    reset_store,
    transaction,
)

# Logging
from .output import get_log_file_path, setup_from_config, setup_loguru

__all__ = [
    # Config
    "ChartsConfig",
    "Config",
    "LoggingConfig",
    "StoreConfig",
    "create_default_config",
    "ensure_directories",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "load_config",
    # Store
    "COUNTABLE_TABLES",
    "StoreError",
    "WriteOutcome",
    "classify_write_error",
    "count_rows",
    "create_schema",
    "get_store_path",
    "initialize_store",
    "open_store",
    "require_store",
    "reset_store",
    "transaction",
    # Logging
    "get_log_file_path",
    "setup_from_config",
    "setup_loguru",
]
