"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    load_config,
    save_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    create_default_config,
    ensure_directories,
)

# Console
from .console import get_console, safe_print

# Output
from .output import setup_loguru, set_ui_mode, clear_ui_mode, log

__all__ = [
    # Config
    "Config",
    "load_config",
    "save_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "create_default_config",
    "ensure_directories",
    # Console
    "get_console",
    "safe_print",
    # Output
    "setup_loguru",
    "set_ui_mode",
    "clear_ui_mode",
    "log",
]
