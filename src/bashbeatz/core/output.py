"""
Unified output system using Loguru.
Every user-facing message is written to the log file and then routed either
to the terminal UI status box or to the console.
"""

import threading
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from .console import safe_print

# Status callback registered while the Textual UI owns the terminal
_ui_mode_active = False
_status_callback: Optional[Callable[[str, str], None]] = None
_ui_mode_lock = threading.Lock()

LEVEL_STYLES = {
    "debug": "cyan",
    "info": "white",
    "warning": "yellow",
    "error": "red",
}


def setup_loguru(
    log_file: Path,
    level: str = "INFO",
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure loguru for file-only logging (the terminal UI handles display).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        max_file_size_mb: Size at which the log file is rotated
        backup_count: Number of rotated files to keep
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default stderr handler
    logger.remove()

    logger.add(
        log_file,
        rotation=f"{max_file_size_mb} MB",
        retention=backup_count,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def set_ui_mode(status_callback: Callable[[str, str], None]) -> None:
    """
    Enable UI mode - log() stops printing and calls status_callback instead.

    Args:
        status_callback: Receives (message, style); must be safe to call
            from the event loop thread
    """
    global _ui_mode_active, _status_callback
    with _ui_mode_lock:
        _ui_mode_active = True
        _status_callback = status_callback
        logger.debug("UI mode enabled - log() will route through status callback")


def clear_ui_mode() -> None:
    """Disable UI mode - restores console printing."""
    global _ui_mode_active, _status_callback
    with _ui_mode_lock:
        _ui_mode_active = False
        _status_callback = None
        logger.debug("UI mode disabled - log() will print to console")


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to file AND shows the message to the user.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger.opt(depth=1), level)
    log_func(message)

    style = LEVEL_STYLES.get(level, "white")
    with _ui_mode_lock:
        callback = _status_callback if _ui_mode_active else None

    if callback is not None:
        callback(message, style)
    else:
        safe_print(message, style=style)
