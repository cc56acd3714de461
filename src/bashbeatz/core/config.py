"""
Configuration management for BashBeatz
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Environment variable that overrides [server] base_url
SERVER_URL_ENV = "BASHBEATZ_SERVER_URL"


@dataclass
class ServerConfig:
    """Configuration for the remote music catalog."""

    base_url: str = "http://localhost:3000"
    request_timeout: float = 10.0  # seconds for catalog requests


@dataclass
class PlayerConfig:
    """Configuration for the external player and duration prober."""

    player_command: str = "ffplay"
    probe_command: str = "ffprobe"
    probe_timeout: float = 30.0
    terminate_timeout: float = 1.0  # grace period before SIGKILL


@dataclass
class UIConfig:
    """Configuration for the terminal interface."""

    title: str = "BashBeatz Music Player"
    show_banner: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/bashbeatz/bashbeatz.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of rotated files to keep


@dataclass
class Config:
    """Main configuration object."""

    server: ServerConfig = field(default_factory=ServerConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "bashbeatz"
    return Path.home() / ".config" / "bashbeatz"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Lets a development checkout carry its own config.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    try:
        current = Path(__file__).resolve().parent
        for parent in [current] + list(current.parents):
            if (parent / "pyproject.toml").exists():
                config_path = parent / "config.toml"
                if config_path.exists():
                    return config_path
                return None
    except OSError:
        pass
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/bashbeatz (or ~/.config/bashbeatz)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "bashbeatz"
    return Path.home() / ".local" / "share" / "bashbeatz"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# BashBeatz Configuration

[server]
# Base URL of the music server (serves /songs and /songs/<name>)
base_url = "http://localhost:3000"

# Timeout in seconds for catalog requests
request_timeout = 10.0

[player]
# External player, started as: <player_command> -nodisp -autoexit -i <url>
player_command = "ffplay"

# External prober used to read the track duration
probe_command = "ffprobe"

# Seconds to wait for the prober before giving up on the duration
probe_timeout = 30.0

# Seconds to wait for the player to exit before killing it
terminate_timeout = 1.0

[ui]
# Window title
title = "BashBeatz Music Player"

# Show the banner at the top of the screen
show_banner = true

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/bashbeatz/bashbeatz.log)
# log_file = "~/bashbeatz.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of rotated log files to keep
backup_count = 5
"""


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - BASHBEATZ_SERVER_URL
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        print(f"Created default configuration at: {config_path}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        config = Config()

        if "server" in toml_data:
            server_data = toml_data["server"]
            config.server = ServerConfig(
                base_url=str(server_data.get("base_url", config.server.base_url)),
                request_timeout=float(
                    server_data.get("request_timeout", config.server.request_timeout)
                ),
            )

        if "player" in toml_data:
            player_data = toml_data["player"]
            config.player = PlayerConfig(
                player_command=player_data.get(
                    "player_command", config.player.player_command
                ),
                probe_command=player_data.get(
                    "probe_command", config.player.probe_command
                ),
                probe_timeout=float(
                    player_data.get("probe_timeout", config.player.probe_timeout)
                ),
                terminate_timeout=float(
                    player_data.get(
                        "terminate_timeout", config.player.terminate_timeout
                    )
                ),
            )

        if "ui" in toml_data:
            ui_data = toml_data["ui"]
            config.ui = UIConfig(
                title=ui_data.get("title", config.ui.title),
                show_banner=ui_data.get("show_banner", config.ui.show_banner),
            )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=logging_data.get("level", config.logging.level).upper(),
                log_file=log_file,
                max_file_size_mb=logging_data.get(
                    "max_file_size_mb", config.logging.max_file_size_mb
                ),
                backup_count=logging_data.get(
                    "backup_count", config.logging.backup_count
                ),
            )

        return _apply_env_overrides(config)

    except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(Config())


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to a loaded config."""
    server_url = os.environ.get(SERVER_URL_ENV)
    if server_url:
        config.server.base_url = server_url
    config.server.base_url = config.server.base_url.rstrip("/")
    return config


def save_config(config: Config, config_path: Optional[Path] = None) -> bool:
    """Save configuration to file."""
    config_path = config_path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        toml_content = f"""# BashBeatz Configuration

[server]
base_url = "{config.server.base_url}"
request_timeout = {config.server.request_timeout}

[player]
player_command = "{config.player.player_command}"
probe_command = "{config.player.probe_command}"
probe_timeout = {config.player.probe_timeout}
terminate_timeout = {config.player.terminate_timeout}

[ui]
title = "{config.ui.title}"
show_banner = {str(config.ui.show_banner).lower()}

[logging]
level = "{config.logging.level}"
max_file_size_mb = {config.logging.max_file_size_mb}
backup_count = {config.logging.backup_count}"""

        if config.logging.log_file:
            toml_content += f'\nlog_file = "{config.logging.log_file}"'

        toml_content += "\n"

        with open(config_path, "w", encoding="utf-8") as f:
            f.write(toml_content)

        return True

    except OSError as e:
        print(f"Error saving configuration to {config_path}: {e}")
        return False


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
