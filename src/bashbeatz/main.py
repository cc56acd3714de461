"""
BashBeatz interactive mode and one-shot commands.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from rich.markup import escape
from rich.tree import Tree as RichTree

from bashbeatz.core import config
from bashbeatz.core.config import Config, ensure_directories, get_data_dir
from bashbeatz.core.console import safe_print
from bashbeatz.core.output import setup_loguru
from bashbeatz.domain.library.catalog import fetch_songs
from bashbeatz.domain.library.models import LibraryTree
from bashbeatz.domain.library.tree import build_library_tree
from bashbeatz.exceptions import FetchError


def get_log_file_path(current_config: Config) -> Path:
    """Configured log file, or bashbeatz.log in the data directory."""
    if current_config.logging.log_file:
        return Path(current_config.logging.log_file)
    return get_data_dir() / "bashbeatz.log"


def load_runtime_config(
    server_url: Optional[str] = None,
    log_level: Optional[str] = None,
    config_path: Optional[Path] = None,
    save: bool = False,
) -> Config:
    """Load config, apply command-line overrides, and initialize logging.

    With save=True the resulting settings are written back to the config
    file so later runs pick up the overrides.
    """
    ensure_directories()
    current_config = config.load_config(config_path)

    if server_url:
        current_config.server.base_url = server_url.rstrip("/")
    if log_level:
        current_config.logging.level = log_level.upper()

    if save and config.save_config(current_config, config_path):
        safe_print(
            f"Saved configuration to {config_path or config.get_config_path()}",
            style="green",
        )

    setup_loguru(
        get_log_file_path(current_config),
        level=current_config.logging.level,
        max_file_size_mb=current_config.logging.max_file_size_mb,
        backup_count=current_config.logging.backup_count,
    )
    return current_config


def render_library(library: LibraryTree, label: str = "Music Library") -> RichTree:
    """Render the library as a Rich tree for console output."""
    root = RichTree(f"[library.root]{escape(label)}[/]")
    for artist in library.artists.values():
        artist_branch = root.add(f"[library.artist]{escape(artist.name)}[/]")
        for album in artist.children.values():
            album_branch = artist_branch.add(f"[library.album]{escape(album.name)}[/]")
            for track in album.children.values():
                album_branch.add(escape(track.name))
    for directory in library.directories.values():
        root.add(f"[library.directory]{escape(directory.name)}/[/]")
    return root


def print_library(current_config: Config) -> int:
    """Fetch the catalog once and print it as a tree.

    Returns:
        Exit code (0 for success, 1 if the catalog could not be fetched)
    """
    try:
        entries = fetch_songs(
            current_config.server.base_url,
            timeout=current_config.server.request_timeout,
        )
    except FetchError as e:
        logger.error(f"Error in fetching music data: {e}")
        safe_print(f"❌ {e}", style="red")
        return 1

    library = build_library_tree(entries)
    safe_print(render_library(library, label=current_config.server.base_url))
    safe_print(
        f"{len(library.artists)} artists, {library.track_count} tracks, "
        f"{len(library.directories)} directories",
        style="library.summary",
    )
    return 0


def interactive_mode(current_config: Config) -> None:
    """Run the Textual UI until the user quits."""
    from bashbeatz.ui_textual import run_app

    logger.info(f"Starting BashBeatz against {current_config.server.base_url}")
    try:
        run_app(current_config)
    finally:
        logger.info("BashBeatz exited")
