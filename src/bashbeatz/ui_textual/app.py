"""
Main Textual application for BashBeatz
Banner on top, library tree / song table / record box in the middle,
progress bar at the bottom
"""

from functools import partial
from typing import Optional

from loguru import logger
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import DataTable, ProgressBar, Static, Tree

from bashbeatz.core.config import Config
from bashbeatz.core.output import clear_ui_mode, log, set_ui_mode
from bashbeatz.domain.library.catalog import fetch_songs
from bashbeatz.domain.library.models import LibraryTree
from bashbeatz.domain.library.tree import build_library_tree
from bashbeatz.domain.playback.controller import (
    DurationCallback,
    ExitCallback,
    PlaybackController,
)
from bashbeatz.domain.playback.probe import probe_duration
from bashbeatz.domain.playback.process import ProcessHandle, spawn_player
from bashbeatz.exceptions import FetchError
from bashbeatz.router import (
    EMPTY_ROW,
    TABLE_HEADERS,
    describe_track,
    safe_route_selection,
)


def render_banner(title: str) -> Text:
    banner = Text(justify="center")
    banner.append("♪ ", style="bold cyan")
    banner.append("BASH", style="bold magenta")
    banner.append("BEATZ", style="bold white")
    banner.append(" ♪", style="bold cyan")
    banner.append(f"\n{title}", style="dim")
    return banner


def populate_tree(widget: Tree, library: LibraryTree) -> None:
    """Replace the tree widget's contents with the library."""
    widget.clear()
    root = widget.root
    for artist in library.artists.values():
        artist_item = root.add(Text(artist.name), data=artist)
        for album in artist.children.values():
            album_item = artist_item.add(Text(album.name), data=album)
            for track in album.children.values():
                album_item.add_leaf(Text(track.name), data=track)
    for directory in library.directories.values():
        root.add_leaf(Text(f"{directory.name}/"), data=directory)
    root.expand()


class BashBeatzApp(App):
    """
    BashBeatz Textual application.

    Layout:
    - Fixed top: banner
    - Middle: library tree, song table, current record box
    - Fixed bottom: playback progress
    """

    CSS = """
    Screen {
        layout: vertical;
    }

    #banner {
        height: 5;
        border: solid magenta;
        content-align: center middle;
    }

    #main {
        height: 1fr;
    }

    #library {
        width: 1fr;
        border: solid cyan;
    }

    #songs {
        width: 2fr;
        border: solid magenta;
    }

    #record-box {
        width: 1fr;
        border: solid magenta;
        padding: 0 1;
    }

    #progress {
        height: 3;
        border: solid cyan;
        padding: 0 1;
    }

    #progress Bar {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("p", "toggle_pause", "Play/Pause"),
        Binding("s", "stop", "Stop"),
        Binding("r", "refresh", "Refresh"),
        Binding("tab", "toggle_focus", "Switch pane", priority=True),
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, config: Config):
        super().__init__()
        self.config = config
        self.title = config.ui.title
        self.library = LibraryTree()
        self.controller = PlaybackController(
            base_url=config.server.base_url,
            scheduler=self,
            notify=log,
            on_progress=self.update_progress,
            spawn=partial(
                spawn_player,
                player_command=config.player.player_command,
                terminate_timeout=config.player.terminate_timeout,
            ),
            run_probe=self.probe_in_background,
            watch_exit=self.wait_for_exit,
        )

    def compose(self) -> ComposeResult:
        if self.config.ui.show_banner:
            yield Static(render_banner(self.config.ui.title), id="banner")

        with Horizontal(id="main"):
            library = Tree("Music Library", id="library")
            library.border_title = "Music Library"
            yield library

            songs = DataTable(id="songs", cursor_type="row")
            songs.border_title = "All Songs"
            yield songs

            record_box = Static("No record selected", id="record-box")
            record_box.border_title = "Current Record"
            yield record_box

        yield ProgressBar(total=100, show_eta=False, id="progress")

    def on_mount(self) -> None:
        set_ui_mode(self.set_record_text)

        songs = self.query_one("#songs", DataTable)
        songs.add_columns(*TABLE_HEADERS)
        songs.add_row(*EMPTY_ROW)

        self.query_one("#library", Tree).focus()
        self.load_library()

    def on_unmount(self) -> None:
        self.controller.stop()
        clear_ui_mode()

    # Record box and progress

    def set_record_text(self, message: str, style: str = "white") -> None:
        self.query_one("#record-box", Static).update(Text(message, style=style))

    def update_progress(self, percent: float) -> None:
        self.query_one("#progress", ProgressBar).update(progress=percent)

    def show_rows(self, rows: list) -> None:
        songs = self.query_one("#songs", DataTable)
        songs.clear()
        # Text cells so names are never parsed as markup
        songs.add_rows([tuple(Text(str(cell)) for cell in row) for row in rows])

    # Library loading

    def load_library(self) -> None:
        """Fetch the catalog in a worker thread and rebuild the tree on success."""
        self.run_worker(
            self._fetch_library, thread=True, group="catalog", exit_on_error=False
        )

    def _fetch_library(self) -> None:
        try:
            entries = fetch_songs(
                self.config.server.base_url,
                timeout=self.config.server.request_timeout,
            )
        except FetchError as e:
            self.call_from_thread(log, f"Error in fetching music data: {e}", "error")
            return
        self.call_from_thread(self._show_library, build_library_tree(entries))

    def _show_library(self, library: LibraryTree) -> None:
        self.library = library
        populate_tree(self.query_one("#library", Tree), library)
        logger.info(
            f"Library loaded: {len(library.artists)} artists, {library.track_count} tracks"
        )

    # Background hooks for the playback controller

    def probe_in_background(self, url: str, done: DurationCallback) -> None:
        """Probe the duration off the event loop; deliver the result on it."""
        player_config = self.config.player

        def probe() -> None:
            duration = probe_duration(
                url,
                probe_command=player_config.probe_command,
                timeout=player_config.probe_timeout,
            )
            self.call_from_thread(done, duration)

        self.run_worker(probe, thread=True, group="probe", exit_on_error=False)

    def wait_for_exit(self, process: ProcessHandle, done: ExitCallback) -> None:
        """Wait for the player to exit off the event loop; report the code on it."""

        def wait() -> None:
            returncode = process.wait()
            self.call_from_thread(done, returncode)

        self.run_worker(wait, thread=True, group="player", exit_on_error=False)

    # Events and actions

    def on_tree_node_selected(self, event: Tree.NodeSelected) -> None:
        node = event.node.data
        if node is None:
            return

        selection = safe_route_selection(self.library, node)
        self.show_rows(selection.rows)
        self.set_record_text(selection.status)

        if selection.play is not None:
            track = selection.play
            if self.controller.play(track.file_path):
                self.set_record_text(
                    f"Now playing: {track.name}\n\n{describe_track(track)}"
                )

    def action_toggle_pause(self) -> None:
        self.controller.toggle_pause()

    def action_stop(self) -> None:
        if self.controller.is_active:
            self.controller.stop()
            log("Stopped")

    def action_refresh(self) -> None:
        log("Refreshing library...")
        self.load_library()

    def action_toggle_focus(self) -> None:
        library = self.query_one("#library", Tree)
        songs = self.query_one("#songs", DataTable)
        if self.focused is library:
            songs.focus()
        else:
            library.focus()


def run_app(config: Config, app: Optional[BashBeatzApp] = None) -> None:
    """Run the Textual app until the user quits."""
    app = app or BashBeatzApp(config)
    app.run()
