"""
Selection routing for BashBeatz.

Turns a library tree selection into song-table rows, record-box text and,
for tracks, a playback request.
"""

from typing import List, NamedTuple, Optional

from loguru import logger

from bashbeatz.domain.library.models import (
    AlbumNode,
    ArtistNode,
    DirectoryNode,
    LibraryTree,
    TrackNode,
)
from bashbeatz.exceptions import SelectionError

TABLE_HEADERS = ("Title", "Track", "Duration")
EMPTY_ROW = ("No Songs Selected", "", "")
ERROR_ROW = ("Error", "", "")

Row = tuple


class Selection(NamedTuple):
    """What the UI should show after a tree selection."""
    rows: List[Row]
    status: str
    play: Optional[TrackNode] = None  # Track to start, if any


def track_row(track: TrackNode) -> Row:
    return (track.name, track.track or "N/A", track.duration or "00:00")


def album_rows(album: AlbumNode) -> List[Row]:
    rows = [track_row(track) for track in album.children.values()]
    return rows or [EMPTY_ROW]


def describe_track(track: TrackNode) -> str:
    """Record-box text for a track."""
    lines = [f"Title: {track.name}", f"Artist: {track.artist}", f"Album: {track.album}"]
    if track.year:
        lines.append(f"Release Date: {track.year}")
    return "\n".join(lines)


def route_selection(tree: LibraryTree, node: object) -> Selection:
    """Map a selected node to table rows and status text.

    Raises:
        SelectionError: If node is not a library node
    """
    if isinstance(node, TrackNode):
        return Selection(
            rows=[track_row(node)],
            status=f"Now playing: {node.name}",
            play=node,
        )

    if isinstance(node, AlbumNode):
        artist = tree.artist_of(node)
        artist_name = artist.name if artist else node.artist
        return Selection(
            rows=album_rows(node),
            status=f"Artist: {artist_name}, Album: {node.name}",
        )

    if isinstance(node, ArtistNode):
        return Selection(rows=[EMPTY_ROW], status=f"Artist: {node.name}")

    if isinstance(node, DirectoryNode):
        return Selection(rows=[EMPTY_ROW], status=f"Directory: {node.name}")

    raise SelectionError(f"Unknown selection: {node!r}")


def safe_route_selection(tree: LibraryTree, node: object) -> Selection:
    """route_selection that reports failures as an error row instead of raising."""
    try:
        return route_selection(tree, node)
    except SelectionError as e:
        logger.warning(f"Selection failed: {e}")
        return Selection(rows=[ERROR_ROW], status=f"Error: {e}")
