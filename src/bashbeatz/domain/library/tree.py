"""
Library tree construction.

Groups a flat catalog listing into Artist -> Album -> Track nodes. The
builder is pure: no I/O, no exceptions for malformed entries, and the
result depends only on the entries and their order.
"""

import os
from typing import Iterable, Tuple

from loguru import logger

from .models import (
    UNKNOWN_ALBUM,
    UNKNOWN_ARTIST,
    AlbumNode,
    ArtistNode,
    DirectoryEntry,
    DirectoryNode,
    LibraryTree,
    TrackNode,
    TrackRecord,
)


def resolve_labels(record: TrackRecord) -> Tuple[str, str, str]:
    """Return the (artist, album, title) a record is filed under.

    Missing or empty fields fall back to "Unknown Artist", "Unknown Album"
    and the file's base name.
    """
    metadata = record.metadata
    artist = (metadata.artist if metadata else None) or UNKNOWN_ARTIST
    album = (metadata.album if metadata else None) or UNKNOWN_ALBUM
    title = (metadata.title if metadata else None) or os.path.basename(
        record.file_path
    )
    return artist, album, title


def add_track(tree: LibraryTree, record: TrackRecord) -> TrackNode:
    """Insert one record, creating its artist and album on first sight.

    A track whose title already exists in the album replaces the old node.
    """
    artist_name, album_name, title = resolve_labels(record)
    metadata = record.metadata

    artist = tree.artists.get(artist_name)
    if artist is None:
        artist = ArtistNode(name=artist_name)
        tree.artists[artist_name] = artist

    album = artist.children.get(album_name)
    if album is None:
        album = AlbumNode(name=album_name, artist=artist_name)
        artist.children[album_name] = album

    if title in album.children:
        logger.debug(
            f"Replacing '{title}' in {artist_name}/{album_name} with {record.file_path}"
        )

    node = TrackNode(
        name=title,
        file_path=record.file_path,
        track=metadata.track if metadata else None,
        duration=metadata.duration if metadata else None,
        artist=artist_name,
        album=album_name,
        year=metadata.year if metadata else None,
    )
    album.children[title] = node
    return node


def add_directory(tree: LibraryTree, entry: DirectoryEntry) -> DirectoryNode:
    """Insert a directory placeholder as a top-level node keyed by base name."""
    name = os.path.basename(entry.name.rstrip("/")) or entry.name
    node = DirectoryNode(name=name)
    tree.directories[name] = node
    return node


def build_library_tree(entries: Iterable[object]) -> LibraryTree:
    """Build a fresh library tree from catalog entries.

    Args:
        entries: TrackRecord / DirectoryEntry values in server order.
            Records without metadata and unknown values are skipped.

    Returns:
        New LibraryTree; the input is never mutated
    """
    tree = LibraryTree()
    skipped = 0

    for entry in entries:
        if isinstance(entry, TrackRecord) and entry.file_path and entry.metadata is not None:
            add_track(tree, entry)
        elif isinstance(entry, DirectoryEntry) and entry.name:
            add_directory(tree, entry)
        else:
            skipped += 1

    logger.debug(
        f"Built library tree: {len(tree.artists)} artists, "
        f"{len(tree.directories)} directories, {skipped} skipped"
    )
    return tree
