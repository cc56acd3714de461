"""Library domain - remote catalog and the artist/album/track tree.

This domain handles:
- Catalog entry and tree node models
- Fetching the song listing from the music server
- Grouping tracks into the library tree
"""

# Models
from .models import (
    UNKNOWN_ALBUM,
    UNKNOWN_ARTIST,
    AlbumNode,
    ArtistNode,
    CatalogEntry,
    DirectoryEntry,
    DirectoryNode,
    LibraryNode,
    LibraryTree,
    TrackMetadata,
    TrackNode,
    TrackRecord,
)

# Catalog access
from .catalog import (
    fetch_songs,
    parse_entries,
    parse_entry,
    songs_url,
    track_url,
)

# Tree construction
from .tree import add_directory, add_track, build_library_tree, resolve_labels

__all__ = [
    # Models
    "UNKNOWN_ALBUM",
    "UNKNOWN_ARTIST",
    "AlbumNode",
    "ArtistNode",
    "CatalogEntry",
    "DirectoryEntry",
    "DirectoryNode",
    "LibraryNode",
    "LibraryTree",
    "TrackMetadata",
    "TrackNode",
    "TrackRecord",
    # Catalog
    "fetch_songs",
    "parse_entries",
    "parse_entry",
    "songs_url",
    "track_url",
    # Tree
    "add_directory",
    "add_track",
    "build_library_tree",
    "resolve_labels",
]
