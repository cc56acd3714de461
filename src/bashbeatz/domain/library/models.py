"""
Music library domain models.

Input records as delivered by the catalog, and the nodes of the
Artist -> Album -> Track tree built from them.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, NamedTuple, Optional, Union

UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"


class TrackMetadata(NamedTuple):
    """Tag metadata reported by the server for one file. Every field is optional."""
    artist: Optional[str] = None
    album: Optional[str] = None
    title: Optional[str] = None
    year: Optional[str] = None
    track: Optional[str] = None  # Track number as reported, e.g. "3" or "3/12"
    duration: Optional[str] = None  # Display duration, e.g. "03:41"


class TrackRecord(NamedTuple):
    """One audio file in the remote catalog.

    metadata is None when the server sent no metadata object at all; such
    records are not placed in the tree.
    """
    file_path: str
    metadata: Optional[TrackMetadata] = None


class DirectoryEntry(NamedTuple):
    """Directory placeholder in the remote catalog."""
    name: str


CatalogEntry = Union[TrackRecord, DirectoryEntry]


@dataclass
class TrackNode:
    """Leaf of the library tree. name is the display title."""
    name: str
    file_path: str
    track: Optional[str] = None
    duration: Optional[str] = None
    artist: str = UNKNOWN_ARTIST
    album: str = UNKNOWN_ALBUM
    year: Optional[str] = None


@dataclass
class AlbumNode:
    """Album grouping. artist is the key of the owning ArtistNode."""
    name: str
    artist: str
    children: Dict[str, TrackNode] = field(default_factory=dict)


@dataclass
class ArtistNode:
    name: str
    children: Dict[str, AlbumNode] = field(default_factory=dict)


@dataclass
class DirectoryNode:
    """Top-level directory placeholder; never has children."""
    name: str
    children: Dict[str, "LibraryNode"] = field(default_factory=dict)


LibraryNode = Union[ArtistNode, AlbumNode, TrackNode, DirectoryNode]


@dataclass
class LibraryTree:
    """Root of the library.

    Artists and directories live in separate ordered mappings so a directory
    can never be merged into an artist of the same name.
    """
    artists: Dict[str, ArtistNode] = field(default_factory=dict)
    directories: Dict[str, DirectoryNode] = field(default_factory=dict)

    def artist_of(self, album: AlbumNode) -> Optional[ArtistNode]:
        """Resolve an album's parent artist through the root."""
        artist = self.artists.get(album.artist)
        if artist is None or artist.children.get(album.name) is not album:
            return None
        return artist

    def iter_tracks(self) -> Iterator[TrackNode]:
        """Yield every track in artist, album, title insertion order."""
        for artist in self.artists.values():
            for album in artist.children.values():
                yield from album.children.values()

    @property
    def track_count(self) -> int:
        return sum(1 for _ in self.iter_tracks())

    @property
    def is_empty(self) -> bool:
        return not self.artists and not self.directories
