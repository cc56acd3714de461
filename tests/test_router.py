"""Tests for tree selection routing."""

import pytest

from bashbeatz.domain.library.models import (
    AlbumNode,
    DirectoryEntry,
    LibraryTree,
    TrackMetadata,
    TrackRecord,
)
from bashbeatz.domain.library.tree import build_library_tree
from bashbeatz.exceptions import SelectionError
from bashbeatz.router import (
    EMPTY_ROW,
    ERROR_ROW,
    describe_track,
    route_selection,
    safe_route_selection,
)


@pytest.fixture
def library() -> LibraryTree:
    return build_library_tree([
        TrackRecord("a.mp3", TrackMetadata(artist="Kanye West", album="Graduation", title="Stronger", track="3", year="2007")),
        TrackRecord("b.mp3", TrackMetadata(artist="Kanye West", album="Graduation", title="Champion")),
        DirectoryEntry("Live"),
    ])


class TestRouteSelection:
    def test_track_requests_playback(self, library: LibraryTree) -> None:
        track = library.artists["Kanye West"].children["Graduation"].children["Stronger"]
        selection = route_selection(library, track)

        assert selection.play is track
        assert selection.rows == [("Stronger", "3", "00:00")]
        assert selection.status == "Now playing: Stronger"

    def test_album_lists_its_songs(self, library: LibraryTree) -> None:
        album = library.artists["Kanye West"].children["Graduation"]
        selection = route_selection(library, album)

        assert selection.play is None
        assert selection.rows == [("Stronger", "3", "00:00"), ("Champion", "N/A", "00:00")]
        assert selection.status == "Artist: Kanye West, Album: Graduation"

    def test_empty_album_shows_placeholder(self, library: LibraryTree) -> None:
        selection = route_selection(library, AlbumNode(name="Demo", artist="Nobody"))
        assert selection.rows == [EMPTY_ROW]
        assert selection.status == "Artist: Nobody, Album: Demo"

    def test_artist_shows_placeholder(self, library: LibraryTree) -> None:
        selection = route_selection(library, library.artists["Kanye West"])
        assert selection.rows == [EMPTY_ROW]
        assert selection.status == "Artist: Kanye West"

    def test_directory(self, library: LibraryTree) -> None:
        selection = route_selection(library, library.directories["Live"])
        assert selection.rows == [EMPTY_ROW]
        assert selection.status == "Directory: Live"

    def test_unknown_node_raises(self, library: LibraryTree) -> None:
        with pytest.raises(SelectionError):
            route_selection(library, {"name": "mystery"})


class TestSafeRouteSelection:
    def test_unknown_node_becomes_error_row(self, library: LibraryTree) -> None:
        selection = safe_route_selection(library, object())
        assert selection.rows == [ERROR_ROW]
        assert selection.status.startswith("Error: Unknown selection")
        assert selection.play is None


def test_describe_track_includes_release_date(library: LibraryTree) -> None:
    track = library.artists["Kanye West"].children["Graduation"].children["Stronger"]
    assert describe_track(track) == (
        "Title: Stronger\nArtist: Kanye West\nAlbum: Graduation\nRelease Date: 2007"
    )
