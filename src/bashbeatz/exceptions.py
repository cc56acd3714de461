"""BashBeatz exceptions for error handling.

Every failure is recovered locally and surfaced as status text; none of these
terminate the application.
"""


class BashBeatzError(Exception):
    """Base exception for BashBeatz operations."""

    pass


class CatalogError(BashBeatzError):
    """Base exception for catalog operations."""

    pass


class FetchError(CatalogError):
    """Raised when the song list cannot be retrieved from the server."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {message}")


class PlaybackError(BashBeatzError):
    """Base exception for playback operations."""

    pass


class SpawnError(PlaybackError):
    """Raised when the external player cannot be started."""

    pass


class ProbeError(PlaybackError):
    """Raised when the duration prober fails or returns garbage.

    Never escapes the prober module; it is downgraded to a zero duration.
    """

    pass


class SelectionError(BashBeatzError):
    """Raised when a selected tree node has an unrecognized shape."""

    pass
