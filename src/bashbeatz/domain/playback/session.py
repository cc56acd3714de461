"""
Playback session state.
"""

from dataclasses import dataclass

from .process import ProcessHandle


@dataclass
class PlaybackSession:
    """The one track currently owned by the playback controller.

    elapsed_time only advances on progress ticks while is_playing is True,
    so it tracks perceived playback rather than wall-clock time.
    """

    process: ProcessHandle
    track_path: str
    url: str
    name: str  # Base name shown in status messages
    is_playing: bool = True
    song_duration: float = 0.0  # seconds, 0 when unknown
    elapsed_time: float = 0.0  # seconds
