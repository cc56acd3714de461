"""
Progress tracking for the current playback session.

The player does not report its position, so progress is estimated by
counting one-second ticks while the session is playing. Ticks that land
while the player is suspended are skipped, keeping the estimate aligned with
what the listener has actually heard.
"""

from enum import Enum
from typing import Callable, Optional, Protocol

from loguru import logger

from .session import PlaybackSession

TICK_INTERVAL = 1.0  # seconds


class Timer(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback repeatedly, e.g. a Textual App."""

    def set_interval(self, interval: float, callback: Callable[[], None]) -> Timer: ...


class ProgressState(Enum):
    IDLE = "idle"
    TICKING = "ticking"
    COMPLETE = "complete"


def compute_percent(elapsed: float, duration: float) -> float:
    """Percentage of the track played, clamped to 0..100."""
    if duration <= 0:
        return 0.0
    return max(0.0, min(100.0, elapsed / duration * 100))


class ProgressSynchronizer:
    """Drives the progress display for one session at a time.

    At most one timer is alive: start() and halt() both cancel the previous
    one before anything else happens.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_progress: Callable[[float], None],
        interval: float = TICK_INTERVAL,
    ):
        self.scheduler = scheduler
        self.on_progress = on_progress
        self.interval = interval
        self.state = ProgressState.IDLE
        self.percent = 0.0
        self.session: Optional[PlaybackSession] = None
        self._timer: Optional[Timer] = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _push(self, percent: float) -> None:
        self.percent = percent
        self.on_progress(percent)

    def start(self, session: PlaybackSession) -> None:
        """Begin tracking a session whose duration has been resolved."""
        self._cancel_timer()
        self.session = session
        self._push(0.0)

        if session.song_duration <= 0:
            self.state = ProgressState.IDLE
            logger.debug(f"No duration for {session.name}, progress stays idle")
            return

        self.state = ProgressState.TICKING
        self._timer = self.scheduler.set_interval(self.interval, self.tick)
        logger.debug(
            f"Progress started for {session.name} ({session.song_duration:.2f}s)"
        )

    def tick(self) -> None:
        """Advance one second of playback if the session is playing."""
        session = self.session
        if self.state is not ProgressState.TICKING or session is None:
            return
        if not session.is_playing:
            return

        session.elapsed_time += 1
        self._push(compute_percent(session.elapsed_time, session.song_duration))

        if session.elapsed_time >= session.song_duration:
            self._cancel_timer()
            self.state = ProgressState.COMPLETE
            logger.debug(f"Progress complete for {session.name}")

    def halt(self) -> None:
        """Stop tracking; the display keeps its last value (see reset)."""
        self._cancel_timer()
        self.session = None
        self.state = ProgressState.IDLE

    def reset(self) -> None:
        """Halt and clear the display back to 0."""
        self.halt()
        self._push(0.0)
