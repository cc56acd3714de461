"""
Playback controller - owns the single active playback session.

All methods are expected to run on one event loop. Blocking work (duration
probing, waiting for the player to exit) is handed to the run_probe and
watch_exit hooks, which must deliver their results back on that same loop.
"""

import os
from typing import Callable, Optional

from loguru import logger

from bashbeatz.exceptions import SpawnError
from bashbeatz.domain.library.catalog import track_url

from .probe import probe_duration
from .process import ProcessHandle, spawn_player
from .progress import ProgressSynchronizer, Scheduler
from .session import PlaybackSession

Notify = Callable[[str], None]
SpawnFunc = Callable[[str], ProcessHandle]
DurationCallback = Callable[[float], None]
ExitCallback = Callable[[int], None]


def run_probe_inline(url: str, done: DurationCallback) -> None:
    """Default probe runner: blocks the caller until the prober exits."""
    done(probe_duration(url))


class PlaybackController:
    """Starts, pauses, resumes and stops the external player.

    Status messages go through notify; progress percentages go through
    on_progress via the ProgressSynchronizer.
    """

    def __init__(
        self,
        base_url: str,
        scheduler: Scheduler,
        notify: Notify,
        on_progress: Callable[[float], None],
        spawn: SpawnFunc = spawn_player,
        run_probe: Callable[[str, DurationCallback], None] = run_probe_inline,
        watch_exit: Optional[Callable[[ProcessHandle, ExitCallback], None]] = None,
    ):
        self.base_url = base_url
        self.notify = notify
        self.spawn = spawn
        self.run_probe = run_probe
        self.watch_exit = watch_exit
        self.progress = ProgressSynchronizer(scheduler, on_progress)
        self._session: Optional[PlaybackSession] = None

    @property
    def session(self) -> Optional[PlaybackSession]:
        return self._session

    @property
    def is_active(self) -> bool:
        return self._session is not None

    @property
    def is_playing(self) -> bool:
        return self._session is not None and self._session.is_playing

    @property
    def current_track(self) -> Optional[str]:
        return self._session.track_path if self._session else None

    def play(self, track_path: str) -> bool:
        """Replace any current session with playback of track_path.

        Returns:
            True if the player was started
        """
        self.stop()

        name = os.path.basename(track_path)
        url = track_url(self.base_url, track_path)

        try:
            process = self.spawn(url)
        except SpawnError as e:
            logger.error(f"Error playing {track_path}: {e}")
            self.notify(f"Error playing: {name}")
            return False

        session = PlaybackSession(
            process=process, track_path=track_path, url=url, name=name
        )
        self._session = session
        logger.info(f"Now playing: {track_path} ({url})")
        self.notify(f"Now playing: {name}")

        if self.watch_exit is not None:
            self.watch_exit(process, lambda code: self.handle_exit(process, code))

        self.run_probe(url, lambda duration: self._duration_resolved(session, duration))
        return True

    def _duration_resolved(self, session: PlaybackSession, duration: float) -> None:
        if session is not self._session:
            logger.debug(f"Dropping duration for superseded session: {session.name}")
            return
        session.song_duration = duration
        self.progress.start(session)

    def toggle_pause(self) -> None:
        """Suspend or resume the player process."""
        session = self._session
        if session is None:
            logger.debug("Toggle pause with no audio playing")
            self.notify("No audio playing")
            return

        if session.is_playing:
            session.process.suspend()
            session.is_playing = False
            logger.info(f"Paused playback: {session.name}")
            self.notify("Paused")
        else:
            session.process.resume()
            session.is_playing = True
            logger.info(f"Resumed playback: {session.name}")
            self.notify("Playing...")

    def stop(self) -> None:
        """Terminate the player, reset progress, then drop the session."""
        session = self._session
        if session is None:
            return

        if session.process.poll() is None:
            session.process.terminate()
        self.progress.reset()
        self._session = None
        logger.info(f"Stopped playback: {session.name}")

    def handle_exit(self, process: ProcessHandle, returncode: int) -> None:
        """React to the player process exiting on its own.

        Exits of processes that were already superseded or stopped are ignored.
        """
        session = self._session
        if session is None or session.process is not process:
            logger.debug(f"Ignoring exit of stale player process (code={returncode})")
            return

        if returncode != 0:
            logger.warning(
                f"Player exited abnormally for {session.track_path}: code={returncode}"
            )
            self.notify(f"Playback ended: {session.name}")
        else:
            logger.info(f"Playback finished: {session.name}")

        self.progress.halt()
        self._session = None
