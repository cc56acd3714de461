"""
External player process control.

Pause and resume are done with SIGSTOP/SIGCONT on the player process rather
than through the player's own controls.
"""

import os
import signal
import subprocess
from typing import List, Optional, Protocol

from loguru import logger

from bashbeatz.exceptions import SpawnError


class ProcessHandle(Protocol):
    """Capabilities the playback controller needs from a player process."""

    def suspend(self) -> None: ...

    def resume(self) -> None: ...

    def terminate(self) -> None: ...

    def poll(self) -> Optional[int]: ...

    def wait(self) -> int: ...


class PlayerProcess:
    """ProcessHandle backed by a subprocess.Popen."""

    def __init__(self, process: subprocess.Popen, terminate_timeout: float = 1.0):
        self.process = process
        self.terminate_timeout = terminate_timeout
        self.suspended = False

    @property
    def pid(self) -> int:
        return self.process.pid

    def _signal(self, sig: signal.Signals) -> bool:
        if self.process.poll() is not None:
            return False
        try:
            self.process.send_signal(sig)
            return True
        except ProcessLookupError:
            return False

    def suspend(self) -> None:
        """Freeze the player (SIGSTOP)."""
        if self._signal(signal.SIGSTOP):
            self.suspended = True
            logger.debug(f"Suspended player process {self.pid}")

    def resume(self) -> None:
        """Continue a frozen player (SIGCONT)."""
        if self._signal(signal.SIGCONT):
            self.suspended = False
            logger.debug(f"Resumed player process {self.pid}")

    def terminate(self) -> None:
        """Stop the player, escalating to SIGKILL if it ignores SIGTERM."""
        if self.process.poll() is not None:
            return

        # A stopped process leaves SIGTERM pending until it is continued
        if self.suspended:
            self.resume()

        try:
            self.process.terminate()
            self.process.wait(timeout=self.terminate_timeout)
            logger.debug(f"Terminated player process {self.pid}")
        except ProcessLookupError:
            pass
        except subprocess.TimeoutExpired:
            logger.warning(f"Player process {self.pid} ignored SIGTERM, killing")
            try:
                self.process.kill()
                self.process.wait(timeout=self.terminate_timeout)
            except (ProcessLookupError, subprocess.TimeoutExpired) as e:
                logger.warning(f"Force kill failed: {e}")

    def poll(self) -> Optional[int]:
        return self.process.poll()

    def wait(self) -> int:
        return self.process.wait()


def build_player_command(player_command: str, url: str) -> List[str]:
    """Player invocation: no video window, exit at end of stream."""
    return [player_command, "-nodisp", "-autoexit", "-i", url]


def spawn_player(
    url: str, player_command: str = "ffplay", terminate_timeout: float = 1.0
) -> PlayerProcess:
    """Start the external player against a stream URL.

    Raises:
        SpawnError: If the executable is missing or cannot be started
    """
    cmd = build_player_command(player_command, url)
    logger.info(f"Starting player: {' '.join(cmd)}")

    try:
        process = subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            # Own process group: terminal job-control signals stay with the UI
            start_new_session=os.name == "posix",
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.error(f"Failed to start {player_command}: {e}")
        raise SpawnError(f"Failed to start {player_command}: {e}") from e

    return PlayerProcess(process, terminate_timeout=terminate_timeout)
