"""Tests for external player process control."""

import signal
import subprocess
from unittest.mock import MagicMock, call, patch

import pytest

from bashbeatz.domain.playback.process import (
    PlayerProcess,
    build_player_command,
    spawn_player,
)
from bashbeatz.exceptions import SpawnError

URL = "http://localhost:3000/songs/a.mp3"


@pytest.fixture
def popen() -> MagicMock:
    """A running Popen double."""
    process = MagicMock(spec=subprocess.Popen)
    process.pid = 4242
    process.poll.return_value = None
    return process


class TestSignals:
    """Suspend and resume map to SIGSTOP and SIGCONT."""

    def test_suspend_and_resume(self, popen: MagicMock) -> None:
        player = PlayerProcess(popen)
        player.suspend()
        assert player.suspended is True
        player.resume()
        assert player.suspended is False

        assert popen.send_signal.call_args_list == [call(signal.SIGSTOP), call(signal.SIGCONT)]

    def test_no_signal_after_exit(self, popen: MagicMock) -> None:
        popen.poll.return_value = 0
        player = PlayerProcess(popen)
        player.suspend()

        popen.send_signal.assert_not_called()
        assert player.suspended is False

    def test_vanished_process_is_ignored(self, popen: MagicMock) -> None:
        popen.send_signal.side_effect = ProcessLookupError
        player = PlayerProcess(popen)
        player.suspend()
        assert player.suspended is False


class TestTerminate:
    def test_terminate_running_process(self, popen: MagicMock) -> None:
        PlayerProcess(popen, terminate_timeout=0.5).terminate()

        popen.terminate.assert_called_once()
        popen.wait.assert_called_once_with(timeout=0.5)
        popen.kill.assert_not_called()

    def test_suspended_process_is_continued_first(self, popen: MagicMock) -> None:
        """SIGTERM stays pending on a stopped process, so it is resumed first."""
        manager = MagicMock()
        manager.attach_mock(popen.send_signal, "send_signal")
        manager.attach_mock(popen.terminate, "terminate")

        player = PlayerProcess(popen)
        player.suspend()
        player.terminate()

        assert manager.mock_calls[-2:] == [call.send_signal(signal.SIGCONT), call.terminate()]

    def test_kill_after_timeout(self, popen: MagicMock) -> None:
        popen.wait.side_effect = [subprocess.TimeoutExpired("ffplay", 1.0), 0]
        PlayerProcess(popen).terminate()

        popen.kill.assert_called_once()

    def test_exited_process_not_signalled(self, popen: MagicMock) -> None:
        popen.poll.return_value = 0
        PlayerProcess(popen).terminate()
        popen.terminate.assert_not_called()


class TestSpawnPlayer:
    def test_command_disables_video_and_autoexits(self) -> None:
        assert build_player_command("ffplay", URL) == ["ffplay", "-nodisp", "-autoexit", "-i", URL]

    def test_spawn_wraps_popen(self, popen: MagicMock) -> None:
        with patch(
            "bashbeatz.domain.playback.process.subprocess.Popen", return_value=popen
        ) as mock_popen:
            player = spawn_player(URL, player_command="ffplay", terminate_timeout=2.0)

        assert mock_popen.call_args[0][0] == ["ffplay", "-nodisp", "-autoexit", "-i", URL]
        assert player.process is popen
        assert player.terminate_timeout == 2.0

    def test_missing_executable_raises_spawn_error(self) -> None:
        with patch(
            "bashbeatz.domain.playback.process.subprocess.Popen",
            side_effect=FileNotFoundError("ffplay"),
        ):
            with pytest.raises(SpawnError):
                spawn_player(URL)
