"""Playback domain - external player control and progress tracking.

This domain handles:
- Spawning and signalling the external player process
- Duration lookup through the external prober
- The single active playback session
- Tick-based progress estimation
"""

# Player process
from .process import (
    PlayerProcess,
    ProcessHandle,
    build_player_command,
    spawn_player,
)

# Duration probing
from .probe import build_probe_command, parse_duration, probe_duration

# Session and progress
from .session import PlaybackSession
from .progress import (
    TICK_INTERVAL,
    ProgressState,
    ProgressSynchronizer,
    Scheduler,
    compute_percent,
)

# Controller
from .controller import PlaybackController, run_probe_inline

__all__ = [
    # Process
    "PlayerProcess",
    "ProcessHandle",
    "build_player_command",
    "spawn_player",
    # Probe
    "build_probe_command",
    "parse_duration",
    "probe_duration",
    # Session and progress
    "PlaybackSession",
    "TICK_INTERVAL",
    "ProgressState",
    "ProgressSynchronizer",
    "Scheduler",
    "compute_percent",
    # Controller
    "PlaybackController",
    "run_probe_inline",
]
