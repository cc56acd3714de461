"""
Track duration lookup via the external prober.
"""

import math
import subprocess
from typing import List, Optional

from loguru import logger

from bashbeatz.exceptions import ProbeError


def build_probe_command(probe_command: str, url: str) -> List[str]:
    """Prober invocation that prints only the container duration in seconds."""
    return [
        probe_command,
        "-v", "error",
        "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1",
        url,
    ]


def parse_duration(output: str) -> float:
    """Parse prober output as seconds.

    Raises:
        ProbeError: If the output is not a finite, non-negative number
    """
    text = output.strip()
    try:
        duration = float(text)
    except ValueError as e:
        raise ProbeError(f"Unparseable duration: {text!r}") from e

    if not math.isfinite(duration) or duration < 0:
        raise ProbeError(f"Invalid duration: {text!r}")
    return duration


def probe_duration(
    url: str, probe_command: str = "ffprobe", timeout: Optional[float] = None
) -> float:
    """Return the stream duration in seconds, or 0.0 if it cannot be read.

    Blocks until the prober exits. A zero result disables progress tracking
    but never fails playback.
    """
    cmd = build_probe_command(probe_command, url)

    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, errors="replace", timeout=timeout
        )
        if result.returncode != 0:
            raise ProbeError(
                f"{probe_command} exited with {result.returncode}: {result.stderr.strip()}"
            )
        duration = parse_duration(result.stdout)
    except (OSError, subprocess.SubprocessError, ValueError, ProbeError) as e:
        logger.debug(f"Duration probe failed for {url}: {e}")
        return 0.0

    logger.debug(f"Probed duration {duration:.2f}s for {url}")
    return duration
