"""Shared test doubles for playback tests."""

from typing import Callable, List, Optional

import pytest


class FakeTimer:
    """Interval timer driven by FakeScheduler's virtual clock."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self.stopped = False
        self.next_fire = interval

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    """Virtual clock implementing the set_interval scheduler interface."""

    def __init__(self):
        self.now = 0.0
        self.timers: List[FakeTimer] = []

    def set_interval(self, interval: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(interval, callback)
        timer.next_fire = self.now + interval
        self.timers.append(timer)
        return timer

    @property
    def active_timers(self) -> List[FakeTimer]:
        return [timer for timer in self.timers if not timer.stopped]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.now + seconds
        while True:
            due = [t for t in self.active_timers if t.next_fire <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.next_fire)
            self.now = timer.next_fire
            timer.next_fire += timer.interval
            timer.callback()
        self.now = target


class FakeProcess:
    """ProcessHandle double that records every call in a shared event log."""

    def __init__(self, url: str, events: List[tuple]):
        self.url = url
        self.events = events
        self.returncode: Optional[int] = None
        self.suspended = False

    def suspend(self) -> None:
        self.suspended = True
        self.events.append(("suspend", self.url))

    def resume(self) -> None:
        self.suspended = False
        self.events.append(("resume", self.url))

    def terminate(self) -> None:
        self.events.append(("terminate", self.url))
        self.returncode = -15

    def poll(self) -> Optional[int]:
        return self.returncode

    def wait(self) -> int:
        return self.returncode if self.returncode is not None else 0


class FakeSpawner:
    """spawn() double returning FakeProcess instances."""

    def __init__(self):
        self.events: List[tuple] = []
        self.processes: List[FakeProcess] = []

    def __call__(self, url: str) -> FakeProcess:
        self.events.append(("spawn", url))
        process = FakeProcess(url, self.events)
        self.processes.append(process)
        return process


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def spawner() -> FakeSpawner:
    return FakeSpawner()
