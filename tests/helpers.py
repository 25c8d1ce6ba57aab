"""Test doubles shared across test modules."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator


class RecordingProgress:
    """Progress reporter collecting every update."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def update(self, current: int, total: int) -> None:
        self.calls.append((current, total))


def make_clock(durations_ns: Iterable[int]) -> Callable[[], int]:
    """Returns a clock whose consecutive start/stop readings differ by `durations_ns`."""

    def _readings() -> Iterator[int]:
        now = 0
        for duration in durations_ns:
            yield now
            now += duration
            yield now
            now += 1_000

    readings = _readings()
    return lambda: next(readings)
