"""Console implementations of the progress and report sinks."""

from __future__ import annotations

import sys
from typing import TextIO

_FILLED = "█"
_EMPTY = "░"


class ConsoleProgressBar:
    """Redraws a single-line progress bar in place."""

    def __init__(self, stream: TextIO | None = None, *, width: int = 50) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._width = width

    def update(self, current: int, total: int) -> None:
        fraction = current / total if total > 0 else 1.0
        filled = int(fraction * self._width)
        bar = _FILLED * filled + _EMPTY * (self._width - filled)
        self._stream.write(f"[{bar}] {fraction * 100:.1f}%\r")
        if current >= total:
            self._stream.write("\n")
        self._stream.flush()


class StreamReportSink:
    """Writes rendered report text to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def emit(self, text: str) -> None:
        self._stream.write(text)
        if not text.endswith("\n"):
            self._stream.write("\n")
        self._stream.flush()


class NullProgressReporter:
    """Discards progress updates."""

    def update(self, current: int, total: int) -> None:
        return None
