"""Minimal sinks through which the core reports to the presentation layer."""

from __future__ import annotations

from typing import Protocol


class ProgressReporter(Protocol):
    """Receives progress of a running benchmark."""

    def update(self, current: int, total: int) -> None:
        """Called after each completed trial with `current` of `total` done."""


class ReportSink(Protocol):
    """Receives rendered report text."""

    def emit(self, text: str) -> None:
        """Publishes a block of text."""
