"""Data models shared by the benchmark runner and the report generator."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List

Dataset = List[int]
"""A mutable sequence of integers sorted in place by one strategy call."""


@dataclass(frozen=True, slots=True)
class PerformanceMetrics:
    """Timing statistics of one sorting strategy across all of its trials.

    Execution times are expressed in milliseconds.
    """

    algorithm_identifier: str
    average_execution_time: float
    minimum_execution_time: float
    maximum_execution_time: float
    correctness_validation: bool
    iterations: int = 0
    dataset_size: int = 0
    samples: tuple[float, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["samples"] = list(self.samples)
        return payload
