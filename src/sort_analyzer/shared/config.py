"""Benchmark configuration."""

from __future__ import annotations

from dataclasses import dataclass


class ConfigurationError(ValueError):
    """Raised when a benchmark configuration cannot be run."""


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Parameters of a benchmark run.

    Values are fixed for the lifetime of a run and passed explicitly to the
    runner; nothing here is read from the environment.
    """

    dataset_size: int = 1000
    iterations: int = 5
    min_value: int = 1
    max_value: int = 10000
    seed: int | None = None
    progress_bar_width: int = 50

    def __post_init__(self) -> None:
        if self.dataset_size < 0:
            raise ConfigurationError(f"dataset_size must be >= 0, got {self.dataset_size}")
        if self.iterations < 1:
            raise ConfigurationError(f"iterations must be >= 1, got {self.iterations}")
        if self.min_value > self.max_value:
            raise ConfigurationError(
                f"min_value ({self.min_value}) must not exceed max_value ({self.max_value})"
            )
        if self.progress_bar_width < 1:
            raise ConfigurationError(
                f"progress_bar_width must be >= 1, got {self.progress_bar_width}"
            )

    @classmethod
    def default(cls) -> "BenchmarkConfig":
        """Returns the default configuration."""

        return cls()
