"""Benchmark runner: timed, validated, repeated trials per sort strategy."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable

import structlog
from structlog.stdlib import BoundLogger

from sort_analyzer.algorithms import SortStrategy, all_strategies
from sort_analyzer.core.models import PerformanceMetrics
from sort_analyzer.core.tasks import ProgressReporter
from sort_analyzer.shared.config import BenchmarkConfig

from .dataset import MAX_VALUE, MIN_VALUE, generate_dataset
from .validation import is_sorted

_NS_PER_MS = 1_000_000


@dataclass
class DefaultProgressReporter:
    """Progress reporter that logs every completed trial."""

    logger: BoundLogger = field(default_factory=lambda: structlog.get_logger(__name__))

    def update(self, current: int, total: int) -> None:
        self.logger.debug("progress", current=current, total=total)


class BenchmarkRunner:
    """Runs each strategy for a fixed number of trials on fresh random datasets."""

    def __init__(
        self,
        *,
        dataset_size: int,
        iterations: int,
        progress_reporter: ProgressReporter | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], int] = time.perf_counter_ns,
        min_value: int = MIN_VALUE,
        max_value: int = MAX_VALUE,
    ) -> None:
        self._dataset_size = dataset_size
        self._iterations = iterations
        self._progress_reporter = progress_reporter or DefaultProgressReporter()
        self._rng = rng
        self._clock = clock
        self._min_value = min_value
        self._max_value = max_value
        self._logger = structlog.get_logger(__name__)

    @classmethod
    def from_config(
        cls,
        config: BenchmarkConfig,
        *,
        progress_reporter: ProgressReporter | None = None,
    ) -> "BenchmarkRunner":
        rng = random.Random(config.seed) if config.seed is not None else None
        return cls(
            dataset_size=config.dataset_size,
            iterations=config.iterations,
            progress_reporter=progress_reporter,
            rng=rng,
            min_value=config.min_value,
            max_value=config.max_value,
        )

    @property
    def dataset_size(self) -> int:
        return self._dataset_size

    @property
    def iterations(self) -> int:
        return self._iterations

    def measure(self, strategy: SortStrategy) -> PerformanceMetrics:
        """Benchmarks one strategy and returns its aggregated metrics."""

        self._logger.info(
            "benchmark-started",
            algorithm=strategy.name,
            iterations=self._iterations,
            dataset_size=self._dataset_size,
        )

        # Durations stay in integer nanoseconds until the end so that
        # min <= average <= max holds exactly after conversion.
        samples_ns: list[int] = []
        total_ns = 0
        minimum_ns: int | None = None
        maximum_ns = 0
        all_sorts_correct = True

        for trial in range(self._iterations):
            dataset = generate_dataset(
                self._dataset_size,
                rng=self._rng,
                low=self._min_value,
                high=self._max_value,
            )

            started = self._clock()
            strategy.sort_in_place(dataset)
            finished = self._clock()

            elapsed_ns = finished - started
            samples_ns.append(elapsed_ns)
            total_ns += elapsed_ns
            minimum_ns = elapsed_ns if minimum_ns is None else min(minimum_ns, elapsed_ns)
            maximum_ns = max(maximum_ns, elapsed_ns)

            if not is_sorted(dataset):
                all_sorts_correct = False
                self._logger.warning(
                    "correctness-check-failed",
                    algorithm=strategy.name,
                    trial=trial + 1,
                )

            self._logger.debug(
                "trial-complete",
                algorithm=strategy.name,
                trial=trial + 1,
                elapsed_ms=elapsed_ns / _NS_PER_MS,
            )
            self._progress_reporter.update(trial + 1, self._iterations)

        if minimum_ns is None:
            raise ValueError(f"iterations must be >= 1, got {self._iterations}")

        metrics = PerformanceMetrics(
            algorithm_identifier=strategy.name,
            average_execution_time=(total_ns / self._iterations) / _NS_PER_MS,
            minimum_execution_time=minimum_ns / _NS_PER_MS,
            maximum_execution_time=maximum_ns / _NS_PER_MS,
            correctness_validation=all_sorts_correct,
            iterations=self._iterations,
            dataset_size=self._dataset_size,
            samples=tuple(ns / _NS_PER_MS for ns in samples_ns),
        )
        self._logger.info(
            "benchmark-complete",
            algorithm=metrics.algorithm_identifier,
            average_ms=metrics.average_execution_time,
            correct=metrics.correctness_validation,
        )
        return metrics

    def run(self, strategies: Iterable[SortStrategy]) -> list[PerformanceMetrics]:
        """Benchmarks strategies one after another, preserving their order."""

        return [self.measure(strategy) for strategy in strategies]


def run_all_benchmarks(
    config: BenchmarkConfig | None = None,
    *,
    progress_reporter: ProgressReporter | None = None,
) -> list[PerformanceMetrics]:
    """Benchmarks every available strategy with the given configuration."""

    config = config or BenchmarkConfig.default()
    runner = BenchmarkRunner.from_config(config, progress_reporter=progress_reporter)
    return runner.run(all_strategies())
