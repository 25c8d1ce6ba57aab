"""Tests for the benchmark runner."""

from __future__ import annotations

import math
import random
import statistics

import pytest

from sort_analyzer.algorithms import BubbleSort, InsertionSort, SelectionSort
from sort_analyzer.benchmarks.runner import BenchmarkRunner, run_all_benchmarks
from sort_analyzer.shared.config import BenchmarkConfig
from tests.helpers import make_clock


class ReverseSort:
    """Deliberately wrong strategy used to exercise correctness tracking."""

    name = "Reverse Sort"

    def sort_in_place(self, data: list[int]) -> None:
        data.sort(reverse=True)


class FlakySort:
    """Sorts correctly except on one trial."""

    name = "Flaky Sort"

    def __init__(self, failing_call: int) -> None:
        self._calls = 0
        self._failing_call = failing_call

    def sort_in_place(self, data: list[int]) -> None:
        self._calls += 1
        data.sort(reverse=self._calls == self._failing_call)


def test_metrics_aggregate_trial_durations(progress) -> None:
    runner = BenchmarkRunner(
        dataset_size=10,
        iterations=3,
        progress_reporter=progress,
        clock=make_clock([2_000_000, 1_500_000, 4_000_000]),
    )

    metrics = runner.measure(InsertionSort())

    assert metrics.algorithm_identifier == "Insertion Sort"
    assert metrics.samples == (2.0, 1.5, 4.0)
    assert metrics.minimum_execution_time == 1.5
    assert metrics.maximum_execution_time == 4.0
    assert metrics.average_execution_time == pytest.approx(2.5)
    assert metrics.correctness_validation is True
    assert metrics.iterations == 3
    assert metrics.dataset_size == 10


def test_progress_reports_each_completed_trial(progress) -> None:
    runner = BenchmarkRunner(dataset_size=5, iterations=4, progress_reporter=progress)
    runner.measure(BubbleSort())

    assert progress.calls == [(1, 4), (2, 4), (3, 4), (4, 4)]


@pytest.mark.parametrize("durations", [[1, 1, 1], [333_333, 333_334, 333_333], [7, 0, 123_456_789]])
def test_average_stays_within_bounds(durations) -> None:
    runner = BenchmarkRunner(dataset_size=3, iterations=len(durations), clock=make_clock(durations))
    metrics = runner.measure(SelectionSort())

    assert metrics.minimum_execution_time <= metrics.average_execution_time <= metrics.maximum_execution_time
    assert math.isclose(metrics.average_execution_time, statistics.fmean(metrics.samples), rel_tol=1e-9)


def test_real_clock_metrics_bounds() -> None:
    runner = BenchmarkRunner(dataset_size=200, iterations=5)
    metrics = runner.measure(BubbleSort())

    assert len(metrics.samples) == 5
    assert metrics.minimum_execution_time <= metrics.average_execution_time <= metrics.maximum_execution_time
    assert metrics.average_execution_time == pytest.approx(statistics.fmean(metrics.samples))


def test_incorrect_strategy_is_flagged_not_raised() -> None:
    runner = BenchmarkRunner(dataset_size=50, iterations=3, rng=random.Random(1))
    metrics = runner.measure(ReverseSort())

    assert metrics.correctness_validation is False
    assert len(metrics.samples) == 3


def test_single_failed_trial_clears_correctness_flag(progress) -> None:
    runner = BenchmarkRunner(
        dataset_size=50,
        iterations=5,
        progress_reporter=progress,
        rng=random.Random(3),
    )
    metrics = runner.measure(FlakySort(failing_call=2))

    assert metrics.correctness_validation is False
    assert len(progress.calls) == 5


def test_empty_datasets_are_trivially_correct() -> None:
    runner = BenchmarkRunner(dataset_size=0, iterations=2)
    metrics = runner.measure(SelectionSort())

    assert metrics.correctness_validation is True
    assert metrics.dataset_size == 0


def test_zero_iterations_is_rejected() -> None:
    runner = BenchmarkRunner(dataset_size=10, iterations=0)
    with pytest.raises(ValueError):
        runner.measure(BubbleSort())


def test_run_preserves_strategy_order() -> None:
    runner = BenchmarkRunner(dataset_size=20, iterations=1)
    results = runner.run([InsertionSort(), BubbleSort()])

    assert [m.algorithm_identifier for m in results] == ["Insertion Sort", "Bubble Sort"]


def test_seeded_runs_sort_identical_datasets() -> None:
    seen: list[list[int]] = []

    class Recording:
        name = "Recording"

        def sort_in_place(self, data: list[int]) -> None:
            seen.append(list(data))
            data.sort()

    config = BenchmarkConfig(dataset_size=30, iterations=2, seed=99)
    BenchmarkRunner.from_config(config).measure(Recording())
    BenchmarkRunner.from_config(config).measure(Recording())

    assert seen[:2] == seen[2:]
    assert seen[0] != seen[1]


def test_bubble_sort_end_to_end_default_size(progress) -> None:
    runner = BenchmarkRunner(dataset_size=1000, iterations=5, progress_reporter=progress)
    metrics = runner.measure(BubbleSort())

    assert metrics.correctness_validation is True
    assert metrics.iterations == 5
    assert progress.calls[-1] == (5, 5)


def test_run_all_benchmarks_covers_every_algorithm(progress) -> None:
    results = run_all_benchmarks(
        BenchmarkConfig(dataset_size=100, iterations=2, seed=5),
        progress_reporter=progress,
    )

    assert [m.algorithm_identifier for m in results] == [
        "Bubble Sort",
        "Selection Sort",
        "Insertion Sort",
    ]
    assert all(m.correctness_validation for m in results)
    assert len(progress.calls) == 6
