"""Sorting strategies benchmarked by the analyzer."""

from __future__ import annotations

from .base import SortAlgorithm, SortStrategy
from .bubble import BubbleSort
from .insertion import InsertionSort
from .selection import SelectionSort

_STRATEGIES: dict[SortAlgorithm, type[SortStrategy]] = {
    SortAlgorithm.BUBBLE: BubbleSort,
    SortAlgorithm.SELECTION: SelectionSort,
    SortAlgorithm.INSERTION: InsertionSort,
}


def get_strategy(algorithm: SortAlgorithm | str) -> SortStrategy:
    """Returns a strategy instance for the given algorithm tag."""

    return _STRATEGIES[SortAlgorithm(algorithm)]()


def all_strategies() -> list[SortStrategy]:
    """Returns one instance of every strategy, in benchmark order."""

    return [get_strategy(algorithm) for algorithm in SortAlgorithm]


__all__ = [
	"SortAlgorithm",
	"SortStrategy",
	"BubbleSort",
	"SelectionSort",
	"InsertionSort",
	"get_strategy",
	"all_strategies",
]
