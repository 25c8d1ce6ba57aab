"""Bubble sort with early termination."""

from __future__ import annotations

from sort_analyzer.core.models import Dataset

from .base import SortStrategy


class BubbleSort(SortStrategy):
    """Swaps adjacent out-of-order pairs until a pass makes no swap."""

    name = "Bubble Sort"

    def sort_in_place(self, data: Dataset) -> None:
        length = len(data)
        for pass_index in range(length - 1):
            swapped = False
            for i in range(length - pass_index - 1):
                if data[i] > data[i + 1]:
                    data[i], data[i + 1] = data[i + 1], data[i]
                    swapped = True
            if not swapped:
                break
