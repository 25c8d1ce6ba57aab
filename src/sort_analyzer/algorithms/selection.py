"""Selection sort."""

from __future__ import annotations

from sort_analyzer.core.models import Dataset

from .base import SortStrategy


class SelectionSort(SortStrategy):
    """Moves the minimum of the unsorted suffix into place, one position at a time."""

    name = "Selection Sort"

    def sort_in_place(self, data: Dataset) -> None:
        length = len(data)
        for boundary in range(length - 1):
            min_index = boundary
            for i in range(boundary + 1, length):
                if data[i] < data[min_index]:
                    min_index = i
            if min_index != boundary:
                data[boundary], data[min_index] = data[min_index], data[boundary]
