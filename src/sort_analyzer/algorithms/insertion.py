"""Insertion sort."""

from __future__ import annotations

from sort_analyzer.core.models import Dataset

from .base import SortStrategy


class InsertionSort(SortStrategy):
    """Grows a sorted prefix by shifting larger elements right of each new key.

    Linear on already sorted input.
    """

    name = "Insertion Sort"

    def sort_in_place(self, data: Dataset) -> None:
        for current in range(1, len(data)):
            key = data[current]
            position = current - 1
            while position >= 0 and data[position] > key:
                data[position + 1] = data[position]
                position -= 1
            data[position + 1] = key
