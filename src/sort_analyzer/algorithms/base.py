"""Sort strategy interface and the closed set of available algorithms."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from sort_analyzer.core.models import Dataset


class SortAlgorithm(str, Enum):
    """Algorithms the analyzer knows how to benchmark."""

    BUBBLE = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"


class SortStrategy(Protocol):
    """In-place total-order sort over a mutable integer sequence."""

    name: str

    def sort_in_place(self, data: Dataset) -> None:
        """Rearranges `data` into non-decreasing order."""
