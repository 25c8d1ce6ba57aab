"""Sortedness check applied to every trial's output."""

from __future__ import annotations

from typing import Sequence


def is_sorted(sequence: Sequence[int]) -> bool:
    """True iff every element is >= its predecessor. Stops at the first violation."""

    for index in range(1, len(sequence)):
        if sequence[index] < sequence[index - 1]:
            return False
    return True
