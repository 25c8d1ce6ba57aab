"""Tests for the sortedness validator."""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from sort_analyzer.benchmarks.validation import is_sorted


@pytest.mark.parametrize(
    ("sequence", "expected"),
    [
        ([1, 2, 2, 3], True),
        ([3, 1, 2], False),
        ([], True),
        ([5], True),
        ([1, 2, 3, 2], False),
    ],
)
def test_is_sorted_examples(sequence, expected) -> None:
    assert is_sorted(sequence) is expected


@given(st.lists(st.integers()))
def test_is_sorted_matches_builtin(sequence) -> None:
    assert is_sorted(sequence) == (sequence == sorted(sequence))


def test_is_sorted_stops_at_first_violation() -> None:
    class Tracking(list):
        highest = 0

        def __getitem__(self, index):
            self.highest = max(self.highest, index)
            return super().__getitem__(index)

    sequence = Tracking([2, 1] + list(range(100)))
    assert is_sorted(sequence) is False
    assert sequence.highest == 1
