"""Random integer datasets for benchmark trials."""

from __future__ import annotations

import random

from sort_analyzer.core.models import Dataset

MIN_VALUE = 1
MAX_VALUE = 10000


def generate_dataset(
    length: int,
    *,
    rng: random.Random | None = None,
    low: int = MIN_VALUE,
    high: int = MAX_VALUE,
) -> Dataset:
    """Returns `length` integers drawn independently and uniformly from [low, high].

    Without `rng` every call uses a fresh generator seeded from OS entropy, so
    consecutive datasets differ. Passing a seeded `random.Random` makes a
    sequence of calls reproducible; its state advances with each call.
    """

    if length < 0:
        raise ValueError(f"dataset length must be >= 0, got {length}")
    source = rng if rng is not None else random.Random()
    return [source.randint(low, high) for _ in range(int(length))]
