"""geostats.core.statistics.sampling

Random shuffles, samples and deviates.

Every function takes an optional ``rng`` (a ``numpy.random.Generator`` or a
seed) so results can be reproduced in tests.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar, Union

import numpy as np

T = TypeVar("T")
RngLike = Union[np.random.Generator, int, None]


def _rng(rng: RngLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def shuffle(items: Sequence[T], rng: RngLike = None) -> List[T]:
    """Return a new list with the items in uniformly random order."""
    out = list(items)
    return [out[i] for i in _rng(rng).permutation(len(out))]


def sample(items: Sequence[T], num: int, rng: RngLike = None) -> List[T]:
    """Draw ``num`` distinct items without replacement.

    If ``num`` exceeds the population size the whole population is returned,
    shuffled.
    """
    if num < 0:
        raise ValueError(f"num must be non-negative, got {num}")
    return shuffle(items, rng)[:num]


def randi(low: int, high: int, rng: RngLike = None) -> int:
    """Uniform random integer in ``[low, high)``."""
    return int(_rng(rng).integers(low, high))


def randf(low: float, high: float, rng: RngLike = None) -> float:
    """Uniform random float in ``[low, high)``."""
    return float(_rng(rng).uniform(low, high))


def randn(mean: float = 0.0, variance: float = 1.0, size: Optional[int] = None, rng: RngLike = None):
    """Normally distributed deviate(s) with the given mean and variance.

    Returns a float when ``size`` is None, otherwise an array of that length.
    """
    if variance < 0:
        raise ValueError(f"variance must be non-negative, got {variance}")
    draws = _rng(rng).normal(loc=mean, scale=np.sqrt(variance), size=size)
    if size is None:
        return float(draws)
    return draws
