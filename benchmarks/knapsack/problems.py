"""Random 0/1 knapsack instances for benchmarking.

The three classic instance families differ in how values relate to weights:
- uncorrelated: values independent of weights (easiest)
- weakly correlated: values within a small band around the weight
- strongly correlated: value = weight + constant (hardest for heuristics)

Capacity is half of the total weight in every family.

References:
    Pisinger, D. (2005). Where are the hard knapsack problems?
    Computers & Operations Research, 32(9), 2271-2284.
"""

from collections.abc import Callable

import numpy as np

from knapsack_ga import ItemSet

# Problem configuration
N_ITEMS: int = 50
MAX_WEIGHT: int = 100
CAPACITY_RATIO: float = 0.5


def _capacity(weights: np.ndarray) -> int:
    return int(weights.sum() * CAPACITY_RATIO)


def uncorrelated(seed: int, n_items: int = N_ITEMS) -> ItemSet:
    """Weights and values drawn independently from [1, MAX_WEIGHT]."""
    rng = np.random.default_rng(seed)
    weights = rng.integers(1, MAX_WEIGHT + 1, size=n_items)
    values = rng.integers(1, MAX_WEIGHT + 1, size=n_items)
    return ItemSet(weights=weights, values=values, capacity=_capacity(weights))


def weakly_correlated(seed: int, n_items: int = N_ITEMS) -> ItemSet:
    """Values within +/- MAX_WEIGHT / 10 of the weight, floored at 1."""
    rng = np.random.default_rng(seed)
    spread = MAX_WEIGHT // 10
    weights = rng.integers(1, MAX_WEIGHT + 1, size=n_items)
    values = np.maximum(weights + rng.integers(-spread, spread + 1, size=n_items), 1)
    return ItemSet(weights=weights, values=values, capacity=_capacity(weights))


def strongly_correlated(seed: int, n_items: int = N_ITEMS) -> ItemSet:
    """Values equal to weight plus MAX_WEIGHT / 10."""
    rng = np.random.default_rng(seed)
    weights = rng.integers(1, MAX_WEIGHT + 1, size=n_items)
    values = weights + MAX_WEIGHT // 10
    return ItemSet(weights=weights, values=values, capacity=_capacity(weights))


# Registry of all instance families
PROBLEMS: dict[str, Callable[..., ItemSet]] = {
    "uncorrelated": uncorrelated,
    "weakly_correlated": weakly_correlated,
    "strongly_correlated": strongly_correlated,
}
