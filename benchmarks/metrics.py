"""Solution-quality metrics for knapsack benchmarking.

This module provides the exact optimum of a 0/1 knapsack instance, used as
the reference point for measuring how close heuristic solvers get.
"""

import numpy as np

from knapsack_ga import ItemSet


def optimal_value(items: ItemSet) -> int:
    """Compute the exact optimum by dynamic programming over capacities.

    Runs in O(n_items * capacity) time and O(capacity) memory, so it is only
    suitable for benchmark-sized instances.

    Args:
        items: Knapsack instance.

    Returns:
        Maximum total value of any subset whose weight is within capacity.
    """
    best = np.zeros(items.capacity + 1, dtype=np.int64)
    for w, v in zip(items.weights, items.values, strict=True):
        w = int(w)
        if w > items.capacity:
            continue
        # best[c - w] still holds the previous item row for every c >= w
        best[w:] = np.maximum(best[w:], best[: items.capacity + 1 - w] + v)
    return int(best[-1])


def optimality_gap(value: int, optimum: int) -> float:
    """Relative shortfall of a solution value against the optimum.

    Returns:
        (optimum - value) / optimum, or 0.0 when the optimum is 0.

    Raises:
        ValueError: If value or optimum is negative.
    """
    if value < 0 or optimum < 0:
        raise ValueError(f"value and optimum must be non-negative, got {value} and {optimum}")
    if optimum == 0:
        return 0.0
    return (optimum - value) / optimum
