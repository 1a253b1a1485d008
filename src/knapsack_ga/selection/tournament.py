"""Binary tournament parent selection for the knapsack GA."""

import numpy as np

from knapsack_ga.population import Population


def binary_tournament(pop: Population, rng: np.random.Generator) -> int:
    """Select one parent index by tournament.

    Two candidates are drawn uniformly with replacement, so the same member may
    compete against itself. The winner is the candidate with strictly greater
    total value; on a tie the earlier draw is kept.

    Args:
        pop: Population to select from.
        rng: Random number generator for reproducibility.

    Returns:
        Index of the winning member.

    Example:
        >>> parent_idx = binary_tournament(pop, rng)
    """
    values = pop.values
    first, second = rng.integers(0, len(pop), size=2)

    # Prefer higher value (maximization); ties keep the first draw
    winner = second if values[second] > values[first] else first
    return int(winner)


def select_parents(pop: Population, rng: np.random.Generator) -> tuple[int, int]:
    """Run two independent binary tournaments.

    Both tournaments draw from the full population, so the two parents may
    resolve to the same member.

    Returns:
        Indices of (parent_a, parent_b).
    """
    return binary_tournament(pop, rng), binary_tournament(pop, rng)
