"""Worst-two steady-state replacement."""

import numpy as np

from knapsack_ga.individual import Individual
from knapsack_ga.population import Population


def worst_two(pop: Population) -> tuple[int, int]:
    """Find the slots of the lowest and second-lowest value members.

    Ties are broken by slot order: among equal values the earlier slot counts
    as the lower one.

    Args:
        pop: Population with at least two members.

    Returns:
        Tuple (worst1, worst2) of slot indices, worst1 holding the lowest value.

    Raises:
        ValueError: If the population has fewer than two members.

    Example:
        >>> # values [5, 1, 3, 1] -> slots (1, 3)
        >>> worst_two(pop)
        (1, 3)
    """
    if len(pop) < 2:
        raise ValueError(f"worst-two replacement needs at least 2 members, got {len(pop)}")

    # Use stable sort for deterministic tie-breaking
    order = np.argsort(pop.values, kind="stable")
    return int(order[0]), int(order[1])


def replace_worst(pop: Population, offspring: tuple[Individual, Individual]) -> list[int]:
    """Insert offspring into the population by evicting its two worst members.

    Each child, in order, takes the first still-open slot among (worst1,
    worst2) whose original occupant it strictly beats; a child that beats
    neither is discarded. Children are written into the slots where the worst
    members actually live, and each slot is filled at most once, so the second
    child can never overwrite the first.

    Args:
        pop: Population to modify in place.
        offspring: The generation's two children.

    Returns:
        Slot indices that were overwritten, in child order.
    """
    worst1, worst2 = worst_two(pop)
    thresholds = {worst1: pop[worst1].total_value, worst2: pop[worst2].total_value}
    open_slots = [worst1, worst2]

    replaced: list[int] = []
    for child in offspring:
        for slot in open_slots:
            if child.total_value > thresholds[slot]:
                pop.replace(slot, child)
                open_slots.remove(slot)
                replaced.append(slot)
                break

    return replaced
