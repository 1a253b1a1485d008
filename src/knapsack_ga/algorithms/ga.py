"""Steady-state genetic algorithm for the 0/1 knapsack problem.

This module provides the evolver: a fixed-recipe GA that searches for a subset
of items with maximal total value. Each generation produces exactly two
children and writes them back into the existing population.

Key Features:
- Binary tournament parent selection (strictly greater value wins)
- Single-point crossover and gated single-bit mutation
- Worst-two replacement into the slots of the actual worst members
- Fixed generation budget, no early stopping
- One injectable numpy Generator drives every random draw of a run

Capacity is tracked but not enforced: fitness is the raw total value, so the
best member may be over capacity. The best feasible Individual seen during the
run is recorded separately in the result.

Example:
    >>> from knapsack_ga import GAConfig, run
    >>>
    >>> best = run(
    ...     weights=[2, 3, 4, 5],
    ...     values=[3, 4, 5, 6],
    ...     capacity=5,
    ...     config=GAConfig(population_size=10, mutation_rate=0.0, max_generations=50),
    ...     seed=42,
    ... )
    >>> print(f"genes: {best.genes.tolist()}; total value: {best.total_value}")
"""

import logging
from collections.abc import Callable, Sequence

import numpy as np

from knapsack_ga.config import GAConfig
from knapsack_ga.individual import Individual
from knapsack_ga.items import ItemSet
from knapsack_ga.operators import random_crossover, random_pair_mutation
from knapsack_ga.population import Population, random_population
from knapsack_ga.results import KnapsackResult
from knapsack_ga.selection import select_parents
from knapsack_ga.survival import replace_worst

logger = logging.getLogger(__name__)

Seed = int | np.random.Generator | None


def _better_feasible(candidate: Individual, incumbent: Individual | None, capacity: int) -> Individual | None:
    if not candidate.is_feasible(capacity):
        return incumbent
    if incumbent is None or candidate.total_value > incumbent.total_value:
        return candidate
    return incumbent


def evolve(
    items: ItemSet,
    config: GAConfig | None = None,
    seed: Seed = None,
    callback: Callable[[Population, int], None] | None = None,
) -> KnapsackResult:
    """Run the steady-state knapsack GA and report the final state.

    Args:
        items: Knapsack instance. Shared read-only by every Individual.
        config: Algorithm configuration. Defaults to GAConfig().
        seed: Random seed, or an already constructed numpy Generator to draw
            from. If None, uses system entropy.
        callback: Optional observer called after each generation's replacement.
            Signature: (population, generation) -> None
            The return value is ignored; the run always completes the full
            generation budget.

    Returns:
        KnapsackResult containing:
        - members: Final population
        - best_idx: Slot of the highest-value member
        - best_feasible: Best within-capacity Individual seen during the run
        - history: Best population value per generation
        - generations: Number of generations completed
        - evaluations: Total number of Individuals evaluated

    Algorithm Flow:
        1. Initialize population_size random Individuals (unbiased coin flips)
        2. For each of max_generations generations:
           a. Select two parents by binary tournament
           b. Create two children by single-point crossover
           c. With probability mutation_rate, flip one bit in each child
           d. Evaluate both children
           e. Replace the two worst members with children that beat them
        3. Return the final population with its best member

    Example:
        >>> items = ItemSet(weights=[2, 3, 4, 5], values=[3, 4, 5, 6], capacity=5)
        >>> result = evolve(items, GAConfig(population_size=10, max_generations=50), seed=42)
        >>> len(result.members)
        10
    """
    if config is None:
        config = GAConfig()

    rng = np.random.default_rng(seed)

    logger.info(
        f"Starting knapsack GA: n_items={items.n_items}, capacity={items.capacity}, "
        f"pop_size={config.population_size}, mutation_rate={config.mutation_rate}, "
        f"generations={config.max_generations}"
    )

    pop = random_population(items, config.population_size, rng)

    best_feasible: Individual | None = None
    for member in pop:
        best_feasible = _better_feasible(member, best_feasible, items.capacity)

    history = np.empty(config.max_generations + 1, dtype=np.int64)
    history[0] = pop[pop.best_index()].total_value
    total_evaluations = config.population_size

    # Main evolutionary loop
    for gen in range(config.max_generations):
        parent_a, parent_b = select_parents(pop, rng)

        genes1, genes2 = random_crossover(pop[parent_a].genes, pop[parent_b].genes, rng)
        genes1, genes2 = random_pair_mutation(genes1, genes2, config.mutation_rate, rng)

        child1 = Individual(genes1, items)
        child2 = Individual(genes2, items)
        total_evaluations += 2
        for child in (child1, child2):
            best_feasible = _better_feasible(child, best_feasible, items.capacity)

        replaced = replace_worst(pop, (child1, child2))

        history[gen + 1] = pop[pop.best_index()].total_value
        logger.debug(
            f"Generation {gen}: parents=({parent_a}, {parent_b}), "
            f"children=({child1.total_value}, {child2.total_value}), "
            f"replaced={replaced}, best={history[gen + 1]}"
        )

        if callback is not None:
            callback(pop, gen)

    result = KnapsackResult(
        members=pop.snapshot(),
        best_idx=pop.best_index(),
        best_feasible=best_feasible,
        history=history,
        generations=config.max_generations,
        evaluations=total_evaluations,
    )

    best = result.best
    logger.info(
        f"Finished knapsack GA: best value={best.total_value}, weight={best.total_weight} "
        f"(feasible={best.is_feasible(items.capacity)}), evaluations={total_evaluations}"
    )

    return result


def run(
    weights: Sequence[int] | np.ndarray,
    values: Sequence[int] | np.ndarray,
    capacity: int,
    config: GAConfig | None = None,
    seed: Seed = None,
) -> Individual:
    """Solve a knapsack instance and return the best Individual found.

    Args:
        weights: Item weights, non-negative integers.
        values: Item values, non-negative integers, index-aligned with weights.
        capacity: Knapsack capacity.
        config: Algorithm configuration. Defaults to GAConfig() (population 50,
            mutation rate 0.1, 1000 generations).
        seed: Random seed or numpy Generator. If None, uses system entropy.

    Returns:
        The highest-value member of the final population. It is not guaranteed
        to be within capacity.

    Raises:
        ConfigurationError: If the item data is malformed.
    """
    items = ItemSet(weights=weights, values=values, capacity=capacity)
    return evolve(items, config=config, seed=seed).best
