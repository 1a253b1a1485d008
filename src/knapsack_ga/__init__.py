"""knapsack-ga: Steady-State Genetic Algorithm for the 0/1 Knapsack Problem.

A numpy implementation of a fixed-recipe genetic algorithm that approximately
maximizes the total value of a packed item subset.

Example:
    >>> from knapsack_ga import GAConfig, run
    >>> best = run([2, 3, 4, 5], [3, 4, 5, 6], capacity=5,
    ...            config=GAConfig(population_size=10, max_generations=50), seed=42)
    >>> best.genes.shape
    (4,)

Example (full report):
    >>> from knapsack_ga import GAConfig, ItemSet, evolve
    >>> items = ItemSet(weights=[2, 3, 4, 5], values=[3, 4, 5, 6], capacity=5)
    >>> result = evolve(items, GAConfig(population_size=10, max_generations=50), seed=42)
    >>> result.generations
    50
"""

from knapsack_ga.algorithms import evolve, run
from knapsack_ga.config import DEFAULT_MAX_GENERATIONS, DEFAULT_MUTATION_RATE, DEFAULT_POPULATION_SIZE, GAConfig
from knapsack_ga.errors import ConfigurationError
from knapsack_ga.individual import Individual
from knapsack_ga.items import ItemSet
from knapsack_ga.operators import flip_bit, random_crossover, random_pair_mutation, single_point_crossover
from knapsack_ga.population import Population, random_population
from knapsack_ga.results import KnapsackResult
from knapsack_ga.selection import binary_tournament, select_parents
from knapsack_ga.survival import replace_worst, worst_two

__all__ = [
    # Algorithms
    "run",
    "evolve",
    # Selection
    "binary_tournament",
    "select_parents",
    # Genetic operators
    "single_point_crossover",
    "random_crossover",
    "flip_bit",
    "random_pair_mutation",
    # Replacement
    "worst_two",
    "replace_worst",
    # Data structures
    "ItemSet",
    "Individual",
    "Population",
    "random_population",
    # Configuration
    "GAConfig",
    "DEFAULT_POPULATION_SIZE",
    "DEFAULT_MUTATION_RATE",
    "DEFAULT_MAX_GENERATIONS",
    # Results and errors
    "KnapsackResult",
    "ConfigurationError",
]
