"""Result type for the steady-state knapsack GA.

KnapsackResult bundles the final population with run metadata. Like the
population members it holds, it is immutable: the history array is copied and
frozen on construction.
"""

from dataclasses import dataclass

import numpy as np

from knapsack_ga.individual import Individual


@dataclass(frozen=True)
class KnapsackResult:
    """Results from a knapsack GA run.

    Attributes:
        members: Final population, in slot order.
        best_idx: Slot of the highest-value member (first one on ties).
        best_feasible: Highest-value Individual within capacity evaluated at any
            point of the run, or None if every evaluated Individual was over
            capacity.
        history: Best population value after initialization and after each
            generation, shape (generations + 1,).
        generations: Number of generations completed.
        evaluations: Total number of Individuals evaluated.

    Example:
        >>> result = evolve(items, GAConfig(population_size=10, max_generations=50), seed=42)
        >>> result.best.total_value == result.history[-1]
        True
    """

    members: tuple[Individual, ...]
    best_idx: int
    best_feasible: Individual | None
    history: np.ndarray
    generations: int
    evaluations: int

    def __post_init__(self) -> None:
        """Validate shapes and copy the history for immutability.

        Raises:
            TypeError: If history is not a numpy array or best_idx is not an integer.
            ValueError: If best_idx is out of bounds or history has the wrong shape.
        """
        n = len(self.members)

        if not isinstance(self.best_idx, (int, np.integer)):
            raise TypeError(f"best_idx must be an integer, got {type(self.best_idx).__name__}")
        if self.best_idx < 0 or self.best_idx >= n:
            raise ValueError(f"best_idx {self.best_idx} is out of bounds for population with {n} individuals")

        if not isinstance(self.history, np.ndarray):
            raise TypeError(f"history must be a numpy array, got {type(self.history).__name__}")
        if self.history.shape != (self.generations + 1,):
            raise ValueError(
                f"history must have shape ({self.generations + 1},) for {self.generations} generations, "
                f"got {self.history.shape}"
            )

        history = self.history.copy()
        history.setflags(write=False)
        object.__setattr__(self, "members", tuple(self.members))
        object.__setattr__(self, "best_idx", int(self.best_idx))
        object.__setattr__(self, "history", history)

    @property
    def best(self) -> Individual:
        """The best Individual of the final population by total value."""
        return self.members[self.best_idx]

    @property
    def values(self) -> np.ndarray:
        """Total value of every final member, shape (n,)."""
        return np.array([m.total_value for m in self.members], dtype=np.int64)
