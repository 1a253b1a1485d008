"""Population container for the steady-state knapsack GA.

Unlike a generational GA, a steady-state run never rebuilds its population:
offspring are written into existing slots. The Population therefore keeps a
fixed number of slots and only supports whole-slot replacement.
"""

from collections.abc import Iterator

import numpy as np

from knapsack_ga.individual import Individual
from knapsack_ga.items import ItemSet


class Population:
    """Fixed-size, slot-addressed sequence of Individuals.

    Attributes:
        items: Item set shared by every member.

    Example:
        >>> items = ItemSet(weights=[2, 3], values=[3, 4], capacity=5)
        >>> pop = Population([Individual(np.array([1, 0]), items), Individual(np.array([0, 1]), items)])
        >>> len(pop)
        2
        >>> pop.values
        array([3, 4])
    """

    def __init__(self, members: list[Individual]) -> None:
        """Create a population from an initial list of members.

        Raises:
            ValueError: If members is empty or the members were built against
                different item sets.
        """
        if len(members) == 0:
            raise ValueError("population must have at least one member")
        items = members[0].items
        if any(m.items is not items for m in members):
            raise ValueError("all members must share the same item set")
        self.items = items
        self._members = list(members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._members)

    def _check_index(self, idx: int) -> int:
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")
        n = len(self)
        original_idx = idx
        if idx < 0:
            idx = n + idx
        if idx < 0 or idx >= n:
            raise IndexError(f"index {original_idx} is out of bounds for population with {n} individuals")
        return int(idx)

    def __getitem__(self, idx: int) -> Individual:
        """Return the member in slot idx (supports negative indexing).

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
        """
        return self._members[self._check_index(idx)]

    def replace(self, idx: int, individual: Individual) -> Individual:
        """Overwrite slot idx with individual and return the evicted member.

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
            ValueError: If individual was built against a different item set.
        """
        idx = self._check_index(idx)
        if individual.items is not self.items:
            raise ValueError("replacement must share the population's item set")
        evicted = self._members[idx]
        self._members[idx] = individual
        return evicted

    @property
    def values(self) -> np.ndarray:
        """Total value of every member, shape (n,)."""
        return np.array([m.total_value for m in self._members], dtype=np.int64)

    @property
    def weights(self) -> np.ndarray:
        """Total weight of every member, shape (n,)."""
        return np.array([m.total_weight for m in self._members], dtype=np.int64)

    def best_index(self) -> int:
        """Index of the highest-value member; the first one wins ties."""
        return int(np.argmax(self.values))

    def snapshot(self) -> tuple[Individual, ...]:
        """Current members as an immutable tuple."""
        return tuple(self._members)


def random_population(items: ItemSet, size: int, rng: np.random.Generator) -> Population:
    """Create a population of uniformly random gene vectors.

    Every gene is an unbiased coin flip. No capacity filtering is applied, so
    over-capacity members may be present.

    Args:
        items: Item set the members are evaluated against.
        size: Number of members.
        rng: Random number generator for reproducibility.

    Returns:
        A new Population of the requested size.
    """
    genes = rng.integers(0, 2, size=(size, items.n_items), dtype=np.int8)
    return Population([Individual(genes[i], items) for i in range(size)])
