"""Candidate solutions for the knapsack GA.

An Individual pairs a binary gene vector with the fitness derived from it.
Fitness is computed once, on construction, and the gene array is frozen so the
cached totals can never drift from the genes they were computed from.
"""

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from knapsack_ga.items import ItemSet


@dataclass(frozen=True, eq=False)
class Individual:
    """Immutable candidate solution.

    Attributes:
        genes: Inclusion bits, shape (n_items,), 1 means the item is packed.
        items: The item set the totals were computed against.
        total_value: Sum of values of the packed items.
        total_weight: Sum of weights of the packed items.

    Example:
        >>> items = ItemSet(weights=[2, 3, 4], values=[3, 4, 5], capacity=5)
        >>> ind = Individual(np.array([1, 0, 1]), items)
        >>> ind.total_value, ind.total_weight
        (8, 6)
        >>> ind.is_feasible(items.capacity)
        False
    """

    genes: np.ndarray
    items: ItemSet = field(repr=False)
    total_value: int = field(init=False)
    total_weight: int = field(init=False)

    def __post_init__(self) -> None:
        """Copy the genes, freeze them, and compute fitness.

        Raises:
            ValueError: If genes is not 1D, does not match the item count, is not an
                integer or bool array, or holds values other than 0 and 1.
        """
        raw = np.asarray(self.genes)
        if raw.ndim != 1:
            raise ValueError(f"genes must be 1D, got shape {raw.shape}")
        if raw.shape[0] != self.items.n_items:
            raise ValueError(f"genes has {raw.shape[0]} bits, expected {self.items.n_items} to match items")
        # np.asarray([]) is float64, so only check the dtype of non-empty input
        if raw.size and not (np.issubdtype(raw.dtype, np.integer) or np.issubdtype(raw.dtype, np.bool_)):
            raise ValueError(f"genes must be integer or bool, got dtype {raw.dtype}")
        if np.any((raw != 0) & (raw != 1)):
            raise ValueError("genes must contain only 0 and 1")
        genes = raw.astype(np.int8)
        genes.setflags(write=False)
        object.__setattr__(self, "genes", genes)

        mask = genes == 1
        object.__setattr__(self, "total_value", int(self.items.values[mask].sum()))
        object.__setattr__(self, "total_weight", int(self.items.weights[mask].sum()))

    @property
    def n_items(self) -> int:
        return self.genes.shape[0]

    def is_feasible(self, capacity: int) -> bool:
        """Return True if the packed weight fits within capacity."""
        return self.total_weight <= capacity

    def to_dict(self) -> dict[str, Any]:
        """Plain-Python view for presentation layers and JSON output.

        Example:
            >>> items = ItemSet(weights=[2, 3], values=[3, 4], capacity=5)
            >>> Individual(np.array([0, 1]), items).to_dict()
            {'genes': [0, 1], 'total_value': 4, 'total_weight': 3}
        """
        return {
            "genes": self.genes.tolist(),
            "total_value": self.total_value,
            "total_weight": self.total_weight,
        }
