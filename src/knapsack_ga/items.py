"""Item set for a 0/1 knapsack instance.

The item set is the shared, read-only input of a run: index-aligned weight and
value arrays plus the knapsack capacity. Every Individual holds a reference to
the same ItemSet, so the arrays are copied once on construction and flagged
non-writeable.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from knapsack_ga.errors import ConfigurationError


def _as_item_array(name: str, data: Sequence[int] | np.ndarray) -> np.ndarray:
    """Convert a weight or value sequence to a read-only 1D int64 array.

    Raises:
        ConfigurationError: If the data is not 1D, not integer, or has negative entries.
    """
    arr = np.asarray(data)
    if arr.ndim != 1:
        raise ConfigurationError(f"{name} must be 1D, got shape {arr.shape}")
    # np.asarray([]) is float64, so only check the dtype of non-empty input
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ConfigurationError(f"{name} must contain integers, got dtype {arr.dtype}")
    arr = arr.astype(np.int64)
    if np.any(arr < 0):
        raise ConfigurationError(f"{name} must be non-negative, got minimum {int(arr.min())}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class ItemSet:
    """Immutable 0/1 knapsack instance.

    Attributes:
        weights: Item weights, shape (n_items,), non-negative integers.
        values: Item values, shape (n_items,), non-negative integers.
        capacity: Weight budget of the knapsack.

    Example:
        >>> items = ItemSet(weights=[2, 3, 4, 5], values=[3, 4, 5, 6], capacity=5)
        >>> items.n_items
        4
        >>> items.total_value
        18
    """

    weights: np.ndarray
    values: np.ndarray
    capacity: int

    def __post_init__(self) -> None:
        """Validate and copy the item arrays.

        Raises:
            ConfigurationError: If the arrays are malformed, differ in length, or the
                capacity is not a non-negative integer.
        """
        weights = _as_item_array("weights", self.weights)
        values = _as_item_array("values", self.values)
        if weights.shape[0] != values.shape[0]:
            raise ConfigurationError(
                f"weights has {weights.shape[0]} items, values has {values.shape[0]}; lengths must match"
            )

        if isinstance(self.capacity, bool) or not isinstance(self.capacity, (int, np.integer)):
            raise ConfigurationError(f"capacity must be an integer, got {type(self.capacity).__name__}")
        if self.capacity < 0:
            raise ConfigurationError(f"capacity must be non-negative, got {self.capacity}")

        object.__setattr__(self, "weights", weights)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "capacity", int(self.capacity))

    def __len__(self) -> int:
        return self.weights.shape[0]

    @property
    def n_items(self) -> int:
        """Number of items N."""
        return self.weights.shape[0]

    @property
    def total_value(self) -> int:
        """Value of taking every item; upper bound on any Individual's value."""
        return int(self.values.sum())

    @property
    def total_weight(self) -> int:
        """Weight of taking every item; upper bound on any Individual's weight."""
        return int(self.weights.sum())
