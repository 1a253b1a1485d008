"""Binary genetic operators for the knapsack GA.

This module provides the two variation operators of the fixed recipe:

- Single-point crossover: splice two parents at one cut index, producing two
  complementary children
- Paired bit-flip mutation: one Bernoulli trial gates a single bit flip in
  each of the two children

The pure splicing/flipping functions take explicit cut indices and positions
so they can be tested without randomness; the ``random_*`` wrappers draw those
from the run's generator.
"""

import numpy as np


def single_point_crossover(
    parent_a: np.ndarray, parent_b: np.ndarray, cut: int
) -> tuple[np.ndarray, np.ndarray]:
    """Splice two gene vectors at a cut index.

    Args:
        parent_a: Genes of the first parent, shape (n_items,).
        parent_b: Genes of the second parent, shape (n_items,).
        cut: Cut index in [0, n_items]. Genes before the cut come from one
            parent, genes from the cut onward from the other.

    Returns:
        Tuple (child1, child2) where child1 = a[:cut] + b[cut:] and
        child2 = b[:cut] + a[cut:].

    Raises:
        ValueError: If the parents differ in length or cut is out of range.

    Example:
        >>> c1, c2 = single_point_crossover(np.array([1, 1, 1]), np.array([0, 0, 0]), cut=1)
        >>> c1, c2
        (array([1, 0, 0]), array([0, 1, 1]))
    """
    n_items = len(parent_a)
    if len(parent_b) != n_items:
        raise ValueError(f"parents must have equal length, got {n_items} and {len(parent_b)}")
    if not 0 <= cut <= n_items:
        raise ValueError(f"cut must be in [0, {n_items}], got {cut}")

    child1 = np.concatenate([parent_a[:cut], parent_b[cut:]])
    child2 = np.concatenate([parent_b[:cut], parent_a[cut:]])
    return child1, child2


def random_crossover(
    parent_a: np.ndarray, parent_b: np.ndarray, rng: np.random.Generator
) -> tuple[np.ndarray, np.ndarray]:
    """Single-point crossover with the cut drawn uniformly from [0, n_items).

    With no items there is nothing to cut, and no random number is drawn.
    """
    n_items = len(parent_a)
    cut = int(rng.integers(0, n_items)) if n_items else 0
    return single_point_crossover(parent_a, parent_b, cut)


def flip_bit(genes: np.ndarray, position: int) -> np.ndarray:
    """Return a copy of genes with one bit inverted.

    Example:
        >>> flip_bit(np.array([0, 1, 0]), 1)
        array([0, 0, 0])
    """
    mutated = genes.copy()
    mutated[position] = 1 - mutated[position]
    return mutated


def random_pair_mutation(
    child1: np.ndarray,
    child2: np.ndarray,
    mutation_rate: float,
    rng: np.random.Generator,
) -> tuple[np.ndarray, np.ndarray]:
    """Mutate both children together, or neither.

    A single Bernoulli trial with probability mutation_rate is drawn. On
    success each child gets exactly one bit flipped, at positions drawn
    independently of each other.

    Args:
        child1: Genes of the first child.
        child2: Genes of the second child.
        mutation_rate: Probability that the pair is mutated.
        rng: Random number generator for reproducibility.

    Returns:
        Tuple of (possibly mutated) copies of the children.
    """
    n_items = len(child1)
    if rng.random() < mutation_rate and n_items:
        child1 = flip_bit(child1, int(rng.integers(0, n_items)))
        child2 = flip_bit(child2, int(rng.integers(0, n_items)))
        return child1, child2
    return child1.copy(), child2.copy()
