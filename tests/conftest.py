"""Shared test fixtures for knapsack-ga tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- small_items: The four-item reference instance
- make_population: Factory building a population from explicit gene rows
"""

from collections.abc import Callable

import numpy as np
import pytest

from knapsack_ga import Individual, ItemSet, Population


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_items() -> ItemSet:
    """Four items with weights [2, 3, 4, 5], values [3, 4, 5, 6], capacity 5."""
    return ItemSet(weights=[2, 3, 4, 5], values=[3, 4, 5, 6], capacity=5)


@pytest.fixture
def unit_items() -> ItemSet:
    """Four items where item i has weight 1 and value 10**i.

    Every subset has a distinct value, so a member's value identifies its genes.
    """
    return ItemSet(weights=[1, 1, 1, 1], values=[1, 10, 100, 1000], capacity=2)


@pytest.fixture
def make_population() -> Callable[[ItemSet, list[list[int]]], Population]:
    """Build a Population whose slot i holds gene row i."""

    def factory(items: ItemSet, rows: list[list[int]]) -> Population:
        return Population([Individual(np.array(row), items) for row in rows])

    return factory


class FixedDraws:
    """Stand-in for np.random.Generator.integers returning scripted draws.

    Each call to integers() pops the next scripted array, so tests can force
    exactly which members a tournament compares.
    """

    def __init__(self, draws: list[list[int]]) -> None:
        self._draws = [np.array(d) for d in draws]
        self.sizes: list[int | None] = []

    def integers(self, low: int, high: int | None = None, size: int | None = None) -> np.ndarray:
        self.sizes.append(size)
        return self._draws.pop(0)


@pytest.fixture
def fixed_draws() -> type[FixedDraws]:
    """Provide the FixedDraws class for scripted-rng tests."""
    return FixedDraws
