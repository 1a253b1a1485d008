"""Optimization algorithms for knapsack-ga."""

from knapsack_ga.algorithms.ga import evolve, run

__all__ = ["evolve", "run"]
