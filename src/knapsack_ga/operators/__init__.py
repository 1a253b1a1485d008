"""Genetic operators for the knapsack GA.

This module provides:
- single_point_crossover / random_crossover: splice two parents at one cut
- flip_bit / random_pair_mutation: gated single-bit flips on a child pair
"""

from knapsack_ga.operators.standard import flip_bit, random_crossover, random_pair_mutation, single_point_crossover

__all__ = ["single_point_crossover", "random_crossover", "flip_bit", "random_pair_mutation"]
