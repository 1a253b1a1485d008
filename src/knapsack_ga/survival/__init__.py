"""Survivor replacement for the steady-state knapsack GA."""

from knapsack_ga.survival.replacement import replace_worst, worst_two

__all__ = ["replace_worst", "worst_two"]
