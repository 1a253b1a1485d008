"""Parent selection for the knapsack GA."""

from knapsack_ga.selection.tournament import binary_tournament, select_parents

__all__ = ["binary_tournament", "select_parents"]
