"""Exception types raised by knapsack-ga."""


class ConfigurationError(ValueError):
    """Raised when an item set or algorithm configuration is invalid.

    Subclasses ValueError so callers that already guard numpy-style validation
    with ``except ValueError`` keep working, while still letting the
    presentation layer distinguish a rejected input from a poor solution.
    """
