"""Algorithm configuration for the steady-state knapsack GA."""

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

import numpy as np

from knapsack_ga.errors import ConfigurationError

DEFAULT_POPULATION_SIZE: int = 50
DEFAULT_MUTATION_RATE: float = 0.1
DEFAULT_MAX_GENERATIONS: int = 1000


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass(frozen=True)
class GAConfig:
    """Immutable per-run configuration.

    Attributes:
        population_size: Number of Individuals kept in the population. At least 2,
            since every generation evicts up to two members.
        mutation_rate: Probability that a generation's two children are mutated.
        max_generations: Exact number of generations to run.

    Example:
        >>> config = GAConfig(population_size=10, max_generations=50)
        >>> config.mutation_rate
        0.1
    """

    population_size: int = DEFAULT_POPULATION_SIZE
    mutation_rate: float = DEFAULT_MUTATION_RATE
    max_generations: int = DEFAULT_MAX_GENERATIONS

    def __post_init__(self) -> None:
        """Validate parameter ranges.

        Raises:
            ConfigurationError: If any parameter is of the wrong type or out of range.
        """
        if not _is_int(self.population_size):
            raise ConfigurationError(
                f"population_size must be an integer, got {type(self.population_size).__name__}"
            )
        if self.population_size < 2:
            raise ConfigurationError(f"population_size must be at least 2, got {self.population_size}")

        if isinstance(self.mutation_rate, bool) or not isinstance(
            self.mutation_rate, (int, float, np.integer, np.floating)
        ):
            raise ConfigurationError(f"mutation_rate must be a number, got {type(self.mutation_rate).__name__}")
        if math.isnan(self.mutation_rate) or not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigurationError(f"mutation_rate must be in [0, 1], got {self.mutation_rate}")

        if not _is_int(self.max_generations):
            raise ConfigurationError(
                f"max_generations must be an integer, got {type(self.max_generations).__name__}"
            )
        if self.max_generations < 0:
            raise ConfigurationError(f"max_generations must be non-negative, got {self.max_generations}")

        object.__setattr__(self, "population_size", int(self.population_size))
        object.__setattr__(self, "mutation_rate", float(self.mutation_rate))
        object.__setattr__(self, "max_generations", int(self.max_generations))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GAConfig":
        """Build a configuration from a mapping, e.g. a parsed config file.

        Missing keys fall back to the defaults.

        Raises:
            ConfigurationError: If the mapping contains unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {unknown}; expected a subset of {sorted(known)}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
