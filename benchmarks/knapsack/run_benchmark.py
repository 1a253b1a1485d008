"""Benchmark runner comparing knapsack-ga, Pymoo, and DEAP on 0/1 knapsack instances.

This script runs a binary GA on every instance family using three different
libraries with comparable budgets and reports the optimality gap of the best
within-capacity solution against the exact dynamic-programming optimum.

Usage:
    uv run python benchmarks/knapsack/run_benchmark.py
"""

import json
import logging
import sys
import time
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
from pymoo.algorithms.soo.nonconvex.ga import GA
from pymoo.core.problem import Problem as PymooProblem
from pymoo.operators.crossover.pntx import SinglePointCrossover
from pymoo.operators.mutation.bitflip import BitflipMutation
from pymoo.operators.sampling.rnd import BinaryRandomSampling
from pymoo.optimize import minimize
from pymoo.termination import get_termination

from benchmarks.knapsack.problems import N_ITEMS, PROBLEMS
from benchmarks.knapsack.report import format_table, gap_cell, time_cell
from benchmarks.metrics import optimal_value, optimality_gap
from knapsack_ga import GAConfig, ItemSet

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
POP_SIZE = 50
MUTATION_RATE = 0.1
# knapsack-ga evaluates 2 children per generation; the generational libraries
# evaluate POP_SIZE. Match the total evaluation budget.
N_EVALUATIONS = 20_000
N_STEADY_STATE_GENERATIONS = (N_EVALUATIONS - POP_SIZE) // 2
N_GENERATIONS = N_EVALUATIONS // POP_SIZE
N_RUNS = 10
SEEDS = list(range(N_RUNS))


def run_knapsack_ga(items: ItemSet, seed: int) -> tuple[int, float]:
    """Run the steady-state GA from knapsack-ga.

    Args:
        items: Knapsack instance.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (best feasible value, elapsed_time_seconds). The value is 0 if
        no feasible Individual was evaluated.
    """
    from knapsack_ga import evolve

    config = GAConfig(
        population_size=POP_SIZE,
        mutation_rate=MUTATION_RATE,
        max_generations=N_STEADY_STATE_GENERATIONS,
    )

    start_time = time.perf_counter()
    result = evolve(items, config=config, seed=seed)
    elapsed = time.perf_counter() - start_time

    value = result.best_feasible.total_value if result.best_feasible is not None else 0
    return value, elapsed


class PymooKnapsackProblem(PymooProblem):
    """Wrapper to express a knapsack instance as a constrained Pymoo problem."""

    def __init__(self, items: ItemSet) -> None:
        super().__init__(n_var=items.n_items, n_obj=1, n_ieq_constr=1, xl=0, xu=1, vtype=bool)
        self._items = items

    def _evaluate(self, x: np.ndarray, out: dict, *args, **kwargs) -> None:
        x = x.astype(np.int64)
        # Pymoo minimizes; constraint G <= 0 means feasible
        out["F"] = -(x @ self._items.values)
        out["G"] = x @ self._items.weights - self._items.capacity


def run_pymoo(items: ItemSet, seed: int) -> tuple[int, float]:
    """Run a binary GA using Pymoo library.

    Args:
        items: Knapsack instance.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (best feasible value, elapsed_time_seconds).
    """
    problem = PymooKnapsackProblem(items)

    algorithm = GA(
        pop_size=POP_SIZE,
        sampling=BinaryRandomSampling(),
        crossover=SinglePointCrossover(),
        mutation=BitflipMutation(),
        eliminate_duplicates=True,
    )

    termination = get_termination("n_gen", N_GENERATIONS)

    start_time = time.perf_counter()
    result = minimize(
        problem,
        algorithm,
        termination,
        seed=seed,
        verbose=False,
    )
    elapsed = time.perf_counter() - start_time

    # F is None when no feasible solution was found
    value = int(-np.asarray(result.F).ravel()[0]) if result.F is not None else 0
    return value, elapsed


def _setup_deap() -> None:
    """Set up DEAP creator classes (handles cleanup for multiple runs)."""
    from deap import base, creator

    # Clean up any existing creator classes
    if hasattr(creator, "FitnessMax"):
        del creator.FitnessMax
    if hasattr(creator, "Individual"):
        del creator.Individual

    # Create fitness and individual classes
    creator.create("FitnessMax", base.Fitness, weights=(1.0,))
    creator.create("Individual", list, fitness=creator.FitnessMax)


def run_deap(items: ItemSet, seed: int) -> tuple[int, float]:
    """Run a binary GA using DEAP library.

    Over-capacity individuals get fitness 0, so every survivor that scores
    above 0 is feasible.

    Args:
        items: Knapsack instance.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (best feasible value, elapsed_time_seconds).
    """
    import random

    from deap import algorithms, base, creator, tools

    _setup_deap()

    toolbox = base.Toolbox()
    toolbox.register("attr_bit", random.randint, 0, 1)
    toolbox.register("individual", tools.initRepeat, creator.Individual, toolbox.attr_bit, n=items.n_items)
    toolbox.register("population", tools.initRepeat, list, toolbox.individual)

    def evaluate(individual: list) -> tuple[int]:
        x = np.array(individual, dtype=np.int64)
        if x @ items.weights > items.capacity:
            return (0,)
        return (int(x @ items.values),)

    toolbox.register("evaluate", evaluate)
    toolbox.register("mate", tools.cxOnePoint)
    toolbox.register("mutate", tools.mutFlipBit, indpb=1.0 / items.n_items)
    toolbox.register("select", tools.selTournament, tournsize=2)

    random.seed(seed)
    np.random.seed(seed)

    start_time = time.perf_counter()
    pop = toolbox.population(n=POP_SIZE)
    hof = tools.HallOfFame(1)
    algorithms.eaSimple(
        pop,
        toolbox,
        cxpb=0.9,
        mutpb=MUTATION_RATE,
        ngen=N_GENERATIONS,
        halloffame=hof,
        verbose=False,
    )
    elapsed = time.perf_counter() - start_time

    return int(hof[0].fitness.values[0]), elapsed


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    timestamp = datetime.now(UTC).isoformat()

    metadata = {
        "timestamp": timestamp,
        "parameters": {
            "pop_size": POP_SIZE,
            "mutation_rate": MUTATION_RATE,
            "n_evaluations": N_EVALUATIONS,
            "n_items": N_ITEMS,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
    }

    results = []

    runners = [
        ("knapsack-ga", run_knapsack_ga),
        ("pymoo", run_pymoo),
        ("deap", run_deap),
    ]

    total_runs = len(PROBLEMS) * len(runners) * N_RUNS
    current_run = 0

    for problem_name, make_problem in PROBLEMS.items():
        for seed in SEEDS:
            items = make_problem(seed)
            optimum = optimal_value(items)
            for library_name, runner in runners:
                current_run += 1
                logger.info(f"Running [{current_run}/{total_runs}]: {library_name} on {problem_name} (seed={seed})")

                value, elapsed = runner(items, seed)
                gap = optimality_gap(value, optimum)

                results.append(
                    {
                        "library": library_name,
                        "problem": problem_name,
                        "seed": seed,
                        "value": value,
                        "optimum": optimum,
                        "gap": gap,
                        "time_seconds": elapsed,
                    }
                )

                logger.info(f"  Value: {value}/{optimum} (gap {gap:.2%}), Time: {elapsed:.2f}s")

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print optimality-gap and timing tables of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    records = results["results"]

    print("\n" + "=" * 90)
    print("BENCHMARK SUMMARY")
    print("=" * 90)
    print(f"\nParameters: pop_size={POP_SIZE}, evaluations={N_EVALUATIONS}, runs={N_RUNS}")

    print("\nOptimality gap (mean +/- std, lower is better):")
    print("\n".join(format_table(records, "gap", gap_cell, width=22)))

    print("\nTiming (mean seconds per run):")
    print("\n".join(format_table(records, "time_seconds", time_cell, width=15)))
    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting knapsack benchmark suite")
    logger.info(f"Parameters: pop_size={POP_SIZE}, evaluations={N_EVALUATIONS}, runs={N_RUNS}")

    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
