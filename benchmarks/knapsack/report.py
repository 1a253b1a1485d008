"""Text summaries of knapsack benchmark results."""

from collections import defaultdict
from collections.abc import Callable, Sequence

import numpy as np

LIBRARIES: list[str] = ["knapsack-ga", "pymoo", "deap"]


def format_table(
    records: Sequence[dict],
    field: str,
    cell: Callable[[list[float]], str],
    width: int,
    libraries: Sequence[str] = LIBRARIES,
) -> list[str]:
    """Tabulate one result field per problem (rows) and library (columns).

    Args:
        records: Benchmark records with 'problem', 'library' and field keys.
        field: Record key to aggregate, e.g. 'gap' or 'time_seconds'.
        cell: Formats the collected samples of one problem/library pair.
        width: Column width for every library column.
        libraries: Column order.

    Returns:
        Table lines: header, rule, one row per problem, rule. Pairs without
        samples show 'N/A'.

    Example:
        >>> format_table(records, "time_seconds", lambda xs: f"{np.mean(xs):.2f}", width=15)
    """
    samples: dict[str, dict[str, list[float]]] = defaultdict(lambda: defaultdict(list))
    for r in records:
        samples[r["problem"]][r["library"]].append(r[field])

    rule = "-" * (22 + width * len(libraries))
    lines = [f"{'Problem':<22}" + "".join(f"{lib:>{width}}" for lib in libraries), rule]
    for problem in sorted(samples):
        row = f"{problem:<22}"
        for lib in libraries:
            values = samples[problem][lib]
            row += f"{cell(values) if values else 'N/A':>{width}}"
        lines.append(row)
    lines.append(rule)
    return lines


def gap_cell(gaps: list[float]) -> str:
    return f"{np.mean(gaps):.2%} +/- {np.std(gaps):.2%}"


def time_cell(times: list[float]) -> str:
    return f"{np.mean(times):.2f}"
