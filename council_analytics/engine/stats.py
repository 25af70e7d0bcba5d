"""
Numeric helpers shared by the analytics engine.

All reductions use population formulas and return None when there is
nothing to reduce, so "no data" stays distinguishable from a real zero.
"""

import math
from collections import Counter
from collections.abc import Iterable


def mean(values: Iterable[float]) -> float | None:
    """Arithmetic mean, or None for an empty input."""
    values = list(values)
    if not values:
        return None
    # fsum is exact, so the result does not depend on input order
    return math.fsum(values) / len(values)


def population_variance(values: Iterable[float]) -> float | None:
    """Mean of squared deviations from the mean, or None for an empty input."""
    values = list(values)
    center = mean(values)
    if center is None:
        return None
    return math.fsum((value - center) ** 2 for value in values) / len(values)


def population_std(values: Iterable[float]) -> float | None:
    """Population standard deviation, or None for an empty input."""
    variance = population_variance(values)
    if variance is None:
        return None
    return math.sqrt(variance)


def frequency(values: Iterable[int]) -> dict[int, int]:
    """Histogram of values, keyed in ascending order."""
    counts = Counter(values)
    return {value: counts[value] for value in sorted(counts)}
