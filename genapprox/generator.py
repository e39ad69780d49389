"""Random creation of initial generations."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from genapprox.core import Gene, Generation, Individ, Interval, Partition, Polynomial

INIT_UNIFORM = 10.0

_default_rng = random.Random()


def distribution_bound(interval: Interval, poly: Polynomial) -> float:
    """Largest absolute value of the polynomial at the interval endpoints."""
    left, right = interval
    return max(abs(poly.eval(left)), abs(poly.eval(right)))


def interval_partition(chromosome_size: int, interval: Interval) -> Partition:
    """Split ``interval`` into consecutive sub-intervals of equal length."""
    if chromosome_size < 0:
        raise ValueError("chromosome size must not be negative")
    start, end = interval
    delta = (end - start) / chromosome_size if chromosome_size else (
        (end - start) / 0.0 if end != start else float("nan")
    ) if False else None
    if chromosome_size == 0:
        return []
    delta = (end - start) / chromosome_size
    if not delta > 0:
        raise ValueError("interval must have a positive length")

    intervals: Partition = []
    while len(intervals) < chromosome_size or start + delta <= end:
        intervals.append((start, start + delta))
        start += delta
    return intervals


def generate_gene(
    interval: Interval,
    bound: float = INIT_UNIFORM,
    rng: Optional[random.Random] = None,
) -> Gene:
    """A gene over ``interval`` with a height drawn uniformly from [-bound, bound]."""
    rng = rng or _default_rng
    return Gene(rng.uniform(-bound, bound), interval)


def generate_individ(
    chromosome_size: int,
    partition: Sequence[Interval],
    bound: float = INIT_UNIFORM,
    rng: Optional[random.Random] = None,
) -> Individ:
    """An individual with one random gene per interval of the partition."""
    if chromosome_size > len(partition):
        raise ValueError("partition is shorter than the chromosome")
    return Individ(
        generate_gene(interval, bound, rng) for interval in partition[:chromosome_size]
    )


def generate_generation(
    generation_size: int,
    chromosome_size: int,
    interval: Interval,
    bound: float = INIT_UNIFORM,
    rng: Optional[random.Random] = None,
) -> Generation:
    """A generation of random individuals over a shared partition of ``interval``."""
    partition = interval_partition(chromosome_size, interval)
    return Generation(
        generate_individ(chromosome_size, partition, bound, rng)
        for _ in range(generation_size)
    )