"""Core types: genes, individuals, generations and target polynomials."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

Interval = tuple[float, float]
Partition = list[Interval]


@dataclass(frozen=True)
class Gene:
    """A constant piece of height ``height`` over ``interval``."""

    height: float
    interval: Interval


class Individ(list):
    """A chromosome: a list of genes together with its fitness (error)."""

    def __init__(self, genes: Iterable[Gene] = (), fitness: float = math.inf) -> None:
        super().__init__(genes)
        self.fitness = fitness

    def copy(self) -> "Individ":
        return Individ(self, self.fitness)

    def __repr__(self) -> str:
        return f"Individ({list.__repr__(self)}, fitness={self.fitness!r})"


class Generation(list):
    """A population of individuals with cached selection probabilities."""

    def __init__(
        self,
        individs: Iterable[Individ] = (),
        is_scaled: bool = False,
        proba: Optional[Iterable[float]] = None,
    ) -> None:
        super().__init__(individs)
        self.is_scaled = is_scaled
        self.proba: list[float] = list(proba) if proba is not None else []

    def copy(self) -> "Generation":
        return Generation((individ.copy() for individ in self), self.is_scaled, self.proba)

    def __repr__(self) -> str:
        return (
            f"Generation({list.__repr__(self)}, is_scaled={self.is_scaled!r}, "
            f"proba={self.proba!r})"
        )


@dataclass(frozen=True)
class Monomial:
    coefficient: float = 1.0
    power: float = 0.0


def _pow(x: float, power: float) -> float:
    try:
        return math.pow(x, power)
    except ValueError:
        if x == 0 and power < 0:
            return math.inf
        return math.nan


class Polynomial(list):
    """A sum of monomials."""

    def eval(self, x: float) -> float:
        return sum((m.coefficient * _pow(x, m.power) for m in self), 0.0)


def fitness(poly: Polynomial, individ: Iterable[Gene]) -> float:
    """Sum of absolute differences between gene heights and the mean of the
    polynomial at each gene's interval endpoints."""
    error = 0.0
    for gene in individ:
        left, right = gene.interval
        target_mean = (poly.eval(left) + poly.eval(right)) / 2
        error += abs(target_mean - gene.height)
    return error


def measure_generation(poly: Polynomial, generation: Iterable[Individ]) -> None:
    """Set the fitness of every individual in place."""
    for individ in generation:
        individ.fitness = fitness(poly, individ)


def mean_fitness(generation: Iterable[Individ]) -> float:
    """Average fitness; NaN for an empty generation."""
    values = [individ.fitness for individ in generation]
    if not values:
        return math.nan
    return sum(values) / len(values)