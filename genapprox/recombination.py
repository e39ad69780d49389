"""Crossover operators and the recombination step."""

from __future__ import annotations

import math
import random
from typing import Callable, Optional

from genapprox.core import Gene, Generation, Individ

ALPHA_INTERVAL = 0.25

_default_rng = random.Random()

Individs = tuple[Individ, Individ]
RecombinationStrategy = Callable[[Individ, Individ], Individs]


def recombination(
    recomb_proba: float,
    generation: Generation,
    recombination_strategy: RecombinationStrategy,
    rng: Optional[random.Random] = None,
) -> Generation:
    """Fill a new generation of equal size with children of random distinct pairs."""
    rng = rng or _default_rng
    size = len(generation)
    if size == 0:
        return Generation()
    if size % 2:
        raise ValueError("recombination needs an even generation size")
    if not recomb_proba > 0:
        raise ValueError("recombination probability must be positive")

    offspring = Generation()
    while len(offspring) != size:
        i = rng.randrange(size)
        j = rng.randrange(size)
        if i != j and rng.random() <= recomb_proba:
            first, second = recombination_strategy(
                generation[i].copy(), generation[j].copy()
            )
            first.fitness = math.inf
            second.fitness = math.inf
            offspring.extend((first, second))
    return offspring


def _check_pair(first: Individ, second: Individ) -> None:
    if len(first) != len(second):
        raise ValueError("parents must have the same number of genes")
    if not first:
        raise ValueError("parents must have at least one gene")


def single_point_crossover(
    first: Individ, second: Individ, rng: Optional[random.Random] = None
) -> Individs:
    """Exchange the tails of two parents from a random point onwards."""
    rng = rng or _default_rng
    _check_pair(first, second)
    point = rng.randrange(len(first))
    return (
        Individ(list(first[:point]) + list(second[point:]), first.fitness),
        Individ(list(second[:point]) + list(first[point:]), second.fitness),
    )


def arithmetic_crossover(
    first: Individ, second: Individ, rng: Optional[random.Random] = None
) -> Individs:
    """Blend parent heights with per-gene weights from [-ALPHA, 1 + ALPHA]."""
    rng = rng or _default_rng
    _check_pair(first, second)
    low, high = -ALPHA_INTERVAL, 1.0 + ALPHA_INTERVAL
    first_alpha = [rng.uniform(low, high) for _ in first]
    second_alpha = [rng.uniform(low, high) for _ in second]

    def child(alphas: list[float]) -> Individ:
        return Individ(
            Gene(a.height + alpha * (b.height - a.height), a.interval)
            for a, b, alpha in zip(first, second, alphas)
        )

    return child(first_alpha), child(second_alpha)