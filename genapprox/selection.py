"""Rank-based roulette selection and fitness scaling."""

from __future__ import annotations

import enum
import math
import random
from typing import Callable, Optional

from genapprox.core import Generation, Individ

MAX_AFTER_SCALING = 100.0

_default_rng = random.Random()

SelectionStrategy = Callable[[Generation], Individ]


class ScalingType(enum.Enum):
    LINEAR = "linear"
    SIGMA = "sigma"
    SOFTMAX = "softmax"
    EXPONENTIAL = "exponential"


def calculate_proba(generation: Generation) -> None:
    """Sort by fitness (worst first) and assign rank-proportional probabilities."""
    generation.sort(key=lambda individ: individ.fitness, reverse=True)
    n = len(generation)
    total = n * (n + 1) // 2
    generation.proba = [rank / total for rank in range(1, n + 1)]


def selection(generation: Generation, selection_strategy: SelectionStrategy) -> Generation:
    """Build a new generation of the same size from picks of ``selection_strategy``."""
    return Generation(
        selection_strategy(generation).copy() for _ in range(len(generation))
    )


def roulette_rule(generation: Generation, rng: Optional[random.Random] = None) -> Individ:
    """Pick one individual using the generation's selection probabilities."""
    rng = rng or _default_rng
    if not generation.proba:
        calculate_proba(generation)
    return rng.choices(generation, weights=generation.proba)[0]


def _sigma_scale(generation: Generation) -> None:
    n = len(generation)
    if n == 0:
        return
    mean = sum(individ.fitness for individ in generation) / n
    if n > 1:
        variance = sum((individ.fitness - mean) ** 2 for individ in generation) / (n - 1)
        std = math.sqrt(variance)
    else:
        std = math.nan
    for individ in generation:
        z = (individ.fitness - mean) / std if std > 0 else math.nan
        individ.fitness = 0.0 if math.isnan(z) else max(0.0, 1.0 + z)


def apply_scaling(scaling_type: ScalingType, generation: Generation) -> None:
    """Rescale every individual's fitness in place and mark the generation scaled."""
    if scaling_type is ScalingType.LINEAR:
        top = max((individ.fitness for individ in generation), default=-math.inf)
        factor = MAX_AFTER_SCALING / top
        for individ in generation:
            individ.fitness *= factor
    elif scaling_type is ScalingType.SIGMA:
        _sigma_scale(generation)
    elif scaling_type is ScalingType.SOFTMAX:
        total = sum(math.exp(individ.fitness) for individ in generation)
        for individ in generation:
            individ.fitness = math.exp(individ.fitness) / total
    elif scaling_type is ScalingType.EXPONENTIAL:
        for individ in generation:
            individ.fitness = math.exp(individ.fitness)
    else:
        raise ValueError(f"unknown scaling type: {scaling_type!r}")
    generation.is_scaled = True


def scaling_rule(
    scaling_type: ScalingType = ScalingType.LINEAR,
    rng: Optional[random.Random] = None,
) -> SelectionStrategy:
    """A selection strategy that scales the generation once, then uses the roulette."""

    def strategy(generation: Generation) -> Individ:
        if not generation.is_scaled:
            apply_scaling(scaling_type, generation)
        return roulette_rule(generation, rng)

    return strategy