"""Mutation operators applied to individuals of a generation."""

from __future__ import annotations

import dataclasses
import random
from typing import Callable, Iterable, Optional

from genapprox.core import Generation, Individ

DELTA = 1.0
SIGMA = 1.0

_default_rng = random.Random()

MutationStrategy = Callable[[Individ], Individ]


def mutation(
    mutation_proba: float,
    generation: Generation,
    mutation_strategy: MutationStrategy,
    rng: Optional[random.Random] = None,
) -> Generation:
    """A new generation where each individual is mutated with ``mutation_proba``."""
    rng = rng or _default_rng
    return Generation(
        mutation_strategy(individ.copy())
        if rng.random() <= mutation_proba
        else individ.copy()
        for individ in generation
    )


def _shifted(individ: Individ, offsets: Iterable[float]) -> Individ:
    return Individ(
        (
            dataclasses.replace(gene, height=gene.height + offset)
            for gene, offset in zip(individ, offsets)
        ),
        individ.fitness,
    )


def swap_mutation(individ: Individ, rng: Optional[random.Random] = None) -> Individ:
    """Swap the heights of two distinct, randomly chosen genes."""
    rng = rng or _default_rng
    if len(individ) < 2:
        raise ValueError("swap mutation needs at least two genes")
    i, j = rng.sample(range(len(individ)), 2)
    genes = list(individ)
    genes[i], genes[j] = (
        dataclasses.replace(genes[i], height=genes[j].height),
        dataclasses.replace(genes[j], height=genes[i].height),
    )
    return Individ(genes, individ.fitness)


def perturbation_mutation(
    individ: Individ, rng: Optional[random.Random] = None
) -> Individ:
    """Shift every height by a value drawn uniformly from [-DELTA, DELTA]."""
    rng = rng or _default_rng
    return _shifted(individ, (rng.uniform(-DELTA, DELTA) for _ in individ))


def gauss_mutation(individ: Individ, rng: Optional[random.Random] = None) -> Individ:
    """Shift every height by normal noise with standard deviation SIGMA."""
    rng = rng or _default_rng
    return _shifted(individ, (rng.gauss(0.0, SIGMA) for _ in individ))