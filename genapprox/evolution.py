"""The evolutionary loop and extraction of the best individual."""

from __future__ import annotations

from typing import Callable

from genapprox.core import (
    Generation,
    Individ,
    Polynomial,
    mean_fitness,
    measure_generation,
)
from genapprox.mutation import MutationStrategy, mutation
from genapprox.recombination import RecombinationStrategy, recombination
from genapprox.selection import selection

EPSILON = 0.005


def evolution(
    n_epoch: int,
    poly: Polynomial,
    init_generation: Generation,
    recombination_proba: float,
    mutation_proba: float,
    selection_strategy: Callable[[Generation], Individ],
    recombination_strategy: RecombinationStrategy,
    mutation_strategy: MutationStrategy,
    verbose: bool = False,
) -> Generation:
    """Evolve ``init_generation`` towards ``poly`` and return the best generation.

    The initial generation is measured in place. The loop stops after
    ``n_epoch`` epochs or once the mean error falls below EPSILON.
    """
    measure_generation(poly, init_generation)
    mean = mean_fitness(init_generation)
    initial_mean = mean

    current = init_generation.copy()
    best = current.copy()

    epoch = 0
    while epoch < n_epoch and mean >= EPSILON:
        if verbose:
            print(f"{mean:g}")
        current = selection(current, selection_strategy)
        current = recombination(recombination_proba, current, recombination_strategy)
        current = mutation(mutation_proba, current, mutation_strategy)
        measure_generation(poly, current)
        mean = mean_fitness(current)
        if mean < initial_mean:
            best = current.copy()
        epoch += 1

    return best


def get_best(generation: Generation) -> Individ:
    """The individual with the lowest error; an empty one if none is finite."""
    best = Individ()
    for individ in generation:
        if individ.fitness < best.fitness:
            best = individ
    return best.copy()