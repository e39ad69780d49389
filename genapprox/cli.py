"""Command line: approximate x**2 on an interval with a step function."""

from __future__ import annotations

import argparse
import functools
import random
import re
import sys
from typing import Optional, Sequence

from genapprox.core import Monomial, Polynomial
from genapprox.evolution import evolution, get_best
from genapprox.generator import distribution_bound, generate_generation
from genapprox.mutation import swap_mutation
from genapprox.recombination import arithmetic_crossover
from genapprox.selection import ScalingType, scaling_rule

CHROMOSOME_SIZE = 300
GENERATION_SIZE = 500
RECOMB_PROBA = 0.7
MUTATION_PROBA = 0.2
N_EPOCH = 1000

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atof(text: str) -> float:
    """Parse a leading number leniently; 0.0 when there is none."""
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genapprox",
        description="Approximate x**2 on [LEFT, RIGHT] with a genetic algorithm.",
    )
    parser.add_argument("bounds", nargs="*", metavar="LEFT RIGHT")
    parser.add_argument("--epochs", type=int, default=N_EPOCH)
    parser.add_argument("--generation-size", type=int, default=GENERATION_SIZE)
    parser.add_argument("--chromosome-size", type=int, default=CHROMOSOME_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)

    left = right = 0.0
    if len(args.bounds) >= 2:
        left, right = _atof(args.bounds[0]), _atof(args.bounds[1])

    poly = Polynomial([Monomial(1.0, 2.0)])
    rng = random.Random(args.seed)

    try:
        bound = distribution_bound((left, right), poly)
        generation = generate_generation(
            args.generation_size, args.chromosome_size, (left, right), bound, rng
        )
        best_generation = evolution(
            args.epochs,
            poly,
            generation,
            RECOMB_PROBA,
            MUTATION_PROBA,
            scaling_rule(ScalingType.SIGMA, rng),
            functools.partial(arithmetic_crossover, rng=rng),
            functools.partial(swap_mutation, rng=rng),
            True,
        )
    except ValueError as error:
        print(f"genapprox: {error}", file=sys.stderr)
        return 1

    for gene in get_best(best_generation):
        first, second = gene.interval
        print(f"{gene.height:g} [{first:g};{second:g}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())