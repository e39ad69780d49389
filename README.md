# genapprox

genapprox evolves a step function that approximates a polynomial over an
interval. It needs only the Python standard library.

The interval is split into equal sub-intervals, and each sub-interval becomes
one gene. A gene is a `Gene(height, interval)`. An individual (`Individ`) is a
list of genes with a `fitness` attribute, and a population (`Generation`) is a
list of individuals. The fitness of an individual is its total absolute error.
For each gene, the height is compared with the mean of the polynomial's values
at the two ends of the gene's interval. Lower fitness is better.

Each epoch runs three steps:

1. **Selection.** Rank-based roulette selection, optionally after fitness
   scaling (`ScalingType.LINEAR`, `SIGMA`, `SOFTMAX` or `EXPONENTIAL`).
2. **Recombination.** `single_point_crossover` or `arithmetic_crossover`.
3. **Mutation.** `swap_mutation`, `perturbation_mutation` (uniform shift in
   [-1, 1]) or `gauss_mutation` (normal noise, standard deviation 1).

Evolution stops at the epoch limit, or earlier once the mean fitness drops
below `EPSILON` (0.005). `evolution` returns a copy of the most recent
generation whose mean fitness was lower than the initial generation's mean.
If no generation improved on it, `evolution` returns the initial generation.
`get_best` picks the individual with the lowest fitness from a generation.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Command line

```
genapprox LEFT RIGHT [--epochs N] [--generation-size N] [--chromosome-size N] [--seed N]
```

The command approximates `x**2` on `[LEFT, RIGHT]`. The same entry point is
also available as `python -m genapprox.cli`.

`LEFT` and `RIGHT` are read leniently: the command uses any leading number in
each argument and reads an argument with no leading number as 0. If you give
fewer than two bounds, both bounds are 0. An interval that does not have a
positive length is an error: the command prints `genapprox: <message>` to
stderr and exits with status 1.

| Setting | Default | Option |
| --- | --- | --- |
| Sub-intervals | 300 | `--chromosome-size` |
| Population size | 500 | `--generation-size` |
| Epochs | 1000 | `--epochs` |
| Random seed | none | `--seed` |
| Recombination probability | 0.7 | fixed |
| Mutation probability | 0.2 | fixed |
| Selection | sigma scaling + roulette | fixed |
| Crossover | arithmetic | fixed |
| Mutation | swap | fixed |

The initial heights are drawn uniformly from `[-b, b]`, where `b` is the
larger absolute value of the polynomial at the two interval ends.

While it runs, the command prints the mean fitness before each epoch. When it
finishes, it prints the best individual, one line per gene, in the form
`height [left;right]`.

Some parameter values are not valid:

- The recombination step needs an even population size.
- Swap mutation needs at least two sub-intervals.

Either case is reported as an error in the same way as a bad interval.

## Library use

```python
import random

from genapprox.core import Monomial, Polynomial
from genapprox.generator import distribution_bound, generate_generation
from genapprox.selection import ScalingType, scaling_rule
from genapprox.recombination import arithmetic_crossover
from genapprox.mutation import swap_mutation
from genapprox.evolution import evolution, get_best

rng = random.Random(0)
poly = Polynomial([Monomial(1, 2)])
interval = (-1.0, 1.0)

bound = distribution_bound(interval, poly)
population = generate_generation(100, 20, interval, bound, rng)

best_generation = evolution(
    200,
    poly,
    population,
    0.7,
    0.2,
    scaling_rule(ScalingType.SIGMA, rng),
    lambda a, b: arithmetic_crossover(a, b, rng),
    lambda ind: swap_mutation(ind, rng),
    False,
)

best = get_best(best_generation)
print(best.fitness)
```

Every random function takes an optional `random.Random` instance, so you can
repeat a run exactly by using the same seed. If you do not pass one, the
function uses a shared module-level generator.

Some functions change their arguments in place:

- `evolution` measures the initial generation in place.
- A strategy returned by `scaling_rule` rescales and re-sorts the generation
  it selects from.
- `roulette_rule` and `calculate_proba` also re-sort the generation they are
  given.

Modules:

- `genapprox.core`: the data types, `Polynomial.eval`, `fitness`,
  `measure_generation` and `mean_fitness`.
- `genapprox.generator`: `distribution_bound`, `interval_partition`,
  `generate_gene`, `generate_individ` and `generate_generation`.
- `genapprox.selection`: `ScalingType`, `calculate_proba`, `selection`,
  `roulette_rule`, `apply_scaling` and `scaling_rule`.
- `genapprox.recombination`: `recombination` and the crossover operators.
- `genapprox.mutation`: `mutation` and the mutation operators.
- `genapprox.evolution`: `evolution` and `get_best`.
- `genapprox.cli`: the `main` function behind the `genapprox` command.

## What it does not do

genapprox has no graphical interface and draws no plots. Results are printed
as text only. It does not save or load sessions. The command line always uses
`x**2` as the target. To approximate any other polynomial, use the library.

## Running the tests

```
pytest
```