import dataclasses
import math

import pytest

from genapprox.core import (
    Gene,
    Generation,
    Individ,
    Monomial,
    Polynomial,
    fitness,
    mean_fitness,
    measure_generation,
)


def test_polynomial_eval_square():
    poly = Polynomial([Monomial(1, 2)])
    assert poly.eval(3.0) == 9.0


def test_monomial_defaults_give_constant_one():
    poly = Polynomial([Monomial()])
    assert poly.eval(5.0) == 1.0
    assert poly.eval(-7.5) == 1.0


def test_empty_polynomial_is_zero():
    assert Polynomial().eval(4.0) == 0.0


def test_fractional_power_of_positive():
    poly = Polynomial([Monomial(3.0, 0.5)])
    result = poly.eval(4.0)
    assert result == pytest.approx(6.0)


def test_fitness_zero_when_heights_match():
    poly = Polynomial([Monomial(2.0, 0)])
    individ = Individ([Gene(2.0, (0.0, 1.0)), Gene(2.0, (1.0, 2.0))])
    assert fitness(poly, individ) == 0.0


def test_fitness_sums_absolute_errors():
    poly = Polynomial([Monomial(2.0, 0)])
    individ = Individ([Gene(5.0, (0.0, 1.0)), Gene(-1.0, (1.0, 2.0))])
    assert fitness(poly, individ) == 6.0


def test_fitness_symmetric_around_target():
    poly = Polynomial([Monomial(1, 2)])
    above = Individ([Gene(poly.eval(1.0) + 0.5, (1.0, 1.0))])
    below = Individ([Gene(poly.eval(1.0) - 0.5, (1.0, 1.0))])
    assert fitness(poly, above) == pytest.approx(fitness(poly, below))


def test_measure_generation_sets_fitness():
    poly = Polynomial([Monomial(1, 1)])
    gen = Generation(
        [Individ([Gene(h, (0.0, 1.0))]) for h in (0.0, 0.5, 3.0)]
    )
    measure_generation(poly, gen)
    assert [ind.fitness for ind in gen] == pytest.approx([0.5, 0.0, 2.5])


def test_mean_fitness():
    gen = Generation([Individ(fitness=1.0), Individ(fitness=3.0)])
    assert mean_fitness(gen) == 2.0


def test_mean_fitness_empty_is_nan():
    result = mean_fitness(Generation())
    assert repr(result) == "nan"


def test_individ_default_fitness_is_infinite():
    assert Individ().fitness == math.inf


def test_individ_copy_is_independent():
    original = Individ([Gene(1.0, (0.0, 1.0))], fitness=4.0)
    clone = original.copy()
    clone.append(Gene(2.0, (1.0, 2.0)))
    clone.fitness = 0.0
    assert len(original) == 1
    assert original.fitness == 4.0
    assert len(clone) == 2


def test_generation_copy_copies_individs():
    gen = Generation([Individ(fitness=1.0)], is_scaled=True, proba=[1.0])
    clone = gen.copy()
    clone[0].fitness = 9.0
    clone.proba.append(0.5)
    assert gen[0].fitness == 1.0
    assert gen.proba == [1.0]
    assert clone.is_scaled is True


def test_gene_is_frozen():
    gene = Gene(1.0, (0.0, 1.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        gene.height = 2.0
    assert gene.height == 1.0
    assert gene.interval == (0.0, 1.0)