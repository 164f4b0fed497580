"""Pytest configuration and shared fixtures."""

import pytest

from genalg.genotype import Chromosome, Individual, ScoredIndividual
from genalg.random_source import RandomSource


# ============================================================================
# Test Individuals
# ============================================================================

class GeneSumIndividual(Individual):
    """Individual whose fitness is the sum of its genes."""

    def __init__(self, chromosome):
        self._chromosome = chromosome

    @classmethod
    def create(cls, chromosome):
        return cls(chromosome)

    @property
    def fitness(self):
        return float(sum(self._chromosome))

    @property
    def chromosome(self):
        return self._chromosome


class FixedFitnessIndividual(Individual):
    """Individual carrying only a fitness, for selection tests."""

    def __init__(self, fitness):
        self._fitness = fitness

    @classmethod
    def create(cls, chromosome):
        raise NotImplementedError("FixedFitnessIndividual cannot be created from a chromosome")

    @property
    def fitness(self):
        return self._fitness

    @property
    def chromosome(self):
        raise NotImplementedError("FixedFitnessIndividual has no chromosome")


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def rng():
    """Random source with a fixed, all-zero seed."""
    return RandomSource(seed=0)


@pytest.fixture
def gene_sum_individual():
    """Factory building a GeneSumIndividual from a list of genes."""
    def make(genes):
        return GeneSumIndividual.create(Chromosome(genes))
    return make


@pytest.fixture
def fixed_fitness_individual():
    """Factory building a FixedFitnessIndividual."""
    return FixedFitnessIndividual


@pytest.fixture
def gene_sum_population(gene_sum_individual):
    """The four-individual population used by the end-to-end scenarios."""
    return [
        gene_sum_individual([0.0, 0.0, 0.0]),  # fitness = 0.0
        gene_sum_individual([1.0, 1.0, 1.0]),  # fitness = 3.0
        gene_sum_individual([1.0, 2.0, 1.0]),  # fitness = 4.0
        gene_sum_individual([1.0, 2.0, 4.0]),  # fitness = 7.0
    ]


@pytest.fixture
def scored_population():
    """Ten ScoredIndividuals with distinct chromosomes and positive fitness."""
    source = RandomSource(seed=123)
    return [ScoredIndividual(Chromosome.random(source, 6), fitness=float(i + 1)) for i in range(10)]
