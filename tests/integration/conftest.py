"""
Shared fixtures for integration tests.
"""

import pytest

from genalg import GaussianMutation, GeneticAlgorithm, RouletteWheelSelection, UniformCrossover


@pytest.fixture
def reference_ga():
    """Roulette-wheel selection, uniform crossover, Gaussian mutation (0.5, 0.5)."""
    return GeneticAlgorithm(RouletteWheelSelection(),
                            UniformCrossover(),
                            GaussianMutation(chance=0.5, coefficient=0.5))


@pytest.fixture
def mean_fitness():
    def mean(population):
        return sum(individual.fitness for individual in population) / len(population)
    return mean
