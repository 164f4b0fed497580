"""
genalg - A generic genetic algorithm engine.

This package evolves a population of candidate solutions, each represented by a
fixed-length vector of real-valued genes, toward higher fitness. The engine does
not know what the genes encode nor how fitness is computed: it works with any
individual exposing a fitness and a chromosome, and constructible from a chromosome.
In its host application the chromosomes are the flattened weights of neural networks
steering simulated agents.

All randomness flows through a caller-owned RandomSource, so every generation is
reproducible from a seed.

Main components:
- genotype:  Chromosome and the Individual interface
- operators: Selection, crossover and mutation operators
- pool:      The GeneticAlgorithm driver and population statistics
- run:       Configuration

Example:
    >>> from genalg import GeneticAlgorithm, RandomSource, ScoredIndividual, Chromosome
    >>> from genalg import RouletteWheelSelection, UniformCrossover, GaussianMutation
    >>> rng = RandomSource(seed=0)
    >>> ga  = GeneticAlgorithm(RouletteWheelSelection(),
    ...                        UniformCrossover(),
    ...                        GaussianMutation(chance=0.01, coefficient=0.3))
    >>> population = [ScoredIndividual(Chromosome.random(rng, 8), fitness=1.0) for _ in range(10)]
    >>> population = ga.evolve(rng, population)
"""

__version__ = "0.1.0"

from genalg.exceptions    import (GeneticAlgorithmError, EmptyPopulationError, InvalidFitnessError,
                                  ChromosomeLengthMismatchError, InvalidConfigurationError)
from genalg.random_source import RandomSource
from genalg.genotype      import Chromosome, Individual, ScoredIndividual
from genalg.operators     import (SelectionMethod, RouletteWheelSelection,
                                  CrossoverMethod, UniformCrossover,
                                  MutationMethod, GaussianMutation)
from genalg.pool          import GeneticAlgorithm, Statistics, fittest
from genalg.run           import Config

__all__ = [
    "GeneticAlgorithmError",
    "EmptyPopulationError",
    "InvalidFitnessError",
    "ChromosomeLengthMismatchError",
    "InvalidConfigurationError",
    "RandomSource",
    "Chromosome",
    "Individual",
    "ScoredIndividual",
    "SelectionMethod",
    "RouletteWheelSelection",
    "CrossoverMethod",
    "UniformCrossover",
    "MutationMethod",
    "GaussianMutation",
    "GeneticAlgorithm",
    "Statistics",
    "fittest",
    "Config",
]
