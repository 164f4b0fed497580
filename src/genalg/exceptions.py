"""
Genetic Algorithm Exceptions Module

This module defines the error taxonomy raised by the genetic algorithm engine.
Every operator-level failure aborts the enclosing generational step: no partial
generation is ever returned and nothing is retried.

Classes:
    GeneticAlgorithmError:         Base for all engine exceptions
    EmptyPopulationError:          Selection attempted with no candidates
    InvalidFitnessError:           Fitness values that make selection ill-defined
    ChromosomeLengthMismatchError: Crossover given parents of unequal length
    InvalidConfigurationError:     Operator or config constructed with bad parameters
"""


class GeneticAlgorithmError(Exception):
    """Base for all genetic algorithm exceptions."""

    pass


class EmptyPopulationError(GeneticAlgorithmError):
    """Selection (or a population summary) attempted on an empty population."""

    pass


class InvalidFitnessError(GeneticAlgorithmError, ValueError):
    """Total fitness is not positive, or some fitness is negative, NaN or infinite."""

    pass


class ChromosomeLengthMismatchError(GeneticAlgorithmError):
    """Two chromosomes that must be of equal length are not."""

    def __init__(self, length_a: int, length_b: int):
        super().__init__(f"chromosome lengths differ: {length_a} != {length_b}")
        self.length_a = length_a
        self.length_b = length_b


class InvalidConfigurationError(GeneticAlgorithmError, ValueError):
    """An operator or configuration value is outside its allowed range."""

    pass
