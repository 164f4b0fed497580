"""
Individual Module

This module defines the capability interface every member of an evolving
population must satisfy, plus a ready-made implementation for callers that
only need to attach a fitness to a chromosome.

Classes:
    Individual:       Abstract capability interface (create, fitness, chromosome)
    ScoredIndividual: A chromosome paired with an externally computed fitness
"""

import math
from abc    import ABC, abstractmethod
from typing import Iterable

from genalg.genotype.chromosome import Chromosome

class Individual(ABC):
    """
    Abstract base class for members of a population.

    The genetic algorithm never depends on what an individual is (an agent, a
    network, a test double); it only needs to read a fitness and a chromosome
    from it, and to build a new one from a chromosome alone.

    Subclasses must implement:
    - create(chromosome): classmethod building an individual from a chromosome
    - fitness:            property, a finite non-negative real number
    - chromosome:         property, the individual's chromosome (treat as read-only)
    """

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> 'Individual':
        """
        Build a new individual from a chromosome.

        The chromosome is handed over: the caller must not modify it afterwards.
        """
        pass

    @property
    @abstractmethod
    def fitness(self) -> float:
        pass

    @property
    @abstractmethod
    def chromosome(self) -> Chromosome:
        pass


class ScoredIndividual(Individual):
    """
    An Individual that is a thin wrapper around a chromosome and a fitness.

    The fitness is assigned from outside (e.g., by the simulation that evaluated
    the agent carrying this chromosome). Freshly created individuals start with
    a fitness of zero.

    Public properties:
        fitness:    Fitness score (assignable)
        chromosome: The individual's chromosome

    Public Methods:
        create(chromosome):            Build an individual with zero fitness
        from_weights(weights, fitness): Build an individual from a flattened weight vector
        weights():                     Return the genes as a flattened weight vector
    """

    def __init__(self, chromosome: Chromosome, fitness: float = 0.0):
        """
        Parameters:
            chromosome: The genetic material of this individual
            fitness:    Initial fitness score
        """
        self._chromosome: Chromosome = chromosome
        self.fitness                 = fitness

    @classmethod
    def create(cls, chromosome: Chromosome) -> 'ScoredIndividual':
        return cls(chromosome)

    @classmethod
    def from_weights(cls, weights: Iterable[float], fitness: float = 0.0) -> 'ScoredIndividual':
        """
        Build an individual from the flattened weights of a neural network.
        """
        return cls(Chromosome(weights), fitness)

    def weights(self) -> list[float]:
        """
        Return the genes as a flattened weight vector, from which the
        caller can rebuild the neural network this individual encodes.
        """
        return self._chromosome.to_list()

    @property
    def fitness(self) -> float:
        return self._fitness

    @fitness.setter
    def fitness(self, value: float) -> None:
        value = float(value)
        if math.isnan(value):
            raise ValueError("fitness cannot be NaN")
        self._fitness = value

    @property
    def chromosome(self) -> Chromosome:
        return self._chromosome

    def __repr__(self):
        return f"ScoredIndividual(chromosome={self._chromosome!r}, fitness={self._fitness!r})"

    def __str__(self):
        return f"fitness={self._fitness:.4f} {self._chromosome}"
