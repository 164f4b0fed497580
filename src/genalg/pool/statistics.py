"""
Population Statistics Module

Summary figures describing the fitness of one generation.

Classes:
    Statistics: Minimum, maximum and mean fitness of a population

Functions:
    fittest: Return the individual with the highest fitness
"""

from dataclasses import dataclass
from statistics  import fmean
from typing      import Optional, Sequence, TYPE_CHECKING

from genalg.exceptions import EmptyPopulationError

if TYPE_CHECKING:
    from genalg.genotype import Individual

@dataclass(frozen=True)
class Statistics:
    """
    Fitness summary of a population.

    Public Attributes:
        size:         Number of individuals
        min_fitness:  Lowest fitness in the population
        max_fitness:  Highest fitness in the population
        mean_fitness: Average fitness across the population
    """

    size        : int
    min_fitness : float
    max_fitness : float
    mean_fitness: float

    @classmethod
    def from_population(cls, population: Sequence['Individual']) -> 'Statistics':
        if len(population) == 0:
            raise EmptyPopulationError("cannot compute statistics of an empty population")

        fitnesses = [individual.fitness for individual in population]
        return cls(size         = len(fitnesses),
                   min_fitness  = min(fitnesses),
                   max_fitness  = max(fitnesses),
                   mean_fitness = fmean(fitnesses))

    def __str__(self):
        return (f"size={self.size}, min={self.min_fitness:.4f}, "
                f"max={self.max_fitness:.4f}, mean={self.mean_fitness:.4f}")


def fittest(population: Sequence['Individual']) -> Optional['Individual']:
    """
    Find and return the individual with the highest fitness in the population.
    Ties go to the individual appearing first.

    Returns:
        The fittest individual, or None if the population is empty
    """
    if len(population) == 0:
        return None
    return max(population, key=lambda individual: individual.fitness)
