"""
Selection Module

This module implements the parent selection step of the genetic algorithm.

Classes:
    SelectionMethod:        Abstract base class for selection operators
    RouletteWheelSelection: Fitness-proportionate selection
"""

from abc    import ABC, abstractmethod
from typing import Sequence, TYPE_CHECKING

from genalg.exceptions import EmptyPopulationError

if TYPE_CHECKING:
    from genalg.genotype import Individual
    from genalg.random_source import RandomSource

class SelectionMethod(ABC):
    """
    Abstract base class for selection operators.

    A selection operator picks one individual out of a population, with a bias
    towards fitter individuals. It keeps no state between calls.
    """

    @abstractmethod
    def select(self, rng: 'RandomSource', population: Sequence['Individual']) -> 'Individual':
        """
        Pick one individual from the population.

        Parameters:
            rng:        Source of randomness
            population: The candidates; not modified

        Returns:
            One of the elements of 'population' (not a copy)
        """
        pass


class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportionate ("roulette wheel") selection.

    Each individual gets a slice of the wheel proportional to its fitness, so it
    is selected with probability fitness_i / sum(fitness). Individuals with zero
    fitness are never selected. Consumes exactly one draw per selection.

    Raises:
        EmptyPopulationError: if the population is empty
        InvalidFitnessError:  if some fitness is negative, NaN or infinite,
                              or the total fitness is not positive
    """

    def select(self, rng: 'RandomSource', population: Sequence['Individual']) -> 'Individual':
        if len(population) == 0:
            raise EmptyPopulationError("cannot select from an empty population")

        fitnesses = [individual.fitness for individual in population]
        return rng.choose_weighted(population, fitnesses)

    def __repr__(self):
        return "RouletteWheelSelection()"
