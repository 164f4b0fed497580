"""
Population Package

This package implements the generational driver of the genetic algorithm and
summary statistics over populations.

Modules:
    genetic_algorithm: GeneticAlgorithm class
    statistics:        Statistics class and fittest() helper

Exported:
    GeneticAlgorithm: Stateless generational driver
    Statistics:       Minimum, maximum and mean fitness of a population
    fittest:          Return the individual with the highest fitness
"""

from genalg.pool.genetic_algorithm import GeneticAlgorithm
from genalg.pool.statistics        import Statistics, fittest

__all__ = ['GeneticAlgorithm',
           'Statistics',
           'fittest']
