"""
Genetic Operators Package

This package implements the three stochastic operators composed by the genetic
algorithm driver. Every operator takes the random source as an explicit argument
and keeps no state between calls.

Modules:
    selection: SelectionMethod and RouletteWheelSelection classes
    crossover: CrossoverMethod and UniformCrossover classes
    mutation:  MutationMethod and GaussianMutation classes

Exported Classes:
    SelectionMethod:        Abstract base class for selection operators
    RouletteWheelSelection: Fitness-proportionate selection
    CrossoverMethod:        Abstract base class for crossover operators
    UniformCrossover:       Gene-wise 50/50 recombination
    MutationMethod:         Abstract base class for mutation operators
    GaussianMutation:       Per-gene bounded random perturbation
"""

from genalg.operators.selection import SelectionMethod, RouletteWheelSelection
from genalg.operators.crossover import CrossoverMethod, UniformCrossover
from genalg.operators.mutation  import MutationMethod, GaussianMutation

__all__ = ['SelectionMethod',
           'RouletteWheelSelection',
           'CrossoverMethod',
           'UniformCrossover',
           'MutationMethod',
           'GaussianMutation']
