"""
Crossover Module

This module implements the recombination step of the genetic algorithm.

Classes:
    CrossoverMethod:  Abstract base class for crossover operators
    UniformCrossover: Gene-wise 50/50 recombination of two parents
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

from genalg.exceptions import ChromosomeLengthMismatchError
from genalg.genotype   import Chromosome

if TYPE_CHECKING:
    from genalg.random_source import RandomSource

class CrossoverMethod(ABC):
    """
    Abstract base class for crossover operators.

    A crossover operator combines two parent chromosomes of equal length into a
    new child chromosome of the same length, leaving both parents untouched.
    """

    @abstractmethod
    def crossover(self,
                  rng     : 'RandomSource',
                  parent_a: Chromosome,
                  parent_b: Chromosome) -> Chromosome:
        """
        Create a child chromosome from two parents.

        Parameters:
            rng:      Source of randomness
            parent_a: First parent
            parent_b: Second parent, of the same length as the first

        Returns:
            A new chromosome, of the same length as the parents

        Raises:
            ChromosomeLengthMismatchError: if the parents differ in length
        """
        pass


class UniformCrossover(CrossoverMethod):
    """
    Uniform crossover.

    Every gene of the child is taken from either parent with equal probability,
    independently of all other genes. There is no crossover point, hence no
    positional bias, which suits genes whose order carries no linkage (such as
    flattened network weights).

    Draw order: one fair boolean per gene, in gene order; True picks the
    gene of 'parent_a', False the gene of 'parent_b'.
    """

    def crossover(self,
                  rng     : 'RandomSource',
                  parent_a: Chromosome,
                  parent_b: Chromosome) -> Chromosome:

        if len(parent_a) != len(parent_b):
            raise ChromosomeLengthMismatchError(len(parent_a), len(parent_b))

        genes_a = parent_a.genes
        genes_b = parent_b.genes
        return Chromosome(genes_a[i] if rng.gen_bool(0.5) else genes_b[i] for i in range(len(genes_a)))

    def __repr__(self):
        return "UniformCrossover()"
