"""
Mutation Module

This module implements the mutation step of the genetic algorithm.

Classes:
    MutationMethod:   Abstract base class for mutation operators
    GaussianMutation: Per-gene bounded random perturbation
"""

import math
import numpy as np
from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

from genalg.exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    from genalg.genotype import Chromosome
    from genalg.random_source import RandomSource

class MutationMethod(ABC):
    """
    Abstract base class for mutation operators.

    A mutation operator perturbs the genes of a chromosome in place.
    Its parameters are validated once, at construction time.
    """

    @abstractmethod
    def mutate(self, rng: 'RandomSource', chromosome: 'Chromosome') -> None:
        """
        Stochastically perturb the genes of a chromosome, in place.

        Parameters:
            rng:        Source of randomness
            chromosome: The chromosome to mutate
        """
        pass


class GaussianMutation(MutationMethod):
    """
    Per-gene random perturbation, gated by a trial probability.

    Each gene is independently selected for mutation with probability 'chance'.
    A selected gene is shifted by a random amount whose sign is + or - with equal
    probability and whose magnitude is uniform in [0, coefficient]. Genes that are
    not selected are left bit-for-bit unchanged.

    Despite the name, the perturbation is uniformly (not normally) distributed.

    Draw order, for each gene in gene order:
        1. trial:     gen_bool(chance)
        2. sign:      gen_bool(0.5), True meaning '+'   (only if the trial succeeded)
        3. magnitude: uniform(0, coefficient)          (only if the trial succeeded)

    Public Attributes:
        chance:      Probability that any given gene is mutated, in [0, 1]
        coefficient: Largest possible absolute change of a mutated gene
    """

    def __init__(self, chance: float, coefficient: float):
        """
        Parameters:
            chance:      Probability that any given gene is mutated, in [0, 1]
            coefficient: Largest possible absolute change of a mutated gene, >= 0

        Raises:
            InvalidConfigurationError: if either parameter is out of range
        """
        chance      = float(chance)
        coefficient = float(coefficient)

        if not 0.0 <= chance <= 1.0:
            raise InvalidConfigurationError(f"mutation chance must be in [0, 1], got {chance}")
        if not (coefficient >= 0.0 and math.isfinite(coefficient)):
            raise InvalidConfigurationError(f"mutation coefficient must be finite and >= 0, got {coefficient}")

        self.chance     : float = chance
        self.coefficient: float = coefficient

    def mutate(self, rng: 'RandomSource', chromosome: 'Chromosome') -> None:
        genes = chromosome.genes
        for i in range(len(genes)):
            if not rng.gen_bool(self.chance):
                continue
            sign      = 1.0 if rng.gen_bool(0.5) else -1.0
            magnitude = rng.uniform(0.0, self.coefficient)
            genes[i] += np.float32(sign * magnitude)

    def __repr__(self):
        return f"GaussianMutation(chance={self.chance}, coefficient={self.coefficient})"
