"""
Genotype Package

This package implements the genetic representation handled by the genetic
algorithm: the chromosome itself, and the interface through which the engine
talks to whatever entity carries a chromosome and a fitness.

Modules:
    chromosome: Chromosome class
    individual: Individual interface and ScoredIndividual class

Exported Classes:
    Chromosome:       Fixed-length ordered sequence of real-valued genes
    Individual:       Abstract capability interface for population members
    ScoredIndividual: A chromosome paired with an externally computed fitness
"""

from genalg.genotype.chromosome import Chromosome
from genalg.genotype.individual import Individual, ScoredIndividual

__all__ = ['Chromosome',
           'Individual',
           'ScoredIndividual']
