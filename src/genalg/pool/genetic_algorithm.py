"""
Genetic Algorithm Module

This module implements the GeneticAlgorithm class, the generational driver that
composes a selection, a crossover and a mutation operator into one step of
evolution.

Classes:
    GeneticAlgorithm: Stateless generational driver
"""

from joblib import Parallel, delayed
from loguru import logger
from typing import Optional, Sequence, TYPE_CHECKING

from genalg.exceptions   import EmptyPopulationError, InvalidConfigurationError
from genalg.operators    import (CrossoverMethod, GaussianMutation, MutationMethod,
                                 RouletteWheelSelection, SelectionMethod, UniformCrossover)
from genalg.pool.statistics import Statistics

if TYPE_CHECKING:
    from genalg.genotype      import Individual
    from genalg.random_source import RandomSource
    from genalg.run.config    import Config


def _check_num_jobs(num_jobs) -> int:
    # joblib semantics: 1 is serial, -1 all cores, 0 is meaningless
    if isinstance(num_jobs, bool) or not isinstance(num_jobs, int) or num_jobs == 0:
        raise InvalidConfigurationError(f"num_jobs must be a non-zero integer, got {num_jobs!r}")
    return num_jobs


class GeneticAlgorithm:
    """
    The generational driver of the genetic algorithm.

    The driver owns one selection, one crossover and one mutation operator. Each
    call to 'evolve' replaces a population by a new one of the same size: for every
    slot of the new generation two parents are selected (possibly the same one
    twice), their chromosomes are crossed over, the child chromosome is mutated,
    and a new individual is created from it. There is no elitism: no individual
    survives unchanged into the next generation.

    The driver keeps no state between calls and never modifies the population it
    is given. All randomness comes from the random source passed by the caller, so
    identical inputs and identical random-source state yield identical outputs.
    Deciding when to stop evolving is the caller's business.

    Public Attributes:
        selection_method: Operator choosing parents
        crossover_method: Operator combining two parent chromosomes
        mutation_method:  Operator perturbing the child chromosome
        individual_type:  Class used to create new individuals (None: class of the
                          first member of the population being evolved)
        num_jobs:         Default degree of parallelism for 'evolve'

    Public Methods:
        from_config(config):                      Build the default driver from a Config
        evolve(rng, population):                  Create the next generation
        evolve_with_statistics(rng, population):  Same, also summarising the old generation

    Parallelization:
        num_jobs=1:  Serial generation, in slot order, from the caller's random source.
        num_jobs>1:  Use the specified number of parallel workers (joblib).
        num_jobs=-1: Use all available CPU cores.

        In parallel mode the caller's source is first split into one independent
        stream per slot (in slot order), and each slot draws only from its own stream.
        The result is reproducible from the seed and does not depend on the number of
        workers, but it is not the generation the serial mode would have produced
        from the same seed.
    """

    def __init__(self,
                 selection_method: SelectionMethod,
                 crossover_method: CrossoverMethod,
                 mutation_method : MutationMethod,
                 individual_type : Optional[type] = None,
                 num_jobs        : int            = 1):
        """
        Parameters:
            selection_method: Operator choosing parents
            crossover_method: Operator combining two parent chromosomes
            mutation_method:  Operator perturbing the child chromosome
            individual_type:  Class whose 'create' builds new individuals
            num_jobs:         Default degree of parallelism for 'evolve'
        """
        self.selection_method: SelectionMethod = selection_method
        self.crossover_method: CrossoverMethod = crossover_method
        self.mutation_method : MutationMethod  = mutation_method
        self.individual_type : Optional[type]  = individual_type
        self.num_jobs        : int             = _check_num_jobs(num_jobs)

    @classmethod
    def from_config(cls, config: 'Config', individual_type: Optional[type] = None) -> 'GeneticAlgorithm':
        """
        Build a driver using roulette-wheel selection, uniform crossover and
        Gaussian mutation with the configured chance and coefficient.
        """
        return cls(RouletteWheelSelection(),
                   UniformCrossover(),
                   GaussianMutation(config.mutation_chance, config.mutation_coefficient),
                   individual_type = individual_type,
                   num_jobs        = config.num_jobs)

    def evolve(self,
               rng       : 'RandomSource',
               population: Sequence['Individual'],
               num_jobs  : Optional[int] = None,
               backend   : Optional[str] = None) -> list['Individual']:
        """
        Create the next generation.

        Parameters:
            rng:        Source of randomness; advanced by every draw
            population: The current generation; not modified
            num_jobs:   Degree of parallelism (None: use 'self.num_jobs')
            backend:    joblib backend for parallel mode (None: joblib's default)

        Returns:
            A new list of freshly created individuals, of the same size as 'population'

        Raises:
            EmptyPopulationError: if the population is empty
            InvalidConfigurationError: if 'num_jobs' is not a non-zero integer
            Any error raised by the operators, unchanged; no partial generation is returned
        """
        if len(population) == 0:
            raise EmptyPopulationError("cannot evolve an empty population")

        num_jobs        = self.num_jobs if num_jobs is None else _check_num_jobs(num_jobs)
        individual_type = self.individual_type or type(population[0])
        size            = len(population)

        if num_jobs == 1:
            logger.debug("[GeneticAlgorithm] Evolving {} individuals (serial)", size)
            offspring = [self._spawn_child(rng, population, individual_type) for _ in range(size)]
        else:
            logger.debug("[GeneticAlgorithm] Evolving {} individuals (num_jobs={})", size, num_jobs)
            streams   = rng.spawn(size)
            offspring = Parallel(n_jobs=num_jobs, backend=backend)(
                delayed(self._spawn_child)(stream, population, individual_type) for stream in streams)

        return offspring

    def evolve_with_statistics(self,
                               rng       : 'RandomSource',
                               population: Sequence['Individual'],
                               num_jobs  : Optional[int] = None,
                               backend   : Optional[str] = None) -> tuple[list['Individual'], Statistics]:
        """
        Create the next generation, and summarise the fitness of the one being replaced.

        The statistics are computed before evolving, so an invalid population still
        yields no new generation.

        Returns:
            (new population, statistics of the input population)
        """
        statistics = Statistics.from_population(population)
        logger.debug("[GeneticAlgorithm] Generation statistics: {}", statistics)
        return self.evolve(rng, population, num_jobs, backend), statistics

    def _spawn_child(self,
                     rng            : 'RandomSource',
                     population     : Sequence['Individual'],
                     individual_type: type) -> 'Individual':
        """
        Create one member of the next generation: select, cross over, mutate, create.
        """
        parent_a = self.selection_method.select(rng, population)
        parent_b = self.selection_method.select(rng, population)

        child = self.crossover_method.crossover(rng, parent_a.chromosome, parent_b.chromosome)
        self.mutation_method.mutate(rng, child)

        return individual_type.create(child)

    def __repr__(self):
        return (f"GeneticAlgorithm(selection_method={self.selection_method!r}, "
                f"crossover_method={self.crossover_method!r}, "
                f"mutation_method={self.mutation_method!r})")
