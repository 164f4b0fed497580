"""
Integration tests for basic evolution.

These tests run the genetic algorithm end-to-end over several generations,
with the caller evaluating fitness between generations the way the host
simulation does, and check that fitness improves and that runs are
reproducible bit-for-bit under a fixed seed.
"""

import pytest
import numpy as np

from genalg import Chromosome, Config, GeneticAlgorithm, RandomSource, ScoredIndividual, fittest


# ============================================================================
# Helpers
# ============================================================================

def run_generations(ga, rng, population, generations):
    for _ in range(generations):
        population = ga.evolve(rng, population)
    return population


def chromosomes(population):
    return [individual.chromosome for individual in population]


class TargetProblem:
    """Caller-side fitness evaluation: closeness of the genes to a target vector."""

    def __init__(self, target):
        self.target = np.asarray(target, dtype=np.float64)

    def evaluate(self, population):
        for individual in population:
            error = np.sum((individual.chromosome.genes - self.target) ** 2)
            individual.fitness = 1.0 / (0.1 + error)


# ============================================================================
# Test: Gene-Sum Scenario
# ============================================================================

class TestGeneSumEvolution:
    """Four individuals whose fitness is the sum of their genes."""

    def test_initial_mean_fitness(self, gene_sum_population, mean_fitness):
        assert [individual.fitness for individual in gene_sum_population] == [0.0, 3.0, 4.0, 7.0]
        assert mean_fitness(gene_sum_population) == 3.5

    def test_ten_generations_improve_fitness(self, reference_ga, gene_sum_population, mean_fitness):
        rng        = RandomSource(seed=0)
        population = run_generations(reference_ga, rng, gene_sum_population, 10)

        assert len(population) == 4
        assert all(len(individual.chromosome) == 3 for individual in population)
        assert mean_fitness(population) > mean_fitness(gene_sum_population)

    def test_ten_generations_reproducible(self, reference_ga, gene_sum_population):
        first  = run_generations(reference_ga, RandomSource(seed=0), gene_sum_population, 10)
        second = run_generations(reference_ga, RandomSource(seed=0), gene_sum_population, 10)

        assert chromosomes(first) == chromosomes(second)
        for a, b in zip(first, second):
            assert a.chromosome.genes.tobytes() == b.chromosome.genes.tobytes()

    def test_initial_population_untouched(self, reference_ga, gene_sum_population):
        run_generations(reference_ga, RandomSource(seed=0), gene_sum_population, 10)

        assert chromosomes(gene_sum_population) == [Chromosome([0.0, 0.0, 0.0]),
                                                    Chromosome([1.0, 1.0, 1.0]),
                                                    Chromosome([1.0, 2.0, 1.0]),
                                                    Chromosome([1.0, 2.0, 4.0])]


# ============================================================================
# Test: Caller-Evaluated Fitness
# ============================================================================

class TestTargetEvolution:
    """A population of ScoredIndividuals evolving toward a target vector."""

    @pytest.fixture
    def config(self):
        config = Config()
        config.population_size      = 30
        config.chromosome_length    = 5
        config.mutation_chance      = 0.2
        config.mutation_coefficient = 0.2
        config.seed                 = 2024
        return config

    def _run(self, config, generations, num_jobs=None):
        rng        = config.make_random_source()
        ga         = GeneticAlgorithm.from_config(config)
        problem    = TargetProblem(Chromosome.random(rng, config.chromosome_length, -0.5, 0.5))
        population = [ScoredIndividual(Chromosome.random(rng, config.chromosome_length))
                      for _ in range(config.population_size)]

        problem.evaluate(population)
        initial = population
        for _ in range(generations):
            population = ga.evolve(rng, population, num_jobs=num_jobs, backend="threading")
            problem.evaluate(population)
        return initial, population

    def test_mean_fitness_improves(self, config, mean_fitness):
        initial, final = self._run(config, generations=40)

        assert len(final) == config.population_size
        assert mean_fitness(final) > mean_fitness(initial)

    def test_best_fitness_improves(self, config):
        initial, final = self._run(config, generations=40)

        assert fittest(final).fitness > fittest(initial).fitness

    def test_weights_round_trip(self, config):
        """An evolved chromosome converts back into a plain weight vector."""
        _, final = self._run(config, generations=5)
        best     = fittest(final)

        weights = best.weights()
        assert len(weights) == config.chromosome_length
        assert ScoredIndividual.from_weights(weights).chromosome == best.chromosome

    def test_serial_run_reproducible(self, config):
        _, first  = self._run(config, generations=10)
        _, second = self._run(config, generations=10)

        assert chromosomes(first) == chromosomes(second)

    def test_parallel_run_reproducible(self, config):
        _, first  = self._run(config, generations=10, num_jobs=2)
        _, second = self._run(config, generations=10, num_jobs=3)

        assert chromosomes(first) == chromosomes(second)
