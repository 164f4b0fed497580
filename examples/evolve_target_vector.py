"""
Target Vector Problem for the genetic algorithm

This script evolves chromosomes toward a fixed target vector, a stand-in for the
host simulation in which chromosomes are the weights of the networks steering
agents and fitness is the amount of food an agent collected.

Fitness Function:
    Fitness = 1 / (1 + Σ(gene - target)²)

    Fitness lies in (0, 1] and reaches 1.0 only for an exact match.
    The run is considered successful when the best fitness exceeds 0.95.

Usage:
    python examples/evolve_target_vector.py [config.ini] [num_generations]
"""

import sys
import numpy as np
from pathlib import Path

from genalg import Chromosome, Config, GeneticAlgorithm, ScoredIndividual, fittest

def evaluate(individual: ScoredIndividual, target: np.ndarray) -> float:
    error = np.sum((individual.chromosome.genes - target) ** 2)
    return float(1.0 / (1.0 + error))

def main(config_file: str, num_generations: int):
    config = Config(config_file)
    rng    = config.make_random_source()
    ga     = GeneticAlgorithm.from_config(config)

    target     = np.asarray(Chromosome.random(rng, config.chromosome_length, -0.5, 0.5))
    population = [ScoredIndividual(Chromosome.random(rng, config.chromosome_length))
                  for _ in range(config.population_size)]

    for generation in range(num_generations + 1):
        for individual in population:
            individual.fitness = evaluate(individual, target)

        best = fittest(population)
        if best.fitness > 0.95 or generation == num_generations:
            break

        # The caller decides when to stop; the engine only replaces the population
        population, statistics = ga.evolve_with_statistics(rng, population)
        print(f"generation {generation:4d}: {statistics}")

    print(f"\nbest individual after {generation} generations:\n{best}")

if __name__ == '__main__':
    config_file     = sys.argv[1] if len(sys.argv) > 1 else str(Path(__file__).parent / 'config_simulation.ini')
    num_generations = int(sys.argv[2]) if len(sys.argv) > 2 else 500
    main(config_file, num_generations)
