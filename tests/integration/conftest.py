"""
Shared fixtures for integration tests.
"""

import pytest
import numpy as np

from neatcore.genotype import Genome
from neatcore.run.config import Config


def run_generations(population, num_generations, rng, probs=(0.8, 0.1, 0.2)):
    """
    Minimal evolutionary driver: each generation, every offspring is the
    crossover of two parents picked at random, followed by mutation.
    Selection is uniform, since fitness is not part of the genome encoding.
    """
    next_id = max(g.id for g in population) + 1
    for _ in range(num_generations):
        offspring = []
        for _ in range(len(population)):
            parent0 = population[rng.integers(len(population))]
            parent1 = population[rng.integers(len(population))]
            child   = parent0.crossover(parent1, next_id, rng)
            child.mutate(*probs, rng=rng)
            offspring.append(child)
            next_id += 1
        population = offspring
    return population


@pytest.fixture
def driver():
    return run_generations


@pytest.fixture
def make_population():
    """Build an initial population of fully connected genomes."""
    def _make(size, num_inputs, num_outputs, rng, config=None):
        return [Genome.create(i, num_inputs, num_outputs, rng, config=config) for i in range(size)]
    return _make


@pytest.fixture
def feed_forward_config():
    config = Config()
    config.prevent_cycles        = True
    config.crossover_node_policy = 'union'
    return config
