"""
neatcore - the genetic encoding of NEAT (NeuroEvolution of Augmenting Topologies).

This package provides the genome representation used to evolve neural network
topologies: node and connection genes, an initial fully connected genome, the
mutation operators (weight perturbation, add node, add connection) and crossover.
Fitness evaluation, speciation and network execution are left to the caller.

Main components:
- genotype: Genetic encoding (genomes, node genes, connection genes)
- activations: Registry of activation functions
- run: Configuration and logging setup
- errors: Exception types

Example:
    >>> import numpy as np
    >>> from neatcore import Genome
    >>> rng = np.random.default_rng(42)
    >>> parent0 = Genome.create(0, num_inputs=2, num_outputs=1, rng=rng)
    >>> parent1 = Genome.create(1, num_inputs=2, num_outputs=1, rng=rng)
    >>> parent1.mutate(0.8, 0.1, 0.1, rng=rng)
    >>> child = parent0.crossover(parent1, child_id=2, rng=rng)
    >>> print(child)
"""

__version__ = "0.1.0"

from loguru import logger

from neatcore.activations import Activation, activations, get_activation
from neatcore.errors      import NeatError, ConfigurationError, InvariantViolation
from neatcore.genotype    import ConnectionGene, Genome, NodeGene, NodeType
from neatcore.run         import Config, configure_logging, disable_logging

# Library code stays silent until the application calls 'configure_logging()'.
logger.disable("neatcore")

__all__ = [
    "Activation",
    "activations",
    "get_activation",
    "NeatError",
    "ConfigurationError",
    "InvariantViolation",
    "ConnectionGene",
    "Genome",
    "NodeGene",
    "NodeType",
    "Config",
    "configure_logging",
    "disable_logging",
]
