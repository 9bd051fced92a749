"""
NEAT Connection Gene Module

This module implements the ConnectionGene class for the
NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

import numpy as np

from neatcore.genotype.node_gene import NodeGene

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a destination node with an associated weight.
    The endpoints are references to node genes owned by the same genome; the
    pair of their IDs is the key used to align genes during crossover.

    Connections can be disabled, which preserves the gene (and the ancestry it
    records) while deactivating the pathway.

    Public Attributes:
        node_in:  Source node gene
        node_out: Destination node gene
        weight:   Weight of the connection
        disabled: Whether this connection is inactive in the network

    Public Properties:
        enabled: Negation of 'disabled'
        key:     Alignment key (node_in.id, node_out.id)

    Public Methods:
        perturb(rng, strength): Add a normally distributed amount to the weight
    """

    def __init__(self,
                 node_in : NodeGene,
                 node_out: NodeGene,
                 weight  : float,
                 disabled: bool = False):
        """
        Initialize a connection gene.

        Parameters:
            node_in:  Source node gene
            node_out: Destination node gene
            weight:   Weight of the connection
            disabled: Whether this connection is inactive in the network
        """
        self.node_in : NodeGene = node_in
        self.node_out: NodeGene = node_out
        self.weight  : float    = weight
        self.disabled: bool     = disabled

    @property
    def enabled(self) -> bool:
        return not self.disabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.disabled = not value

    @property
    def key(self) -> tuple[int, int]:
        return self.node_in.id, self.node_out.id

    def perturb(self, rng: np.random.Generator, strength: float = 1.0) -> None:
        """
        Add to the weight a value drawn from a zero-centered normal distribution.
        The weight is not clipped.

        Parameters:
            rng:      source of randomness
            strength: standard deviation of the perturbation
        """
        self.weight += float(rng.normal(0.0, strength))

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in.id}, node_out={self.node_out.id}, "
                f"weight={self.weight:+.6f}, disabled={self.disabled})")

    def __str__(self):
        connectivity = "/" if self.disabled else f"{self.weight:.3f}"
        return f"{self.node_in}--{connectivity}--{self.node_out}"
