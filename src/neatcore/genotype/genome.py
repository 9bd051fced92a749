"""
NEAT Genome Module

This module implements the Genome class for the NEAT
(NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    Genome: Complete genome representing a neural network structure
"""

from itertools import chain

import numpy as np
from loguru import logger

from neatcore.errors                   import InvariantViolation
from neatcore.genotype.connection_gene import ConnectionGene
from neatcore.genotype.node_gene       import NodeType, NodeGene
from neatcore.run.config               import Config

class Genome:
    """
    A NEAT genome representing a neural network as a collection of node and connection genes.

    In the NEAT (NeuroEvolution of Augmenting Topologies) algorithm, a genome encodes
    the structure and parameters of a neural network at the genotype level. It consists of:
    - Node genes: describe network nodes (input, hidden, output) and their activation
    - Connection genes: describe weighted connections between nodes; the pair of
      endpoint IDs is used to align genes during crossover

    The genome owns its node and connection genes. Connection genes refer to node
    genes of the same genome. Genomes only grow: nodes and connections are never
    removed, connections can only be disabled.

    Node numbering convention:
        - node_genes[i].id == i (a node's ID is its index in 'node_genes')
        - Input nodes:  [0, num_inputs)
        - Output nodes: [num_inputs, num_inputs + num_outputs)
        - Hidden nodes: [num_inputs + num_outputs, ...), in order of creation

    Attributes:
        id:         Genome ID
        node_genes: List of NodeGene objects, indexed by node ID
        conn_genes: List of ConnectionGene objects, in order of creation

    Public Properties:
        input_nodes:         List of all input node genes
        hidden_nodes:        List of all hidden node genes
        output_nodes:        List of all output node genes
        enabled_connections: List of all enabled connection genes

    Public Methods:
        mutate(...):                         Apply the mutation operators stochastically
        crossover(other, child_id, rng):     Create offspring by crossing this genome with another
        validate():                          Check the structural invariants

    Class Methods:
        create(genome_id, num_inputs, num_outputs, rng): Create an initial, fully connected genome
    """

    def __init__(self,
                 genome_id : int,
                 node_genes: list[NodeGene]       | None = None,
                 conn_genes: list[ConnectionGene] | None = None,
                 config    : Config               | None = None):
        """
        Initialize a Genome from existing genes.

        Parameters:
            genome_id:  Genome ID
            node_genes: Node genes, such that node_genes[i].id == i
            conn_genes: Connection genes whose endpoints are in 'node_genes'
            config:     Stores configuration parameters (defaults if None)
        """
        self._config: Config = config if config is not None else Config()

        self.id        : int                  = genome_id
        self.node_genes: list[NodeGene]       = list(node_genes) if node_genes is not None else []
        self.conn_genes: list[ConnectionGene] = list(conn_genes) if conn_genes is not None else []

    @classmethod
    def create(cls,
               genome_id  : int,
               num_inputs : int,
               num_outputs: int,
               rng        : np.random.Generator,
               config     : Config | None = None) -> 'Genome':
        """
        Create an initial genome in which every input node is connected to every output node.

        Input nodes get the activation named by 'config.input_activation' (identity by
        default), output nodes the one named by 'config.output_activation' (sigmoid by
        default). Connection weights are drawn from a standard normal distribution and
        scaled by 'config.weight_init_scale'.

        Parameters:
            genome_id:   Genome ID
            num_inputs:  Number of input nodes
            num_outputs: Number of output nodes
            rng:         Source of randomness
            config:      Stores configuration parameters (defaults if None)

        Returns:
            A genome with num_inputs + num_outputs nodes and num_inputs * num_outputs connections

        Raises:
            ValueError:         If a node count is negative
            ConfigurationError: If an activation name is not registered
        """
        if num_inputs < 0 or num_outputs < 0:
            raise ValueError(f"Node counts must be non-negative, got {num_inputs} inputs and {num_outputs} outputs")

        genome = cls(genome_id, config=config)
        config = genome._config

        # By convention, input nodes are numbered: [0, NUMBER INPUT NODES)
        for node_id in range(num_inputs):
            genome.node_genes.append(NodeGene(node_id, NodeType.INPUT, config.input_activation))

        # By convention, output nodes are numbered: [NUMBER INPUT NODES, NUMBER INPUT NODES + NUMBER OUTPUT NODES)
        for node_id in range(num_inputs, num_inputs + num_outputs):
            output_node = NodeGene(node_id, NodeType.OUTPUT, config.output_activation)
            genome.node_genes.append(output_node)

            for input_node in genome.node_genes[:num_inputs]:
                conn = ConnectionGene(input_node, output_node, genome._new_weight(rng))
                genome.conn_genes.append(conn)

        logger.debug("Created genome {} with {} inputs, {} outputs, {} connections",
                     genome_id, num_inputs, num_outputs, len(genome.conn_genes))
        return genome

    @property
    def input_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.INPUT]

    @property
    def hidden_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.HIDDEN]

    @property
    def output_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.OUTPUT]

    @property
    def enabled_connections(self) -> list[ConnectionGene]:
        return [conn for conn in self.conn_genes if conn.enabled]

    def validate(self) -> None:
        """
        Check the structural invariants of the genome.

        Raises:
            InvariantViolation: if a node's ID differs from its position in 'node_genes',
                                or a connection endpoint is not one of this genome's nodes
        """
        for position, node in enumerate(self.node_genes):
            if node.id != position:
                raise InvariantViolation(f"Genome {self.id}: node at position {position} has ID {node.id}")

        num_nodes = len(self.node_genes)
        for conn in self.conn_genes:
            for endpoint in (conn.node_in, conn.node_out):
                if not 0 <= endpoint.id < num_nodes or self.node_genes[endpoint.id] is not endpoint:
                    raise InvariantViolation(f"Genome {self.id}: connection {conn.key} refers to "
                                             f"node {endpoint.id}, which the genome does not own")

    def mutate(self,
               perturb_prob : float | None = None,
               add_node_prob: float | None = None,
               add_conn_prob: float | None = None,
               *,
               rng          : np.random.Generator) -> None:
        """
        Apply to the current genome, in place, the three mutation operators.

        The operators are applied in this order, each independently of the others:
          + perturb the weight of each connection, with probability 'perturb_prob'
          + split a connection by adding a node, with probability 'add_node_prob'
          + add a connection between two nodes, with probability 'add_conn_prob'
        A probability left to None is taken from the configuration.

        Parameters:
            perturb_prob:  probability of perturbing each connection's weight
            add_node_prob: probability of adding a node
            add_conn_prob: probability of adding a connection
            rng:           source of randomness

        Raises:
            ValueError: if a probability is outside [0, 1]
        """
        if perturb_prob is None:
            perturb_prob = self._config.weight_perturb_prob
        if add_node_prob is None:
            add_node_prob = self._config.node_add_probability
        if add_conn_prob is None:
            add_conn_prob = self._config.connection_add_probability

        for name, prob in (('perturb_prob', perturb_prob),
                           ('add_node_prob', add_node_prob),
                           ('add_conn_prob', add_conn_prob)):
            if not 0.0 <= prob <= 1.0:
                raise ValueError(f"'{name}' must be in [0, 1], got {prob}")

        # Mutate connection weights
        for conn in self.conn_genes:
            if rng.random() < perturb_prob:
                conn.perturb(rng, self._config.weight_perturb_strength)

        if rng.random() < add_node_prob:
            self._mutate_add_node(rng)

        if rng.random() < add_conn_prob:
            self._mutate_add_connection(rng)

    def _mutate_add_node(self, rng: np.random.Generator) -> None:
        """
        Split an existing connection by adding a new node.

        The connection to split is selected at random from all connections and
        is disabled rather than removed. It is replaced by two new connections:
        'input -> new node' (weight 1.0) and 'new node -> output' (old weight).
        """
        # A genome without connections has nothing to split.
        if not self.conn_genes:
            logger.debug("Genome {}: add-node skipped, no connections", self.id)
            return

        split_conn = self.conn_genes[rng.integers(len(self.conn_genes))]
        split_conn.disabled = True

        # The ID of the new node is its position in the node list
        new_node = NodeGene(len(self.node_genes), NodeType.HIDDEN, self._config.hidden_activation)
        self.node_genes.append(new_node)

        self.conn_genes.append(ConnectionGene(split_conn.node_in, new_node, 1.0))
        self.conn_genes.append(ConnectionGene(new_node, split_conn.node_out, split_conn.weight))

        logger.debug("Genome {}: split connection {} with node {}", self.id, split_conn.key, new_node.id)

    def _mutate_add_connection(self, rng: np.random.Generator) -> None:
        """
        Add a new connection between two existing nodes.

        The two ends of the new connection are selected at random (the same node
        may be picked twice). Nothing is added when the two nodes are already
        connected in that direction, or, if 'prevent_cycles' is set in the
        configuration, when the new connection would create a cycle.
        """
        if not self.node_genes:
            return

        node_in  = self.node_genes[rng.integers(len(self.node_genes))]
        node_out = self.node_genes[rng.integers(len(self.node_genes))]

        key = (node_in.id, node_out.id)
        if any(conn.key == key for conn in self.conn_genes):
            logger.debug("Genome {}: add-connection skipped, {} already connected", self.id, key)
            return

        if self._config.prevent_cycles and self._would_create_cycle(node_in.id, node_out.id):
            logger.debug("Genome {}: add-connection skipped, {} would create a cycle", self.id, key)
            return

        self.conn_genes.append(ConnectionGene(node_in, node_out, self._new_weight(rng)))
        logger.debug("Genome {}: added connection {}", self.id, key)

    def _would_create_cycle(self, from_node: int, to_node: int) -> bool:
        """
        Check if adding a connection from_node -> to_node would create a cycle.
        Uses DFS to check if there's already a path from 'to_node' back to 'from_node'.
        Considers ALL connections (both enabled and disabled).

        Parameters:
            from_node: proposed start of the new connection
            to_node:   proposed end   of the new connection

        Returns:
            whether adding the new connection would create a cycle in the network
        """
        if from_node == to_node:
            return True

        successors: dict[int, list[int]] = {}
        for conn in self.conn_genes:
            successors.setdefault(conn.node_in.id, []).append(conn.node_out.id)

        visited = set()
        stack   = [to_node]
        while stack:
            current = stack.pop()
            if current == from_node:
                return True   # found path 'to_node' -> 'from_node'
            if current in visited:
                continue
            visited.add(current)
            stack.extend(successors.get(current, []))

        return False

    def _new_weight(self, rng: np.random.Generator) -> float:
        return float(rng.normal(0.0, 1.0)) * self._config.weight_init_scale

    def crossover(self, other: 'Genome', child_id: int, rng: np.random.Generator) -> 'Genome':
        """
        Create offspring by combining the genes of this genome and 'other'.

        Connection genes are aligned by their (node_in.id, node_out.id) key:
        - Matching genes: inherited from 'self', or from 'other' with probability
          'config.matching_gene_swap_prob' (0.5 by default)
        - Disjoint/excess genes: inherited from whichever parent has them,
          regardless of fitness

        Node genes are copied from the parent with more nodes (from 'self' on a tie),
        or, with 'crossover_node_policy = union', merged from both parents by ID.
        The offspring shares no gene objects with its parents.

        Parameters:
            other:    the other parent genome
            child_id: ID of the offspring genome
            rng:      source of randomness

        Returns:
            New offspring genome

        Raises:
            InvariantViolation: if an inherited connection refers to a node ID that
                                the offspring's node list does not contain
        """
        swap_prob = self._config.matching_gene_swap_prob

        # Align connection genes by their endpoints; dicts keep insertion order.
        aligned: dict[tuple[int, int], ConnectionGene] = {conn.key: conn for conn in self.conn_genes}
        num_matching = 0
        for conn in other.conn_genes:
            if conn.key in aligned:
                num_matching += 1
                if rng.random() < swap_prob:
                    aligned[conn.key] = conn
            else:
                aligned[conn.key] = conn

        if self._config.crossover_node_policy == 'union':
            node_genes = self._merge_node_genes(other)
        else:
            larger_parent = other if len(other.node_genes) > len(self.node_genes) else self
            node_genes    = [node.copy() for node in larger_parent.node_genes]

        conn_genes = []
        for conn in aligned.values():
            node_in  = self._resolve_node(node_genes, conn.node_in.id , child_id)
            node_out = self._resolve_node(node_genes, conn.node_out.id, child_id)
            conn_genes.append(ConnectionGene(node_in, node_out, conn.weight, conn.disabled))

        offspring = Genome(child_id, node_genes, conn_genes, config=self._config)
        offspring.validate()

        logger.debug("Crossover {} x {} -> {}: {} nodes, {} connections ({} matching)",
                     self.id, other.id, child_id, len(node_genes), len(conn_genes), num_matching)
        return offspring

    def _merge_node_genes(self, other: 'Genome') -> list[NodeGene]:
        """
        Merge the node genes of both parents, keyed by node ID.

        Where both parents have a node with the same ID, the node of 'self' is kept.

        Raises:
            InvariantViolation: if the parents disagree on the type of a shared node,
                                or the merged IDs are not 0, 1, ..., N-1
        """
        merged: dict[int, NodeGene] = {}
        for node in chain(self.node_genes, other.node_genes):
            known = merged.get(node.id)
            if known is None:
                merged[node.id] = node
            elif known.type != node.type:
                raise InvariantViolation(f"Node {node.id} is {known.type.value} in genome {self.id} "
                                         f"but {node.type.value} in genome {other.id}")

        if sorted(merged) != list(range(len(merged))):
            raise InvariantViolation(f"Node IDs of genomes {self.id} and {other.id} are not contiguous")

        return [merged[node_id].copy() for node_id in range(len(merged))]

    @staticmethod
    def _resolve_node(node_genes: list[NodeGene], node_id: int, child_id: int) -> NodeGene:
        if not 0 <= node_id < len(node_genes):
            raise InvariantViolation(f"Offspring {child_id}: connection refers to node {node_id}, "
                                     f"but only nodes 0..{len(node_genes) - 1} were inherited")
        return node_genes[node_id]

    def __repr__(self):
        return (f"Genome(genome_id={self.id}, nodes={len(self.node_genes)}, "
                f"connections={len(self.conn_genes)})")

    def __str__(self):
        return "\n".join([f"Genome({self.id}):"] + [str(conn) for conn in self.conn_genes])
