"""
NEAT Node Gene Module.

This module implements the NodeGene class and NodeType enumeration
for the NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

from enum import Enum

from neatcore.activations import Activation, get_activation

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "input"
    HIDDEN = "hidden"
    OUTPUT = "output"

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    Each node gene encodes the identity of a single node: its ID, its type
    (input, hidden, or output) and its activation function. Within a genome,
    the node ID is also the node's position in the genome's node list.

    Node genes are immutable once created; all attributes are read-only.

    Public Attributes:
        id:         Unique identifier for this node (its index in the genome)
        type:       Type of node (INPUT, HIDDEN, or OUTPUT)
        activation: The activation function, resolved from the registry at creation
    """

    __slots__ = ('_id', '_type', '_activation')

    def __init__(self,
                 node_id   : int,
                 node_type : NodeType,
                 activation: Activation | str):
        """
        Initialize a node gene.

        Parameters:
            node_id:    Unique identifier for this node
            node_type:  Type of node (INPUT, HIDDEN, or OUTPUT)
            activation: Activation object, or the name of a registered one

        Raises:
            ConfigurationError: if 'activation' names an unregistered function
            TypeError:          if 'activation' is neither a name nor an Activation
        """
        if isinstance(activation, str):
            activation = get_activation(activation)
        elif not isinstance(activation, Activation):
            raise TypeError(f"activation must be an Activation or a registered name, "
                            f"got {type(activation).__name__}")

        object.__setattr__(self, '_id'        , node_id)
        object.__setattr__(self, '_type'      , NodeType(node_type))
        object.__setattr__(self, '_activation', activation)

    @property
    def id(self) -> int:
        return self._id

    @property
    def type(self) -> NodeType:
        return self._type

    @property
    def activation(self) -> Activation:
        return self._activation

    def __setattr__(self, name, value):
        raise AttributeError(f"NodeGene is immutable (cannot set '{name}')")

    def __reduce__(self):
        return (NodeGene, (self._id, self._type, self._activation))

    def copy(self) -> 'NodeGene':
        """
        Return a new node gene with the same ID and type, sharing the activation.
        """
        return NodeGene(self._id, self._type, self._activation)

    def __repr__(self):
        return (f"NodeGene(node_id={self._id}, node_type=NodeType.{self._type.name}, "
                f"activation={self._activation.name!r})")

    def __str__(self):
        return f"[{self._type.value}({self._id}, {self._activation.name})]"
