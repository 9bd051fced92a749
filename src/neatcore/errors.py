"""
NEAT Errors Module

Exception types raised by the genome encoding.

Classes:
    NeatError:          Base class for all errors raised by this package
    ConfigurationError: Bad configuration value (e.g. unknown activation name)
    InvariantViolation: A genome is structurally malformed
"""


class NeatError(Exception):
    """Base class for all errors raised by neatcore."""


class ConfigurationError(NeatError, ValueError):
    """
    Raised when a configuration value cannot be used, most notably when an
    activation function name is not present in the activation registry.
    """


class InvariantViolation(NeatError, RuntimeError):
    """
    Raised when a genome breaks one of its structural invariants: a node ID
    that does not match its position in the node list, a connection whose
    endpoint is not owned by the genome, or a node ID that cannot be resolved
    while assembling a crossover child.
    """
