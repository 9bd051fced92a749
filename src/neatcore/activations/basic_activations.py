"""
NEAT Basic Activations Module

Scalar activation functions and the process-wide registry mapping their
names to Activation objects. The registry is read-only: nodes look an
activation up once, when they are created, and keep the reference.

Classes:
    Activation: A named activation function

Functions:
    get_activation(name): Look up an activation in the registry
"""

from dataclasses import dataclass
from types       import MappingProxyType
from typing      import Callable

import autograd.numpy as np  # type: ignore

from neatcore.errors import ConfigurationError

def identity_activation(z):
    return z

def sigmoid_activation(z):
    z = np.clip(z, -60.0, 60.0)   # to prevent overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-z))

def tanh_activation(z):
    return np.tanh(z)

def relu_activation(z):
    return np.maximum(0.0, z)

def clamped_activation(z):
    return np.clip(z, -1.0, 1.0)

def sin_activation(z):
    return np.sin(z)

def abs_activation(z):
    return np.abs(z)

@dataclass(frozen=True)
class Activation:
    """
    An activation function together with the name it is registered under.

    Public Attributes:
        name: Registry key, also used when rendering node genes
        fn:   The scalar function itself
    """
    name: str
    fn  : Callable[[float], float]

    def __call__(self, z):
        return self.fn(z)

    def __repr__(self):
        return f"Activation({self.name!r})"

activations = MappingProxyType({
    "identity": Activation("identity", identity_activation),
    "sigmoid" : Activation("sigmoid" , sigmoid_activation),
    "tanh"    : Activation("tanh"    , tanh_activation),
    "relu"    : Activation("relu"    , relu_activation),
    "clamped" : Activation("clamped" , clamped_activation),
    "sin"     : Activation("sin"     , sin_activation),
    "abs"     : Activation("abs"     , abs_activation),
    })

def get_activation(name: str) -> Activation:
    """
    Look up an activation function by name.

    Parameters:
        name: registry key (e.g. 'identity', 'sigmoid')

    Returns:
        the registered Activation

    Raises:
        ConfigurationError: if no activation is registered under 'name'
    """
    try:
        return activations[name]
    except KeyError:
        raise ConfigurationError(f"Unknown activation function '{name}' "
                                 f"(available: {', '.join(activations)})") from None
