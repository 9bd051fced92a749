"""
Activations Package

This package provides activation functions for NEAT neural networks.

Exported:
    Activation:     Named activation function (callable)
    activations:    Read-only mapping from activation names to Activation objects
    get_activation: Registry lookup raising ConfigurationError on unknown names
    Individual activation functions: identity_activation, sigmoid_activation,
                                     tanh_activation, relu_activation,
                                     clamped_activation, sin_activation, abs_activation
"""

from neatcore.activations.basic_activations import (
    Activation,
    activations,
    get_activation,
    identity_activation,
    sigmoid_activation,
    tanh_activation,
    relu_activation,
    clamped_activation,
    sin_activation,
    abs_activation
)

__all__ = [
    'Activation',
    'activations',
    'get_activation',
    'identity_activation',
    'sigmoid_activation',
    'tanh_activation',
    'relu_activation',
    'clamped_activation',
    'sin_activation',
    'abs_activation'
]
