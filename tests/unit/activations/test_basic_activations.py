"""
Unit tests for the activation functions and the activation registry.
"""

import pytest
import numpy as np

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
    abs_activation,
)
from neatcore.errors import ConfigurationError, NeatError


class TestActivationRegistry:
    """Test the name => Activation registry."""

    def test_required_entries_present(self):
        """Test that the entries needed to build genomes are registered."""
        assert 'identity' in activations
        assert 'sigmoid' in activations

    def test_all_entries(self):
        """Test the full set of registered names."""
        assert set(activations) == {'identity', 'sigmoid', 'tanh', 'relu', 'clamped', 'sin', 'abs'}

    def test_entry_name_matches_key(self):
        """Test that each Activation carries the name it is registered under."""
        for name, activation in activations.items():
            assert activation.name == name

    def test_registry_is_read_only(self):
        """Test that the registry cannot be modified."""
        with pytest.raises(TypeError):
            activations['square'] = Activation('square', lambda z: z * z)
        with pytest.raises(TypeError):
            del activations['identity']

    def test_get_activation_returns_registered_object(self):
        """Test that lookups return the very object held by the registry."""
        assert get_activation('sigmoid') is activations['sigmoid']
        assert get_activation('identity').fn is identity_activation

    def test_get_activation_unknown_name(self):
        """Test that an unknown name is a configuration error."""
        with pytest.raises(ConfigurationError, match="Unknown activation function 'softmax'"):
            get_activation('softmax')

    def test_configuration_error_hierarchy(self):
        """Test that ConfigurationError can be caught as ValueError or NeatError."""
        with pytest.raises(ValueError):
            get_activation('nope')
        with pytest.raises(NeatError):
            get_activation('nope')


class TestActivationObject:
    """Test the Activation value type."""

    def test_callable(self):
        """Test that an Activation can be called like its function."""
        assert get_activation('identity')(3.5) == 3.5
        assert get_activation('sigmoid')(0.0) == pytest.approx(0.5)

    def test_frozen(self):
        """Test that an Activation cannot be modified."""
        activation = get_activation('tanh')
        with pytest.raises(AttributeError):
            activation.name = 'other'

    def test_repr(self):
        assert repr(get_activation('relu')) == "Activation('relu')"


class TestActivationFunctions:
    """Test the values computed by the activation functions."""

    def test_identity(self):
        assert identity_activation(0.0) == 0.0
        assert identity_activation(-7.25) == -7.25

    def test_sigmoid_midpoint(self):
        assert sigmoid_activation(0.0) == pytest.approx(0.5)

    def test_sigmoid_symmetry(self):
        for z in (0.1, 1.0, 3.0):
            assert sigmoid_activation(z) + sigmoid_activation(-z) == pytest.approx(1.0)

    def test_sigmoid_no_overflow(self):
        """Test that extreme inputs saturate instead of overflowing."""
        with np.errstate(over='raise'):
            assert sigmoid_activation(1e6) == pytest.approx(1.0)
            assert sigmoid_activation(-1e6) == pytest.approx(0.0)

    def test_tanh(self):
        assert tanh_activation(0.0) == pytest.approx(0.0)
        assert tanh_activation(1.0) == pytest.approx(np.tanh(1.0))

    def test_relu(self):
        assert relu_activation(-1.0) == 0.0
        assert relu_activation(2.0) == 2.0

    def test_clamped(self):
        assert clamped_activation(5.0) == 1.0
        assert clamped_activation(-5.0) == -1.0
        assert clamped_activation(0.3) == pytest.approx(0.3)

    def test_sin(self):
        assert sin_activation(0.0) == pytest.approx(0.0)
        assert sin_activation(np.pi / 2) == pytest.approx(1.0)

    def test_abs(self):
        assert abs_activation(-2.5) == 2.5

    def test_array_input(self):
        """Test that the functions accept numpy arrays."""
        z = np.array([-2.0, 0.0, 2.0])
        np.testing.assert_allclose(relu_activation(z), [0.0, 0.0, 2.0])
        np.testing.assert_allclose(sigmoid_activation(z)[1], 0.5)
