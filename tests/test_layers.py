"""
test_layers.py
~~~~~~~~~~~~~~

Unit tests for dense layers.
"""

import math

import numpy as np
import pytest

from nnet_fabric.core.activations import Activation
from nnet_fabric.core.errors import DimensionMismatch, InvalidDimension
from nnet_fabric.core.layers import Layer, he_normal


class TestLayerInitialization:
    """Shapes and initial parameter values."""

    @pytest.mark.parametrize("input_size,output_size", [(1, 1), (3, 5), (8, 2)])
    def test_shapes_and_zero_biases(self, input_size, output_size):
        layer = Layer(input_size, output_size, "relu")
        weights, biases = layer.get_weights()

        assert len(weights) == output_size
        assert all(len(row) == input_size for row in weights)
        assert biases == [0.0] * output_size

    @pytest.mark.parametrize("input_size,output_size", [(0, 3), (3, 0), (-1, 2), (2.5, 2)])
    def test_invalid_sizes(self, input_size, output_size):
        with pytest.raises(InvalidDimension):
            Layer(input_size, output_size, "linear")

    def test_integral_float_sizes_accepted(self):
        layer = Layer(3.0, 2.0, "linear")
        assert (layer.input_size, layer.output_size) == (3, 2)

    def test_he_scaling(self):
        rng = np.random.default_rng(0)
        weights = he_normal(400, 50, rng)
        assert weights.shape == (400, 50)
        assert np.std(weights) == pytest.approx(math.sqrt(2.0 / 50), rel=0.05)

    def test_seeded_generator_is_reproducible(self):
        first = Layer(4, 3, rng=np.random.default_rng(7))
        second = Layer(4, 3, rng=np.random.default_rng(7))
        np.testing.assert_array_equal(first.weights, second.weights)

    def test_unknown_activation_kept_verbatim(self):
        with pytest.warns(UserWarning):
            layer = Layer(2, 2, "swish")
        assert layer.activation_name == "swish"
        assert layer.activation is Activation.UNKNOWN
        assert layer.get_config()['activation'] == "swish"


class TestLayerForward:
    """Affine transform followed by the activation."""

    def test_affine_then_relu(self):
        layer = Layer(2, 2, "relu")
        layer.set_weights([[1.0, -1.0], [2.0, 0.5]], [0.0, -10.0])
        np.testing.assert_allclose(layer.forward(np.array([3.0, 1.0])), [2.0, 0.0])

    def test_sigmoid_output(self):
        layer = Layer(1, 1, "sigmoid")
        layer.set_weights([[0.0]], [0.0])
        np.testing.assert_allclose(layer(np.array([5.0])), [0.5])

    def test_wrong_input_length(self):
        layer = Layer(3, 2)
        with pytest.raises(DimensionMismatch):
            layer.forward(np.array([1.0, 2.0]))


class TestLayerWeights:
    """get_weights / set_weights."""

    def test_round_trip(self):
        layer = Layer(2, 3)
        weights = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
        layer.set_weights(weights, [0.1, 0.2, 0.3])
        assert layer.get_weights() == (weights, [0.1, 0.2, 0.3])

    def test_returned_lists_are_copies(self):
        layer = Layer(2, 1)
        layer.set_weights([[1.0, 1.0]], [0.0])
        weights, biases = layer.get_weights()
        weights[0][0] = 99.0
        biases[0] = 99.0
        assert layer.get_weights() == ([[1.0, 1.0]], [0.0])

    def test_wrong_matrix_shape_leaves_layer_untouched(self):
        layer = Layer(2, 2)
        before = layer.get_weights()
        with pytest.raises(DimensionMismatch):
            layer.set_weights([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], [0.0, 0.0])
        assert layer.get_weights() == before

    def test_wrong_bias_length(self):
        layer = Layer(2, 2)
        before = layer.get_weights()
        with pytest.raises(DimensionMismatch):
            layer.set_weights([[1.0, 2.0], [3.0, 4.0]], [0.0])
        assert layer.get_weights() == before
