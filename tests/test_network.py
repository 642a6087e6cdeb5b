"""
test_network.py
~~~~~~~~~~~~~~~

Unit tests for network composition and forward propagation.
"""

import numpy as np
import pytest

from nnet_fabric.core.errors import DimensionMismatch, InvalidDimension
from nnet_fabric.core.layers import Layer
from nnet_fabric.core.network import Network


def _linear(weights, biases):
    weights = np.asarray(weights, dtype=float)
    layer = Layer(weights.shape[1], weights.shape[0], "linear")
    layer.set_weights(weights, biases)
    return layer


class TestForward:
    """Layer-by-layer evaluation."""

    def test_linear_layers_compose_as_affine_maps(self):
        w1, b1 = np.array([[1.0, 2.0], [0.5, -1.0], [3.0, 0.0]]), np.array([0.1, 0.2, 0.3])
        w2, b2 = np.array([[1.0, -1.0, 2.0]]), np.array([-0.5])
        network = Network([_linear(w1, b1), _linear(w2, b2)])

        x = np.array([0.7, -1.3])
        expected = w2 @ (w1 @ x + b1) + b2
        np.testing.assert_allclose(network.forward(x), expected)

    def test_predict_returns_list(self):
        network = Network([_linear([[2.0]], [1.0])])
        assert network.predict([3.0]) == [7.0]

    def test_shared_layer_applied_twice(self):
        layer = _linear([[2.0]], [1.0])
        network = Network([layer, layer])
        assert network.predict([1.0]) == [7.0]

    def test_forward_with_inputs_returns_last_layer_input(self):
        first = _linear([[1.0, 1.0]], [0.0])
        second = _linear([[3.0]], [0.0])
        last_input, output = Network([first, second]).forward_with_inputs([2.0, 3.0])
        np.testing.assert_allclose(last_input, [5.0])
        np.testing.assert_allclose(output, [15.0])

    def test_single_layer_last_input_is_network_input(self):
        last_input, _ = Network([_linear([[1.0, 1.0]], [0.0])]).forward_with_inputs([2.0, 3.0])
        np.testing.assert_allclose(last_input, [2.0, 3.0])


class TestDimensionChecks:
    """Deferred adjacency validation."""

    def test_mismatched_layers_construct(self):
        network = Network([Layer(2, 3), Layer(4, 1)])
        assert not network.is_consistent()

    def test_mismatch_surfaces_at_forward(self):
        network = Network([Layer(2, 3), Layer(4, 1)])
        with pytest.raises(DimensionMismatch, match="Layer 1"):
            network.forward([1.0, 2.0])

    def test_wrong_input_length(self):
        network = Network([Layer(2, 3), Layer(3, 1)])
        assert network.is_consistent()
        with pytest.raises(DimensionMismatch):
            network.forward([1.0, 2.0, 3.0])

    def test_empty_network_rejected(self):
        with pytest.raises(InvalidDimension):
            Network([])

    def test_sizes_and_summary(self):
        network = Network([Layer(2, 3, "relu"), Layer(3, 1, "sigmoid")])
        assert (network.input_size, network.output_size) == (2, 1)
        assert len(network) == 2
        assert network.summary() == ["0: 2 -> 3 (relu)", "1: 3 -> 1 (sigmoid)"]
