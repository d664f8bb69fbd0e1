"""
Tests for the feedforward network and its weight protocol.

Run with: python -m pytest tests/test_network.py -v
"""

import itertools
import pytest
import numpy as np
import sys
from pathlib import Path

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from neuroevo.core.activations import ACTIVATIONS, get_activation
from neuroevo.core.network import (
    LayerTopology,
    Neuron,
    Layer,
    Network,
    WeightCursor,
    count_weights,
    layer_sizes,
)
from neuroevo.errors import (
    ExcessWeightsError,
    InsufficientWeightsError,
    InvalidTopologyError,
    LayerShapeMismatchError,
)


class TestTopology:
    """Tests for topology helpers."""

    def test_layer_sizes_accepts_ints_and_layer_topology(self):
        """Plain ints and LayerTopology objects normalize the same way."""
        assert layer_sizes([3, 2]) == [3, 2]
        assert layer_sizes([LayerTopology(3), LayerTopology(2)]) == [3, 2]
        assert layer_sizes([LayerTopology(3), 6, LayerTopology(2)]) == [3, 6, 2]

    def test_single_layer_topology_rejected(self):
        with pytest.raises(InvalidTopologyError):
            layer_sizes([3])
        with pytest.raises(InvalidTopologyError):
            layer_sizes([])

    def test_non_positive_layer_size_rejected(self):
        with pytest.raises(InvalidTopologyError):
            layer_sizes([3, 0, 2])

    def test_count_weights(self):
        """Each neuron carries one bias plus one weight per input."""
        # 3 -> 2: 2 * (3 + 1) = 8
        assert count_weights([3, 2]) == 8
        # 3 -> 6 -> 2: 6 * 4 + 2 * 7 = 38
        assert count_weights([3, 6, 2]) == 38


class TestNeuron:
    """Tests for single neuron behaviour."""

    def test_random_neuron_in_range(self):
        """Random bias and weights are drawn from [-1, 1]."""
        rng = np.random.default_rng(0)
        neuron = Neuron.random(rng, 4)

        assert neuron.input_size == 4
        assert -1.0 <= neuron.bias <= 1.0
        assert np.all(np.abs(neuron.weights) <= 1.0)
        assert neuron.weights.dtype == np.float32

    def test_random_neuron_is_seed_deterministic(self):
        a = Neuron.random(np.random.default_rng(5), 4)
        b = Neuron.random(np.random.default_rng(5), 4)

        assert a.bias == b.bias
        np.testing.assert_array_equal(a.weights, b.weights)

    def test_relu_clamps_negative_values(self):
        """Negative pre-activation propagates to exactly zero."""
        neuron = Neuron(bias=0.5, weights=[-0.3, 0.8])

        assert neuron.propagate(np.array([-10.0, -10.0])) == 0.0

    def test_positive_value_passes_through(self):
        neuron = Neuron(bias=0.5, weights=[-0.3, 0.8])

        expected = (-0.3 * 0.5) + (0.8 * 1.0) + 0.5
        assert neuron.propagate(np.array([0.5, 1.0])) == pytest.approx(expected, rel=1e-6)

    def test_wrong_input_length(self):
        neuron = Neuron(bias=0.5, weights=[-0.3, 0.8])

        with pytest.raises(ValueError):
            neuron.propagate(np.array([1.0, 2.0, 3.0]))

    def test_from_weights_consumes_bias_first(self):
        neuron = Neuron.from_weights(3, iter([0.1, 0.2, 0.3, 0.4, 0.5]))

        assert neuron.bias == pytest.approx(0.1)
        np.testing.assert_allclose(neuron.weights, [0.2, 0.3, 0.4], rtol=1e-6)


class TestLayer:
    """Tests for layer propagation."""

    def test_propagate_layer(self):
        layer = Layer([
            Neuron(bias=0.5, weights=[-0.3, 1.0]),
            Neuron(bias=0.2, weights=[-0.3, 0.8]),
            Neuron(bias=0.1, weights=[0.3, 0.2]),
        ])

        output = layer.propagate(np.array([-0.3, 0.5], dtype=np.float32))

        assert output.dtype == np.float32
        np.testing.assert_allclose(output, [1.09, 0.69, 0.11], rtol=1e-5)

    def test_layer_shape(self):
        layer = Layer.random(np.random.default_rng(1), input_size=4, output_size=3)

        assert layer.input_size == 4
        assert layer.output_size == 3

    def test_layer_shape_mismatch(self):
        layer = Layer([Neuron(bias=0.0, weights=[1.0, 1.0])])

        with pytest.raises(LayerShapeMismatchError):
            layer.propagate(np.array([1.0]))

    def test_empty_layer_rejected(self):
        with pytest.raises(InvalidTopologyError):
            Layer([])


class TestNetwork:
    """Tests for network construction and propagation."""

    def test_random_network_topology(self):
        network = Network.random(np.random.default_rng(2), [3, 6, 2])

        assert network.topology == [3, 6, 2]
        assert len(network.layers) == 2
        assert network.num_weights == count_weights([3, 6, 2])

    def test_random_network_rejects_bad_topology(self):
        with pytest.raises(InvalidTopologyError):
            Network.random(np.random.default_rng(2), [3])

    def test_propagate_network(self):
        network = Network([
            Layer([
                Neuron(bias=0.0, weights=[1.0, 1.0]),
                Neuron(bias=-1.0, weights=[1.0, 0.0]),
            ]),
            Layer([Neuron(bias=0.5, weights=[2.0, 3.0])]),
        ])

        # Hidden: [relu(3.0), relu(0.0)] = [3.0, 0.0]; output: 6.0 + 0.5
        output = network.propagate([1.0, 2.0])

        np.testing.assert_allclose(output, [6.5], rtol=1e-6)

    def test_propagate_wrong_input_size(self):
        network = Network.random(np.random.default_rng(3), [3, 2])

        with pytest.raises(LayerShapeMismatchError):
            network.propagate([1.0, 2.0])

    def test_propagate_outputs_non_negative_with_relu(self):
        network = Network.random(np.random.default_rng(4), [5, 8, 3])
        inputs = np.random.default_rng(99).uniform(-5, 5, size=5)

        output = network.propagate(inputs)

        assert output.shape == (3,)
        assert np.all(output >= 0.0)

    def test_linear_activation_allows_negative_output(self):
        network = Network(
            [Layer([Neuron(bias=-2.0, weights=[1.0])])],
            activation='linear',
        )

        np.testing.assert_allclose(network.propagate([1.0]), [-1.0])

    def test_unknown_activation(self):
        with pytest.raises(ValueError):
            Network.random(np.random.default_rng(0), [2, 1], activation='swishy')


class TestWeights:
    """Tests for weight flattening and restoration."""

    def test_flatten_order(self):
        """Per layer, per neuron: bias then weights."""
        network = Network([
            Layer([Neuron(0.1, [0.2, 0.3, 0.4])]),
            Layer([Neuron(0.5, [0.6, 0.7, 0.8])]),
        ])

        weights = network.flatten_to_weights()

        assert weights.dtype == np.float32
        np.testing.assert_allclose(
            weights, [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8], rtol=1e-6
        )

    def test_from_weights(self):
        weights = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8]

        network = Network.from_weights([LayerTopology(3), LayerTopology(2)], weights)

        assert network.topology == [3, 2]
        np.testing.assert_allclose(network.flatten_to_weights(), weights, rtol=1e-6)

    def test_from_weights_accepts_iterator(self):
        network = Network.from_weights([3, 2], (w / 10 for w in range(1, 9)))

        assert network.num_weights == 8

    def test_insufficient_weights(self):
        with pytest.raises(InsufficientWeightsError):
            Network.from_weights([3, 2], [0.1] * 7)

    def test_excess_weights(self):
        with pytest.raises(ExcessWeightsError):
            Network.from_weights([3, 2], [0.1] * 9)

    def test_excess_weights_from_unbounded_iterator(self):
        """An endless weight stream is rejected after one extra read."""
        with pytest.raises(ExcessWeightsError, match="more than 8"):
            Network.from_weights([3, 2], itertools.repeat(0.1))

    def test_empty_weights(self):
        with pytest.raises(InsufficientWeightsError):
            Network.from_weights([3, 2], [])

    @pytest.mark.parametrize('topology', [[1, 1], [3, 2], [4, 8, 2], [2, 5, 5, 3]])
    def test_round_trip_preserves_behaviour(self, topology):
        """Restored network propagates identically to the original."""
        rng = np.random.default_rng(11)
        original = Network.random(rng, topology)

        restored = Network.from_weights(topology, original.flatten_to_weights())

        np.testing.assert_array_equal(
            restored.flatten_to_weights(), original.flatten_to_weights()
        )
        for _ in range(10):
            inputs = rng.uniform(-2.0, 2.0, size=topology[0])
            np.testing.assert_array_equal(
                restored.propagate(inputs), original.propagate(inputs)
            )

    def test_weight_cursor_counts_consumption(self):
        cursor = WeightCursor([1.0, 2.0, 3.0], expected=3)

        cursor.take()
        cursor.take()

        assert cursor.consumed == 2
        assert not cursor.exhausted()
        assert cursor.exhausted()

    def test_weight_cursor_empty_sequence_is_exhausted(self):
        assert WeightCursor([]).exhausted()


class TestActivations:
    """Tests for the activation registry."""

    def test_relu_is_registered(self):
        relu = get_activation('relu')

        np.testing.assert_array_equal(
            relu(np.array([-1.0, 0.0, 2.0], dtype=np.float32)), [0.0, 0.0, 2.0]
        )

    def test_bounded_activations_stay_in_range(self):
        x = np.linspace(-50, 50, 101, dtype=np.float32)
        for name, activation in ACTIVATIONS.items():
            if activation.bounded:
                assert np.all(np.abs(activation(x)) <= 1.0), name

    def test_unknown_activation(self):
        with pytest.raises(ValueError):
            get_activation('unknown')


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
