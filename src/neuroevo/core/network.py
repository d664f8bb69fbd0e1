"""
Feedforward neural network used as an evolvable brain.

A Network is an ordered list of Layers, each an ordered list of Neurons. Every
neuron holds one bias and one weight per input. The network can be flattened
into a single float32 vector and rebuilt from one, which is how brains travel
through the genetic algorithm as chromosomes.

Weight order (flatten and restore must agree on it):
    for each layer, for each neuron: bias, then one weight per input

Example:
    rng = np.random.default_rng(7)
    net = Network.random(rng, [3, 6, 2])
    weights = net.flatten_to_weights()
    clone = Network.from_weights([3, 6, 2], weights)
    assert np.array_equal(net.propagate([0.1, 0.2, 0.3]),
                          clone.propagate([0.1, 0.2, 0.3]))
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Union

import numpy as np

from ..errors import (
    ExcessWeightsError,
    InsufficientWeightsError,
    InvalidTopologyError,
    LayerShapeMismatchError,
)
from .activations import DEFAULT_ACTIVATION, Activation, get_activation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerTopology:
    """Size of one layer in a topology."""
    neurons: int


TopologyLike = Sequence[Union[int, LayerTopology]]


def layer_sizes(topology: TopologyLike) -> List[int]:
    """
    Normalize a topology into a list of positive layer sizes.

    Args:
        topology: Layer sizes as ints or LayerTopology objects, input first

    Returns:
        List of layer sizes

    Raises:
        InvalidTopologyError: Fewer than two entries, or a size below one
    """
    sizes = [
        t.neurons if isinstance(t, LayerTopology) else int(t)
        for t in topology
    ]
    if len(sizes) < 2:
        raise InvalidTopologyError(
            f"Topology needs at least 2 layer sizes, got {len(sizes)}"
        )
    for size in sizes:
        if size < 1:
            raise InvalidTopologyError(f"Layer size must be positive, got {size}")
    return sizes


def count_weights(topology: TopologyLike) -> int:
    """
    Number of floats a network with this topology flattens to.

    Each layer contributes output * (input + 1): one bias plus one weight per
    input for every neuron.
    """
    sizes = layer_sizes(topology)
    return sum(
        n_out * (n_in + 1)
        for n_in, n_out in zip(sizes[:-1], sizes[1:])
    )


# Marks the end of a weight iterator
_END = object()


class WeightCursor:
    """
    Shared read position over a flat weight sequence.

    Passed by reference through Network -> Layer -> Neuron construction so
    every neuron consumes its values from the same left-to-right stream.
    """

    def __init__(self, weights: Iterable[float], expected: Optional[int] = None):
        self._iterator: Iterator[float] = iter(weights)
        self.expected = expected
        self.consumed = 0

    def take(self) -> np.float32:
        """Consume the next value or fail if the sequence is exhausted."""
        try:
            value = next(self._iterator)
        except StopIteration:
            expected = self.expected if self.expected is not None else 'more'
            raise InsufficientWeightsError(
                f"Weight sequence exhausted after {self.consumed} values, "
                f"expected {expected}"
            ) from None
        self.consumed += 1
        return np.float32(value)

    def exhausted(self) -> bool:
        """True if no value is left; reads at most one more value."""
        return next(self._iterator, _END) is _END


def _as_cursor(weights: Union[WeightCursor, Iterable[float]]) -> WeightCursor:
    if isinstance(weights, WeightCursor):
        return weights
    return WeightCursor(weights)


class Neuron:
    """One bias plus one weight per input."""

    def __init__(self, bias: float, weights: Sequence[float]):
        self.bias = np.float32(bias)
        self.weights = np.asarray(weights, dtype=np.float32).reshape(-1)

    @property
    def input_size(self) -> int:
        return len(self.weights)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int) -> 'Neuron':
        """Draw the bias and every weight uniformly from [-1.0, 1.0]."""
        bias = rng.uniform(-1.0, 1.0)
        weights = rng.uniform(-1.0, 1.0, size=input_size)
        return cls(bias, weights)

    @classmethod
    def from_weights(
        cls,
        input_size: int,
        weights: Union[WeightCursor, Iterable[float]],
    ) -> 'Neuron':
        """Consume the bias, then input_size weights."""
        cursor = _as_cursor(weights)
        bias = cursor.take()
        values = [cursor.take() for _ in range(input_size)]
        return cls(bias, values)

    def propagate(
        self,
        inputs: np.ndarray,
        activation: Optional[Activation] = None,
    ) -> np.float32:
        """
        Weighted sum of inputs plus bias, passed through the activation.

        Input length is checked by Layer.propagate; called directly with the
        wrong length, numpy's dot product raises ValueError.
        """
        activation = activation or get_activation(DEFAULT_ACTIVATION)
        value = np.dot(np.asarray(inputs, dtype=np.float32), self.weights) + self.bias
        return np.float32(activation(np.float32(value)))

    def flatten(self) -> List[np.float32]:
        return [self.bias, *self.weights]

    def __repr__(self) -> str:
        return f"Neuron(bias={float(self.bias):.4f}, weights={self.weights.tolist()})"


class Layer:
    """Ordered neurons; produces one output per neuron."""

    def __init__(self, neurons: List[Neuron]):
        if not neurons:
            raise InvalidTopologyError("Layer needs at least one neuron")
        self.neurons = list(neurons)

    @property
    def input_size(self) -> int:
        return self.neurons[0].input_size

    @property
    def output_size(self) -> int:
        return len(self.neurons)

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        input_size: int,
        output_size: int,
    ) -> 'Layer':
        return cls([Neuron.random(rng, input_size) for _ in range(output_size)])

    @classmethod
    def from_weights(
        cls,
        input_size: int,
        output_size: int,
        weights: Union[WeightCursor, Iterable[float]],
    ) -> 'Layer':
        cursor = _as_cursor(weights)
        return cls([
            Neuron.from_weights(input_size, cursor)
            for _ in range(output_size)
        ])

    def propagate(
        self,
        inputs: np.ndarray,
        activation: Optional[Activation] = None,
    ) -> np.ndarray:
        """
        Transform an input vector into this layer's output vector.

        Raises:
            LayerShapeMismatchError: If any neuron's weight count differs
                from len(inputs)
        """
        for i, neuron in enumerate(self.neurons):
            if neuron.input_size != len(inputs):
                raise LayerShapeMismatchError(
                    f"Layer neuron {i} expects {neuron.input_size} inputs, "
                    f"got {len(inputs)}"
                )
        return np.array(
            [neuron.propagate(inputs, activation) for neuron in self.neurons],
            dtype=np.float32,
        )


class Network:
    """
    Feedforward network with one activation shared by all layers.

    Structure is a pure function of (topology, weights): evolving a brain
    means rebuilding the network from a new chromosome, never editing one.
    """

    def __init__(self, layers: List[Layer], activation: str = DEFAULT_ACTIVATION):
        if not layers:
            raise InvalidTopologyError("Network needs at least one layer")
        self.layers = list(layers)
        self.activation_name = activation
        self.activation = get_activation(activation)

    @property
    def topology(self) -> List[int]:
        """Layer sizes, input first."""
        return [self.layers[0].input_size] + [layer.output_size for layer in self.layers]

    @property
    def num_weights(self) -> int:
        return sum(
            neuron.input_size + 1
            for layer in self.layers
            for neuron in layer.neurons
        )

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        topology: TopologyLike,
        activation: str = DEFAULT_ACTIVATION,
    ) -> 'Network':
        """
        Build a network with every bias and weight uniform in [-1.0, 1.0].

        Args:
            rng: Caller-owned random source
            topology: Layer sizes, input first (at least 2 entries)
            activation: Name of the activation function

        Returns:
            A randomly initialized Network
        """
        sizes = layer_sizes(topology)
        layers = [
            Layer.random(rng, n_in, n_out)
            for n_in, n_out in zip(sizes[:-1], sizes[1:])
        ]
        return cls(layers, activation=activation)

    @classmethod
    def from_weights(
        cls,
        topology: TopologyLike,
        weights: Iterable[float],
        activation: str = DEFAULT_ACTIVATION,
    ) -> 'Network':
        """
        Rebuild a network from a flat weight sequence.

        The sequence is consumed in flatten_to_weights order and must match
        the topology's weight count exactly.

        Args:
            topology: Layer sizes, input first (at least 2 entries)
            weights: Flat sequence of floats, e.g. a Chromosome
            activation: Name of the activation function

        Returns:
            Reconstructed Network

        Raises:
            InsufficientWeightsError: Sequence ran out early
            ExcessWeightsError: Values left over after the last neuron
        """
        sizes = layer_sizes(topology)
        expected = count_weights(sizes)
        cursor = WeightCursor(weights, expected=expected)

        layers = [
            Layer.from_weights(n_in, n_out, cursor)
            for n_in, n_out in zip(sizes[:-1], sizes[1:])
        ]

        if not cursor.exhausted():
            raise ExcessWeightsError(
                f"Topology {sizes} uses {expected} weights, "
                f"got more than {expected}"
            )

        logger.debug("Restored network %s from %d weights", sizes, expected)
        return cls(layers, activation=activation)

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Feed inputs through every layer in order.

        Args:
            inputs: Sensor readings, length equal to the input layer size

        Returns:
            float32 array with one value per output neuron

        Raises:
            LayerShapeMismatchError: If the input length is wrong for a layer
        """
        current = np.asarray(inputs, dtype=np.float32).reshape(-1)
        for layer in self.layers:
            current = layer.propagate(current, self.activation)
        return current

    def flatten_to_weights(self) -> np.ndarray:
        """Flat float32 vector: per layer, per neuron, bias then weights."""
        return np.array(
            [value for layer in self.layers
             for neuron in layer.neurons
             for value in neuron.flatten()],
            dtype=np.float32,
        )

    def __repr__(self) -> str:
        return (
            f"Network(topology={self.topology}, weights={self.num_weights}, "
            f"activation={self.activation_name})"
        )
