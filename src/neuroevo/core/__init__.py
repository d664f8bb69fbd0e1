"""Core components: feedforward network and activation functions."""

from .activations import get_activation, Activation, ACTIVATIONS, DEFAULT_ACTIVATION
from .network import (
    LayerTopology,
    Neuron,
    Layer,
    Network,
    WeightCursor,
    count_weights,
    layer_sizes,
)

__all__ = [
    'LayerTopology',
    'Neuron',
    'Layer',
    'Network',
    'WeightCursor',
    'count_weights',
    'layer_sizes',
    'get_activation',
    'Activation',
    'ACTIVATIONS',
    'DEFAULT_ACTIVATION',
]
