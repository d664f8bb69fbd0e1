"""
Activation functions applied to each neuron's pre-activation value.

Evolved brains default to ReLU. The other entries exist so a caller can pick a
different squashing function for a network without touching the weight
layout: activation choice never changes how weights flatten or restore.
"""

import numpy as np
from typing import Callable, Dict


def linear(x: np.ndarray) -> np.ndarray:
    """Identity activation - no nonlinearity."""
    return x


def relu(x: np.ndarray) -> np.ndarray:
    """Rectified Linear Unit - negative values clamp to zero."""
    return np.maximum(x, 0.0)


def leaky_relu(x: np.ndarray, alpha: float = 0.01) -> np.ndarray:
    return np.where(x > 0, x, alpha * x)


def sigmoid(x: np.ndarray) -> np.ndarray:
    """Sigmoid - smooth, bounded (0, 1)."""
    # Clip to avoid overflow
    x = np.clip(x, -500, 500)
    return 1 / (1 + np.exp(-x))


def tanh(x: np.ndarray) -> np.ndarray:
    return np.tanh(x)


class Activation:
    """Named activation function."""

    def __init__(self, name: str, func: Callable, bounded: bool):
        self.name = name
        self.func = func
        self.bounded = bounded

    def __call__(self, x: np.ndarray) -> np.ndarray:
        return np.asarray(self.func(x), dtype=np.float32)

    def __repr__(self):
        return f"Activation({self.name}, bounded={self.bounded})"


# Registry of all activation functions
ACTIVATIONS: Dict[str, Activation] = {
    'linear': Activation('linear', linear, bounded=False),
    'relu': Activation('relu', relu, bounded=False),
    'leaky_relu': Activation('leaky_relu', leaky_relu, bounded=False),
    'sigmoid': Activation('sigmoid', sigmoid, bounded=True),
    'tanh': Activation('tanh', tanh, bounded=True),
}

DEFAULT_ACTIVATION = 'relu'


def get_activation(name: str) -> Activation:
    """Get an activation function by name."""
    if name not in ACTIVATIONS:
        available = ', '.join(ACTIVATIONS.keys())
        raise ValueError(f"Unknown activation '{name}'. Available: {available}")
    return ACTIVATIONS[name]
