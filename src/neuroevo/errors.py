"""
Exceptions raised by the network and genetic algorithm.

Every error here marks a structural mismatch between the caller's inputs and
what an operation requires. None of them are caught inside the package; they
propagate to the caller unchanged.
"""


class NeuroevoError(Exception):
    """Base class for all package errors."""


class EmptyPopulationError(NeuroevoError, ValueError):
    """Selection, statistics or evolution invoked on zero individuals."""


class NoViableSelectionWeightError(NeuroevoError, ValueError):
    """Fitness values cannot be used as roulette wheel weights."""


class LengthMismatchError(NeuroevoError, ValueError):
    """Crossover parents carry chromosomes of different lengths."""


class GeneIndexError(NeuroevoError, IndexError):
    """Gene position outside the chromosome."""


class InvalidTopologyError(NeuroevoError, ValueError):
    """Topology has fewer than two layers or a non-positive layer size."""


class LayerShapeMismatchError(NeuroevoError, ValueError):
    """Input vector length differs from the layer's expected input size."""


class InsufficientWeightsError(NeuroevoError, ValueError):
    """Weight sequence ran out before the topology was fully built."""


class ExcessWeightsError(NeuroevoError, ValueError):
    """Weight sequence still had values after the topology was fully built."""
