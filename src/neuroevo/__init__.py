"""
Neuroevo - evolving feedforward network brains with a genetic algorithm.

A brain's weights flatten into a chromosome; a population of chromosomes is
improved generation by generation through roulette wheel selection, uniform
crossover and gaussian mutation, driven by fitness scores from the caller's
simulation.

Example usage:
    from neuroevo import Brain, EvolutionConfig

    config = EvolutionConfig(topology=Brain.topology(9), seed=42)
    rng = config.make_rng()
    ga = config.build_algorithm()

    # population: list of the caller's Individual objects, already scored
    population, stats = ga.evolve(rng, population)
    print(f"Best fitness: {stats.max_fitness:.3f}")
"""

from .brain import Brain
from .config import EvolutionConfig
from .core import LayerTopology, Network, count_weights
from .errors import (
    NeuroevoError,
    EmptyPopulationError,
    NoViableSelectionWeightError,
    LengthMismatchError,
    GeneIndexError,
    InvalidTopologyError,
    LayerShapeMismatchError,
    InsufficientWeightsError,
    ExcessWeightsError,
)
from .evolution import (
    Chromosome,
    Individual,
    GeneticAlgorithm,
    Statistics,
    EvolutionHistory,
    RouletteWheelSelection,
    UniformCrossover,
    GaussianMutation,
    make_rng,
)

__version__ = '0.1.0'

__all__ = [
    'Brain',
    'EvolutionConfig',
    'LayerTopology',
    'Network',
    'count_weights',
    'Chromosome',
    'Individual',
    'GeneticAlgorithm',
    'Statistics',
    'EvolutionHistory',
    'RouletteWheelSelection',
    'UniformCrossover',
    'GaussianMutation',
    'make_rng',
    # Errors
    'NeuroevoError',
    'EmptyPopulationError',
    'NoViableSelectionWeightError',
    'LengthMismatchError',
    'GeneIndexError',
    'InvalidTopologyError',
    'LayerShapeMismatchError',
    'InsufficientWeightsError',
    'ExcessWeightsError',
]
