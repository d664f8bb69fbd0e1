"""
Brain: a network whose shape follows the sensor it reads from.

A sensor with N cells drives a network of topology [N, 2 * N, 2]: one input
per cell, a hidden layer twice as wide, and two outputs the simulation reads
as actuation (e.g. speed change and rotation change). Brains are rebuilt from
chromosomes every generation, never edited in place.
"""

from typing import List, Sequence

import numpy as np

from .core.activations import DEFAULT_ACTIVATION
from .core.network import Network
from .evolution.chromosome import Chromosome

# Number of actuation outputs every brain produces
OUTPUT_SIZE = 2


class Brain:
    """Network wrapper sized from the number of sensor cells."""

    def __init__(self, network: Network, cells: int):
        self.network = network
        self.cells = cells

    @staticmethod
    def topology(cells: int) -> List[int]:
        """Layer sizes for a sensor with the given number of cells."""
        return [cells, 2 * cells, OUTPUT_SIZE]

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        cells: int,
        activation: str = DEFAULT_ACTIVATION,
    ) -> 'Brain':
        return cls(Network.random(rng, cls.topology(cells), activation=activation), cells)

    @classmethod
    def from_chromosome(
        cls,
        chromosome: Chromosome,
        cells: int,
        activation: str = DEFAULT_ACTIVATION,
    ) -> 'Brain':
        """
        Rebuild a brain from an evolved chromosome.

        Raises:
            InsufficientWeightsError / ExcessWeightsError: If the chromosome
                length does not match the topology for `cells`
        """
        network = Network.from_weights(cls.topology(cells), chromosome, activation=activation)
        return cls(network, cells)

    def as_chromosome(self) -> Chromosome:
        return Chromosome(self.network.flatten_to_weights())

    def propagate(self, readings: Sequence[float]) -> np.ndarray:
        """Map one sensor reading per cell to the actuation outputs."""
        return self.network.propagate(readings)

    def __repr__(self) -> str:
        return f"Brain(cells={self.cells}, network={self.network!r})"
