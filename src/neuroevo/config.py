"""
Configuration for an evolutionary run.

Everything is passed explicitly: there are no environment variables or config
files. A driver builds one EvolutionConfig, derives its random source and
genetic algorithm from it, and keeps the topology fixed for the whole run.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from .core.network import count_weights, layer_sizes
from .evolution.engine import GeneticAlgorithm
from .evolution.operators import GaussianMutation, RouletteWheelSelection, UniformCrossover
from .evolution.rng import make_rng


@dataclass
class EvolutionConfig:
    """
    Configuration for evolution run.

    Attributes:
        topology: Layer sizes of every brain, input first
        population_size: Individuals per generation
        mutation_chance: Probability of mutating each gene
        mutation_coeff: Maximum magnitude of a gene mutation
        seed: Random seed (None for a non-reproducible run)
    """
    topology: List[int] = field(default_factory=lambda: [9, 18, 2])
    population_size: int = 40
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration."""
        self.topology = layer_sizes(self.topology)
        if self.population_size < 1:
            raise ValueError(f"Population size must be positive, got {self.population_size}")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise ValueError(f"Mutation chance {self.mutation_chance} out of range [0.0, 1.0]")
        if self.mutation_coeff < 0.0:
            raise ValueError(f"Mutation coeff {self.mutation_coeff} must be non-negative")

    @property
    def chromosome_length(self) -> int:
        """Number of genes each individual carries."""
        return count_weights(self.topology)

    def make_rng(self) -> np.random.Generator:
        return make_rng(self.seed)

    def build_algorithm(self) -> GeneticAlgorithm:
        """Roulette wheel selection, uniform crossover, gaussian mutation."""
        return GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(chance=self.mutation_chance, coeff=self.mutation_coeff),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'topology': list(self.topology),
            'population_size': self.population_size,
            'mutation_chance': self.mutation_chance,
            'mutation_coeff': self.mutation_coeff,
            'seed': self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvolutionConfig':
        """Create from dictionary."""
        return cls(**data)
