"""
Evolutionary operators: selection, crossover, and mutation.

Each operator family is an abstract base class with a single method, so the
engine can hold any combination of them. Every method takes the caller's
random source explicitly; no operator keeps random state of its own.

- Selection picks one parent from a scored population
- Crossover combines two parent chromosomes into a child
- Mutation perturbs a child chromosome in place
"""

from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

import numpy as np

from ..errors import (
    EmptyPopulationError,
    LengthMismatchError,
    NoViableSelectionWeightError,
)
from .chromosome import Chromosome
from .individual import Individual

T = TypeVar('T', bound=Individual)


# =============================================================================
# Selection Operators
# =============================================================================

class SelectionMethod(ABC):
    """Chooses one individual from a population."""

    @abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence[T]) -> T:
        """Return one member of population (the object itself, not a copy)."""


class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportionate selection.

    Each individual is picked with probability fitness / sum(fitness). A
    single uniform draw in [0, total) is located on the cumulative fitness
    wheel, so zero-fitness individuals are never chosen.

    Example:
        selection = RouletteWheelSelection()
        parent = selection.select(rng, population)
    """

    def select(self, rng: np.random.Generator, population: Sequence[T]) -> T:
        """
        Select one individual with probability proportional to fitness.

        Args:
            rng: Caller-owned random source
            population: Non-empty sequence of scored individuals

        Returns:
            The selected individual

        Raises:
            EmptyPopulationError: If population is empty
            NoViableSelectionWeightError: If any fitness is negative or not
                finite, or all fitness values are zero
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot select from an empty population")

        weights = np.array([ind.fitness for ind in population], dtype=np.float64)
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise NoViableSelectionWeightError(
                f"Fitness values must be finite and non-negative: {weights.tolist()}"
            )

        cumulative = np.cumsum(weights)
        total = cumulative[-1]
        if total <= 0:
            raise NoViableSelectionWeightError(
                "Sum of fitness values is zero; roulette wheel selection is undefined"
            )

        point = rng.random() * total
        index = int(np.searchsorted(cumulative, point, side='right'))
        # Guard against point landing exactly on total after rounding
        index = min(index, len(population) - 1)
        return population[index]


# =============================================================================
# Crossover Operators
# =============================================================================

class CrossoverMethod(ABC):
    """Combines two parent chromosomes into one child."""

    @abstractmethod
    def crossover(
        self,
        rng: np.random.Generator,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        """Return a new chromosome; parents are left untouched."""


class UniformCrossover(CrossoverMethod):
    """
    Uniform crossover with gene-by-gene coin flips.

    Every position of the child is copied from parent A or parent B with
    probability 0.5 each, independently of the other positions. Values are
    never blended.
    """

    def crossover(
        self,
        rng: np.random.Generator,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        """
        Create a child from two equal-length parents.

        Raises:
            LengthMismatchError: If the parents differ in length
        """
        if len(parent_a) != len(parent_b):
            raise LengthMismatchError(
                f"Parents must have equal length, got {len(parent_a)} and {len(parent_b)}"
            )

        take_a = rng.random(len(parent_a)) < 0.5
        return Chromosome(np.where(take_a, parent_a.genes, parent_b.genes))


# =============================================================================
# Mutation Operators
# =============================================================================

class MutationMethod(ABC):
    """Perturbs a child chromosome in place."""

    @abstractmethod
    def mutate(self, rng: np.random.Generator, child: Chromosome) -> None:
        """Modify child's genes; child must not be shared with anyone else."""


class GaussianMutation(MutationMethod):
    """
    Per-gene additive perturbation.

    For each gene, with probability chance, add sign * coeff * magnitude
    where sign is +1 or -1 with equal odds and magnitude is uniform in
    [0, 1).

    Args:
        chance: Probability of touching a gene
            (0.0 = no gene is touched, 1.0 = every gene is touched)
        coeff: Maximum size of a change
            (0.0 = touched genes keep their value, 3.0 = genes move by at most 3.0)
    """

    def __init__(self, chance: float, coeff: float):
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"Mutation chance {chance} out of range [0.0, 1.0]")
        if coeff < 0.0:
            raise ValueError(f"Mutation coeff {coeff} must be non-negative")
        self.chance = chance
        self.coeff = coeff

    def mutate(self, rng: np.random.Generator, child: Chromosome) -> None:
        genes = child.iter_mut()
        for i in range(len(genes)):
            if rng.random() < self.chance:
                sign = -1.0 if rng.random() < 0.5 else 1.0
                magnitude = rng.random()
                genes[i] += np.float32(sign * self.coeff * magnitude)

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"
