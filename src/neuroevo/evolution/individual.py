"""
The contract a domain object must satisfy to take part in evolution.

The genetic algorithm never owns individuals. It reads fitness and chromosome
from the current population and asks the individual's class to build the next
generation from fresh chromosomes.
"""

from abc import ABC, abstractmethod

from .chromosome import Chromosome


class Individual(ABC):
    """
    A fitness-bearing object convertible to and from a Chromosome.

    Fitness must be non-negative for roulette wheel selection, with at least
    one individual scoring above zero.

    Example:
        class Bird(Individual):
            def __init__(self, chromosome, fitness=0.0):
                self._chromosome = chromosome
                self._fitness = fitness

            @property
            def fitness(self):
                return self._fitness

            @property
            def chromosome(self):
                return self._chromosome

            @classmethod
            def create(cls, chromosome):
                return cls(chromosome)
    """

    @property
    @abstractmethod
    def fitness(self) -> float:
        """Current fitness score."""

    @property
    @abstractmethod
    def chromosome(self) -> Chromosome:
        """Genes this individual was built from."""

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> 'Individual':
        """Build a new, unscored individual from a chromosome."""
