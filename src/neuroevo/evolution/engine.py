"""
Genetic algorithm engine.

One call to evolve() is one generation:
1. Select two parents (independently, possibly the same individual)
2. Cross their chromosomes into a child
3. Mutate the child in place
4. Build a new individual from the child
5. Repeat until the new population matches the old one in size

There is no elitism, deduplication or diversity management: the next
generation comes entirely from selection, crossover and mutation.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from ..errors import EmptyPopulationError
from .individual import Individual
from .operators import CrossoverMethod, MutationMethod, SelectionMethod
from .statistics import EvolutionHistory, Statistics

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Individual)


class GeneticAlgorithm:
    """
    Evolves populations of Individuals with pluggable operators.

    The operators are fixed at construction. The engine keeps no random state
    and no population, so one instance can serve any number of independent
    runs, each with its own random source.

    Example:
        ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(chance=0.01, coeff=0.3),
        )
        rng = make_rng(42)
        population, stats = ga.evolve(rng, population)
    """

    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(
        self,
        rng: np.random.Generator,
        population: Sequence[T],
    ) -> Tuple[List[T], Statistics]:
        """
        Produce the next generation.

        New individuals are built with the class of population[0], via its
        create() classmethod.

        Args:
            rng: Caller-owned random source
            population: Scored individuals of the current generation

        Returns:
            Tuple of (new population of the same size, statistics of the
            input population)

        Raises:
            EmptyPopulationError: If population is empty
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot evolve an empty population")

        individual_cls = type(population[0])
        new_population = []

        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population).chromosome
            parent_b = self.selection_method.select(rng, population).chromosome

            child = self.crossover_method.crossover(rng, parent_a, parent_b)
            self.mutation_method.mutate(rng, child)

            new_population.append(individual_cls.create(child))

        stats = Statistics.compute(population)
        logger.debug("Evolved generation: %s", stats)

        return new_population, stats

    def run(
        self,
        rng: np.random.Generator,
        population: Sequence[T],
        evaluate: Callable[[List[T]], Sequence[T]],
        generations: int,
        history: Optional[EvolutionHistory] = None,
        early_stop_patience: Optional[int] = None,
        early_stop_min_improvement: float = 0.001,
    ) -> Tuple[List[T], EvolutionHistory]:
        """
        Run several generations back to back.

        Each generation, evaluate() receives the current individuals and
        returns them scored; the scored population is then evolved.

        Args:
            rng: Caller-owned random source
            population: Initial individuals (unscored)
            evaluate: Callback assigning fitness to every individual
            generations: Maximum number of generations
            history: Existing history to extend (a new one if None)
            early_stop_patience: Stop after this many generations without
                improvement (None disables early stopping)
            early_stop_min_improvement: Minimum improvement that counts

        Returns:
            Tuple of (last, unscored population, history of statistics)
        """
        if history is None:
            history = EvolutionHistory()

        current = list(population)
        for generation in range(generations):
            scored = evaluate(current)
            current, stats = self.evolve(rng, scored)
            history.record(stats)
            logger.info("Generation %d: %s", len(history), stats)

            if early_stop_patience is not None and history.should_early_stop(
                patience=early_stop_patience,
                min_improvement=early_stop_min_improvement,
            ):
                logger.info(
                    "Stopping early after %d generations: no improvement > %s in %d generations",
                    generation + 1, early_stop_min_improvement, early_stop_patience,
                )
                break

        return current, history
