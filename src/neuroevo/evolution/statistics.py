"""
Fitness statistics for a generation and the history of a whole run.

Statistics is an immutable snapshot computed from one population.
EvolutionHistory collects those snapshots in memory so a driver can follow
progress and decide when to stop.
"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional, Sequence

from ..errors import EmptyPopulationError
from .individual import Individual


@dataclass(frozen=True)
class Statistics:
    """Minimum, maximum and mean fitness of one population."""
    min_fitness: float
    max_fitness: float
    avg_fitness: float
    population_size: int

    @classmethod
    def compute(cls, population: Sequence[Individual]) -> 'Statistics':
        """
        Summarize a population in one pass.

        Raises:
            EmptyPopulationError: If population is empty
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot compute statistics of an empty population")

        min_fitness = population[0].fitness
        max_fitness = min_fitness
        sum_fitness = 0.0

        for individual in population:
            fitness = individual.fitness
            min_fitness = min(min_fitness, fitness)
            max_fitness = max(max_fitness, fitness)
            sum_fitness += fitness

        return cls(
            min_fitness=float(min_fitness),
            max_fitness=float(max_fitness),
            avg_fitness=sum_fitness / len(population),
            population_size=len(population),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"min={self.min_fitness:.3f} max={self.max_fitness:.3f} "
            f"avg={self.avg_fitness:.3f} (n={self.population_size})"
        )


@dataclass
class EvolutionHistory:
    """Per-generation statistics for a run, kept in memory."""
    generations: List[Statistics] = field(default_factory=list)
    fitness_trajectory: List[float] = field(default_factory=list)
    mean_trajectory: List[float] = field(default_factory=list)

    def record(self, stats: Statistics) -> None:
        """Append the statistics of the next generation."""
        self.generations.append(stats)
        self.fitness_trajectory.append(stats.max_fitness)
        self.mean_trajectory.append(stats.avg_fitness)

    def __len__(self) -> int:
        return len(self.generations)

    @property
    def best_fitness(self) -> float:
        """Best fitness seen in any generation (0.0 before the first)."""
        return max(self.fitness_trajectory) if self.fitness_trajectory else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'generations': [g.to_dict() for g in self.generations],
            'fitness_trajectory': self.fitness_trajectory,
            'mean_trajectory': self.mean_trajectory,
        }

    def _gain(self, last: int) -> Optional[float]:
        """Best of the last `last` generations minus the best before them."""
        if last < 1 or len(self.fitness_trajectory) <= last:
            return None
        split = len(self.fitness_trajectory) - last
        return max(self.fitness_trajectory[split:]) - max(self.fitness_trajectory[:split])

    def get_improvement_rate(self, window: int = 5) -> float:
        """
        How much the best fitness rose over the last `window` generations.

        Returns inf until the history holds more than `window` generations.
        """
        gain = self._gain(window)
        return float('inf') if gain is None else gain

    def should_early_stop(
        self,
        patience: int = 10,
        min_improvement: float = 0.001,
    ) -> bool:
        """
        True once the last `patience` generations have failed to raise the
        best fitness by `min_improvement`. Never True while the history is
        `patience` generations long or shorter.
        """
        gain = self._gain(patience)
        return gain is not None and gain < min_improvement
