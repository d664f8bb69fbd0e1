"""
Genetic algorithm over fixed-length float chromosomes.

Key components:
- Chromosome: flat float32 gene vector
- Individual: contract for domain objects taking part in evolution
- Operators: selection, crossover and mutation strategies
- GeneticAlgorithm: one generation per evolve() call
- Statistics / EvolutionHistory: fitness summaries

Example usage:
    from neuroevo.evolution import (
        GeneticAlgorithm, RouletteWheelSelection, UniformCrossover,
        GaussianMutation, make_rng,
    )

    ga = GeneticAlgorithm(
        RouletteWheelSelection(),
        UniformCrossover(),
        GaussianMutation(chance=0.01, coeff=0.3),
    )
    rng = make_rng(42)
    population, stats = ga.evolve(rng, population)
    print(f"Average fitness: {stats.avg_fitness:.3f}")
"""

from .chromosome import Chromosome
from .individual import Individual
from .operators import (
    SelectionMethod,
    RouletteWheelSelection,
    CrossoverMethod,
    UniformCrossover,
    MutationMethod,
    GaussianMutation,
)
from .statistics import Statistics, EvolutionHistory
from .engine import GeneticAlgorithm
from .rng import make_rng

__all__ = [
    # Core classes
    'Chromosome',
    'Individual',
    'GeneticAlgorithm',
    'Statistics',
    'EvolutionHistory',
    # Operators
    'SelectionMethod',
    'RouletteWheelSelection',
    'CrossoverMethod',
    'UniformCrossover',
    'MutationMethod',
    'GaussianMutation',
    # Random source
    'make_rng',
]
