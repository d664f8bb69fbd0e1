#!/usr/bin/env python3
"""
Quick Start - Evolve brains that react to a fixed sensor reading.

Each creature's fitness is the sum of its brain's outputs for one reading,
so evolution should push the outputs up generation by generation.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

import numpy as np

from neuroevo import Brain, EvolutionConfig, Individual

CELLS = 5
READINGS = np.linspace(0.1, 0.9, CELLS)


class Creature(Individual):
    def __init__(self, brain, fitness=0.0):
        self.brain = brain
        self._fitness = fitness

    @property
    def fitness(self):
        return self._fitness

    @property
    def chromosome(self):
        return self.brain.as_chromosome()

    @classmethod
    def create(cls, chromosome):
        return cls(Brain.from_chromosome(chromosome, CELLS))


def evaluate(creatures):
    return [
        Creature(c.brain, fitness=float(np.sum(c.brain.propagate(READINGS))) + 1e-3)
        for c in creatures
    ]


print("Neuroevo - Quick Start")
print("=" * 40)

config = EvolutionConfig(topology=Brain.topology(CELLS), population_size=30, seed=42)
rng = config.make_rng()
ga = config.build_algorithm()

population = [Creature(Brain.random(rng, CELLS)) for _ in range(config.population_size)]
print(f"\nPopulation: {config.population_size} brains, {config.chromosome_length} genes each")

population, history = ga.run(rng, population, evaluate, generations=20)

for generation, stats in enumerate(history.generations, start=1):
    print(f"Gen {generation:2d}: {stats}")

print(f"\nBest fitness seen: {history.best_fitness:.3f}")
