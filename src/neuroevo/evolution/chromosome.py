"""
Chromosome: the flat gene vector shared by the genetic algorithm and brains.

Genes are float32 and the length is fixed for a whole evolutionary run (it is
decided by the network topology). Chromosomes are built fresh each generation
and only modified in place by a mutation method, before the child is handed
to an Individual.
"""

from typing import Iterable, Iterator, List

import numpy as np

from ..errors import GeneIndexError

# Tolerances for approximate equality between chromosomes
RELATIVE_TOLERANCE = 1e-5
ABSOLUTE_TOLERANCE = 1e-6


class Chromosome:
    """
    Fixed-length sequence of float32 genes.

    Attributes:
        genes: 1-D float32 ndarray. Writing through it (or through
            item assignment) mutates the chromosome in place.
    """

    __slots__ = ('genes',)

    def __init__(self, genes: Iterable[float]):
        if not isinstance(genes, np.ndarray):
            genes = list(genes)
        self.genes = np.array(genes, dtype=np.float32).reshape(-1)

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> 'Chromosome':
        """Build a chromosome from any iterable of floats."""
        return cls(values)

    def __len__(self) -> int:
        return len(self.genes)

    def __getitem__(self, index: int) -> float:
        return float(self.genes[self._check_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self.genes[self._check_index(index)] = value

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self.genes):
            raise GeneIndexError(
                f"Gene index {index} out of range for chromosome of length {len(self.genes)}"
            )
        return index

    def __iter__(self) -> Iterator[float]:
        return (float(gene) for gene in self.genes)

    def iter_mut(self) -> np.ndarray:
        """Writable view over the genes, in order."""
        return self.genes

    def into_sequence(self) -> List[float]:
        """Genes as a plain list of floats, in order."""
        return self.genes.tolist()

    def copy(self) -> 'Chromosome':
        return Chromosome(self.genes.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        if len(self) != len(other):
            return False
        return bool(np.allclose(
            self.genes, other.genes,
            rtol=RELATIVE_TOLERANCE, atol=ABSOLUTE_TOLERANCE,
        ))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Chromosome({self.genes.tolist()})"
