"""Random source construction for callers."""

from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create a random source for one evolutionary run.

    The package never creates or seeds random state on its own: the returned
    generator is owned by the caller and passed into every operation that
    needs randomness. Two generators made from the same seed replay the same
    sequence, so a seeded run is fully reproducible.

    Args:
        seed: Seed for reproducibility (None draws fresh OS entropy)

    Returns:
        A numpy Generator
    """
    return np.random.default_rng(seed)
