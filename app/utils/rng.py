"""Randomness sources for shuffling and reading composition.

Every component that draws random numbers takes a ``random.Random`` so
tests can swap in a seeded instance; production code shares one
``SystemRandom``.
"""

import hashlib
import random
from typing import List, Optional


_SYSTEM_RANDOM = random.SystemRandom()


def system_random() -> random.Random:
    """Process-wide, OS-backed randomness source."""
    return _SYSTEM_RANDOM


def seeded_random(seed: str, salt: str = "") -> random.Random:
    """Create a deterministic random.Random instance from seed and optional salt.

    Args:
        seed: Base seed string
        salt: Optional salt to modify the seed

    Returns:
        random.Random instance that will produce deterministic sequences
    """
    combined = f"{seed}{salt}"
    hash_obj = hashlib.sha256(combined.encode('utf-8'))
    int_seed = int(hash_obj.hexdigest(), 16)

    # Mask to fit within Python's random seed range
    int_seed = int_seed & ((1 << 31) - 1)

    return random.Random(int_seed)


def sample_indices(total: int, count: int, rng: Optional[random.Random] = None) -> List[int]:
    """Draw ``min(count, total)`` distinct indices from ``range(total)``.

    Uniform sampling without replacement. The order of the returned list
    carries no meaning.

    Args:
        total: Size of the catalog
        count: Number of indices wanted
        rng: Randomness source, defaults to the system one

    Returns:
        List of unique indices in ``[0, total)``
    """
    if total <= 0 or count <= 0:
        return []
    rng = rng or system_random()
    return rng.sample(range(total), min(count, total))
