"""
Random number generation utilities.

Every generation run owns one NumPy generator, created here from a 64-bit
seed and passed explicitly to whatever draws from it. No module keeps a
global generator, so a seed always reproduces the same puzzle.
"""

import time
from typing import Optional

import numpy as np

_SEED_MASK = 0xFFFFFFFFFFFFFFFF


def resolve_seed(fixed_seed: Optional[int] = None) -> int:
    """
    Pick the seed for a new session.

    Args:
        fixed_seed: Seed requested by configuration; None or 0 means unset

    Returns:
        The fixed seed, or the current Unix time
    """
    if fixed_seed:
        return fixed_seed
    return int(time.time())


def create_rng(seed: int) -> np.random.Generator:
    """
    Create the generator for one session.

    Negative seeds are accepted and reduced modulo 2**64.
    """
    return np.random.default_rng(seed & _SEED_MASK)
