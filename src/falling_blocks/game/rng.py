from __future__ import annotations

import random

# LCG using GCC's constants
MODULUS = 0x80000000  # 2**31
MULTIPLIER = 1103515245
INCREMENT = 12345

SHAPE_COUNT = 7


def hash_seed(seed: int) -> int:
    """Return the next value of the sequence. Call repeatedly to walk it."""
    return (MULTIPLIER * int(seed) + INCREMENT) % MODULUS


def scale(seed: int) -> int:
    """Scale a hash to a shape index in [0, 6]."""
    return int(seed) % SHAPE_COUNT


def random_seed(rng: random.Random | None = None) -> int:
    """Pick a start seed for an interactive session."""
    rng = rng or random.Random()
    return hash_seed(rng.randrange(1000))
