#!/usr/bin/env python3
"""
Random Sources
==============
Randomness used for sampling next characters.

Generation only needs an object with `choice(seq)`, so callers can inject
any source: a seeded `random.Random` for reproducible output, or the
system-entropy backed `TrueRandom` used by default.
"""

import random
import secrets
from typing import Any, Optional, Sequence, Union


# =============================================================================
# True Random Number Generator
# =============================================================================

class TrueRandom:
    """
    Random number generator backed by the operating system entropy pool.

    Wraps `secrets.SystemRandom`, which reads from os.urandom() and cannot
    be seeded; use `get_rng(seed)` when output must be reproducible.
    """

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def choice(self, seq: Sequence) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)


RandomSource = Union[random.Random, TrueRandom]


def get_rng(seed: Optional[int] = None) -> RandomSource:
    """
    Get a random source.

    Args:
        seed: Seed for a reproducible `random.Random`; None for true randomness
    """
    if seed is None:
        return TrueRandom()
    return random.Random(seed)
