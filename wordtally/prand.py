"""Pseudorandom index selection."""

import random


def prand(maximum: int) -> int:
    """Return a pseudorandom integer in ``[0, maximum)``."""
    if maximum <= 0:
        raise ValueError("maximum must be positive")
    return random.randrange(maximum)