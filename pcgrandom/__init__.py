"""PCG32 random numbers with one generator per thread."""

from .prng import PCG32, OutOfRangeError
from .thread_local import ThreadLocalRandom, current

__all__ = [
    "OutOfRangeError",
    "PCG32",
    "ThreadLocalRandom",
    "current",
]
