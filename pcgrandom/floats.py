"""IEEE-754 helpers for keeping float samples inside half-open ranges.

Scaling a value from [0, 1) up to [start, stop) can round onto ``stop``.
``clamp_below`` pulls such results back to the adjacent double below the
bound, found by stepping the bound's bit pattern.
"""

from __future__ import annotations

import numpy as np

SMALLEST_SUBNORMAL = float(np.finfo(np.float64).smallest_subnormal)


def float_below(bound: float) -> float:
    """Largest double strictly less than ``bound`` (finite ``bound``)."""
    if bound == 0.0:
        return -SMALLEST_SUBNORMAL
    bits = np.array([bound], dtype=np.float64).view(np.int64)
    # Sign-magnitude layout: moving toward -inf shrinks the bits of a
    # positive value and grows those of a negative one.
    bits += -1 if bound > 0 else 1
    return float(bits.view(np.float64)[0])


def clamp_below(value: float, bound: float) -> float:
    """``value`` if it is below ``bound``, else the double just under it."""
    if value < bound:
        return value
    return float_below(bound)
