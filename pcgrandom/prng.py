"""PCG32 pseudorandom number generator.

Implements the PCG-XSH-RR variant (32-bit output, 64-bit state) and the
sampling operations layered on it: unbiased bounded integers, floats in a
half-open range, and fair booleans.

Reference: https://www.pcg-random.org/

A generator is not safe to share between threads. Use
``pcgrandom.current()`` to get the calling thread's own instance, or
construct one directly and pass it around.
"""

from __future__ import annotations

import math
import operator

from .floats import clamp_below


class OutOfRangeError(ValueError):
    """A bound argument violates the operation's preconditions."""


class PCG32:
    _MASK32 = 0xFFFFFFFF
    _MASK64 = 0xFFFFFFFFFFFFFFFF
    _MUL = 6364136223846793005

    # Largest span the 32-bit rejection sampler can cover.
    _SPAN_LIMIT = 1 << 32
    # Next() covers the non-negative signed 32-bit range.
    _INT_LIMIT = 1 << 31
    _HALFWAY = 1 << 31
    _FLOAT_SCALE = 2.0**-24

    def __init__(self, state: int, increment: int) -> None:
        self._state: int = state & self._MASK64
        self._inc: int = increment & self._MASK64

    @classmethod
    def from_bytes(cls, data: bytes) -> PCG32:
        """Build a generator from 16 bytes of seed material.

        The first eight bytes (little-endian) become the state, the last
        eight the increment.
        """
        if len(data) != 16:
            raise ValueError(
                f"Expected 16 bytes of seed material, got {len(data)}"
            )
        return cls(
            int.from_bytes(data[:8], "little"),
            int.from_bytes(data[8:], "little"),
        )

    @classmethod
    def from_seed(cls, seed: int, seq: int = 0) -> PCG32:
        """Seed the way the C reference ``pcg32_srandom_r`` does."""
        rng = cls(0, (seq << 1) | 1)
        rng._advance()
        rng._state = (rng._state + seed) & cls._MASK64
        rng._advance()
        return rng

    @property
    def state(self) -> int:
        return self._state

    @property
    def increment(self) -> int:
        return self._inc

    def __repr__(self) -> str:
        return f"PCG32(state={self._state:#018x}, increment={self._inc:#018x})"

    def _advance(self) -> None:
        self._state = (self._state * self._MUL + self._inc) & self._MASK64

    def next_u32(self) -> int:
        """Raw 32-bit output; advances the state."""
        old = self._state
        self._advance()
        xorshifted = (((old >> 18) ^ old) >> 27) & self._MASK32
        rot = old >> 59
        return (
            (xorshifted >> rot) | (xorshifted << ((-rot) & 31))
        ) & self._MASK32

    def _next_below(self, bound: int) -> int:
        """Uniform integer in [0, bound) for 1 <= bound <= 2**32.

        Draws below ``threshold`` (= 2**32 mod bound) are rejected so every
        residue is hit by the same number of raw outputs.
        """
        threshold = (self._SPAN_LIMIT - bound) % bound
        while True:
            r = self.next_u32()
            if r >= threshold:
                return r % bound

    def next_int(self, start: int | None = None, stop: int | None = None) -> int:
        """Uniform integer in a half-open range.

        ``next_int()`` covers [0, 2**31), ``next_int(stop)`` covers
        [0, stop) and ``next_int(start, stop)`` covers [start, stop).
        A lone bound passed by either keyword is the exclusive stop.
        Bounds must be integers; anything else raises ``TypeError``.
        """
        if start is None and stop is None:
            return self._next_below(self._INT_LIMIT)
        if start is None or stop is None:
            bound = operator.index(stop if start is None else start)
            if bound <= 0:
                raise OutOfRangeError(f"Expected {bound} to be positive")
            if bound > self._SPAN_LIMIT:
                raise OutOfRangeError(
                    f"Expected {bound} to be at most 2**32"
                )
            return self._next_below(bound)
        start = operator.index(start)
        stop = operator.index(stop)
        if stop <= start:
            raise OutOfRangeError(
                f"start ({start}) must be less than stop ({stop}). "
                "Arguments reversed?"
            )
        span = stop - start
        if span > self._SPAN_LIMIT:
            raise OutOfRangeError(
                f"Range [{start}, {stop}) spans more than 2**32 values"
            )
        return self._next_below(span) + start

    def next_bool(self) -> bool:
        return self.next_u32() < self._HALFWAY

    def next_float(
        self, start: float | None = None, stop: float | None = None
    ) -> float:
        """Uniform float in a half-open range.

        ``next_float()`` returns one of 2**24 evenly spaced values in
        [0, 1). ``next_float(stop)`` covers [0, stop) and
        ``next_float(start, stop)`` covers [start, stop). A lone bound
        passed by either keyword is the exclusive stop. Bounded results
        that round up onto ``stop`` are pulled back below it.
        """
        if start is None and stop is None:
            return (self.next_u32() >> 8) * self._FLOAT_SCALE
        if start is None or stop is None:
            bound = _finite_bound(stop if start is None else start)
            if bound <= 0:
                raise OutOfRangeError(f"Expected {bound} to be positive.")
            return clamp_below(self.next_float() * bound, bound)
        start = _finite_bound(start)
        stop = _finite_bound(stop)
        if start >= stop:
            raise OutOfRangeError(
                f"start ({start}) must be less than stop ({stop}). "
                "Arguments reversed?"
            )
        width = stop - start
        if not math.isfinite(width):
            raise OutOfRangeError(
                f"Range [{start}, {stop}) is too wide to sample"
            )
        return clamp_below(self.next_float() * width + start, stop)


def _finite_bound(value: float) -> float:
    """``value`` as a finite float, else ``OutOfRangeError``."""
    try:
        bound = float(value)
    except OverflowError as e:
        raise OutOfRangeError("Bound is too large for a float") from e
    if not math.isfinite(bound):
        raise OutOfRangeError(f"Expected {value} to be finite.")
    return bound
