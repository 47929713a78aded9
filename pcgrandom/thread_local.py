"""Per-thread PCG32 generators.

Each thread that asks for a generator gets its own, seeded from fresh
entropy on first access and reused for the rest of the thread's life.
Instances are never handed to another thread, so no locking is needed.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Callable

from .prng import PCG32

logger = logging.getLogger(__name__)

SEED_BYTES = 16

SeedSource = Callable[[], bytes]


def urandom_seed() -> bytes:
    return os.urandom(SEED_BYTES)


class ThreadLocalRandom:
    """Hands out one lazily seeded ``PCG32`` per calling thread.

    ``seed_source`` is called once per thread and must return 16 bytes;
    it defaults to ``os.urandom``. Tests inject a deterministic source.
    """

    def __init__(self, seed_source: SeedSource | None = None) -> None:
        self._seed_source: SeedSource = seed_source or urandom_seed
        self._local = threading.local()

    def current(self) -> PCG32:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            rng = PCG32.from_bytes(self._seed_source())
            self._local.rng = rng
            logger.debug(
                "Seeded PCG32 for thread %s", threading.current_thread().name
            )
        return rng


_default = ThreadLocalRandom()


def current() -> PCG32:
    """The calling thread's generator, created on first use."""
    return _default.current()
