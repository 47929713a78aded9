#!/usr/bin/env python3
"""Benchmark PCG32 draw throughput.

Usage (from the repository root):
    python scripts/bench_prng.py              # default: 3 iterations, 200000 draws
    python scripts/bench_prng.py -n 5         # 5 iterations
    python scripts/bench_prng.py -d 1000000   # 1M draws per operation
"""

import argparse
import statistics
import sys
import time
from pathlib import Path

# Add repository root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from pcgrandom import PCG32, current  # noqa: E402

OPERATIONS = {
    "next_u32": lambda rng: rng.next_u32(),
    "next_int()": lambda rng: rng.next_int(),
    "next_int(6)": lambda rng: rng.next_int(6),
    "next_int(-5, 5)": lambda rng: rng.next_int(-5, 5),
    "next_bool": lambda rng: rng.next_bool(),
    "next_float()": lambda rng: rng.next_float(),
    "next_float(1.5, 2.5)": lambda rng: rng.next_float(1.5, 2.5),
    "current().next_u32": lambda rng: current().next_u32(),
}


def time_operation(op, rng: PCG32, draws: int) -> float:
    """Return elapsed milliseconds for ``draws`` calls of ``op``."""
    start = time.perf_counter()
    for _ in range(draws):
        op(rng)
    return (time.perf_counter() - start) * 1000


def main():
    parser = argparse.ArgumentParser(description="Benchmark PCG32 draws")
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=3,
        help="Number of iterations (default: 3)",
    )
    parser.add_argument(
        "-d",
        "--draws",
        type=int,
        default=200_000,
        help="Draws per operation per iteration (default: 200000)",
    )
    args = parser.parse_args()

    rng = PCG32.from_seed(42, 54)
    print(f"Benchmark: {args.draws} draws, {args.iterations} iterations")
    print()

    # Warmup
    print("Warmup...", end=" ", flush=True)
    for op in OPERATIONS.values():
        time_operation(op, rng, 1000)
    print("done")
    print()

    for name, op in OPERATIONS.items():
        times_ms = [
            time_operation(op, rng, args.draws) for _ in range(args.iterations)
        ]
        median = statistics.median(times_ms)
        rate = args.draws / (median / 1000) if median > 0 else float("inf")
        line = f"{name:<22} median {median:8.1f} ms  {rate / 1e6:6.2f} M/s"
        if len(times_ms) > 1:
            line += f"  stdev {statistics.stdev(times_ms):.1f} ms"
        print(line)


if __name__ == "__main__":
    main()
