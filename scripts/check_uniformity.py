#!/usr/bin/env python3
"""Report chi-squared statistics for each sampling operation.

Draws from a fresh thread-local generator (or a fixed seed with --seed)
and prints one line per operation with the statistic, the acceptance
limit and PASS/FAIL.

Usage (from the repository root):
    python scripts/check_uniformity.py
    python scripts/check_uniformity.py --draws 500000 --seed 42
"""

import argparse
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from pcgrandom import PCG32, current  # noqa: E402
from pcgrandom.stats import (  # noqa: E402
    bucket_counts,
    chi_squared,
    chi_squared_limit,
    float_bucket_counts,
    sample,
)


def checks(rng: PCG32, draws: int):
    """Yield (name, counts) for each operation."""
    yield "next_u32 (top 8 bits)", bucket_counts(
        (rng.next_u32() >> 24 for _ in range(draws)), 256
    )
    yield "next_int()", bucket_counts(
        (rng.next_int() >> 27 for _ in range(draws)), 16
    )
    yield "next_int(7)", bucket_counts(
        (rng.next_int(7) for _ in range(draws)), 7
    )
    yield "next_int(5, 10)", bucket_counts(
        (rng.next_int(5, 10) - 5 for _ in range(draws)), 5
    )
    yield "next_int(3 * 2**30)", bucket_counts(
        (rng.next_int(3 * 2**30) >> 30 for _ in range(draws)), 3
    )
    yield "next_bool", bucket_counts(
        (int(rng.next_bool()) for _ in range(draws)), 2
    )
    yield "next_float()", float_bucket_counts(
        sample(rng.next_float, draws), 0.0, 1.0, 32
    )
    yield "next_float(-2.0, 6.0)", float_bucket_counts(
        sample(lambda: rng.next_float(-2.0, 6.0), draws), -2.0, 6.0, 32
    )


def main():
    parser = argparse.ArgumentParser(
        description="Chi-squared uniformity report for pcgrandom"
    )
    parser.add_argument(
        "-d",
        "--draws",
        type=int,
        default=100_000,
        help="Draws per operation (default: 100000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed a fixed generator instead of the thread-local one",
    )
    parser.add_argument(
        "-z",
        type=float,
        default=4.0,
        help="Acceptance limit in standard deviations (default: 4.0)",
    )
    args = parser.parse_args()

    rng = PCG32.from_seed(args.seed) if args.seed is not None else current()
    print(f"Generator: {rng!r}")
    print()

    failures = 0
    for name, counts in checks(rng, args.draws):
        stat = chi_squared(counts)
        limit = chi_squared_limit(len(counts) - 1, args.z)
        ok = stat <= limit
        failures += not ok
        print(
            f"{name:<24} chi2={stat:10.2f}  limit={limit:10.2f}  "
            f"{'PASS' if ok else 'FAIL'}"
        )

    if failures:
        print(f"\n{failures} check(s) failed", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
