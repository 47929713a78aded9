import numpy as np
import pytest

from pcgrandom.prng import PCG32
from pcgrandom.stats import (
    bucket_counts,
    chi_squared,
    chi_squared_limit,
    float_bucket_counts,
    looks_uniform,
    sample,
)


def test_chi_squared_perfect_counts():
    assert chi_squared(np.array([10, 10, 10, 10])) == 0.0


def test_chi_squared_known_value():
    # expected 25 each: (15^2 + 5^2 + 5^2 + 5^2) / 25 = 12
    assert chi_squared(np.array([40, 20, 20, 20])) == pytest.approx(12.0)


def test_limit_grows_with_dof_and_z():
    assert chi_squared_limit(4) < chi_squared_limit(9)
    assert chi_squared_limit(9, z=2.0) < chi_squared_limit(9, z=4.0)
    # Median of chi-squared is close to dof
    assert chi_squared_limit(100, z=0.0) == pytest.approx(99.3, abs=0.1)


def test_looks_uniform_rejects_skew():
    assert not looks_uniform(np.array([1000, 0, 0, 0]))
    assert looks_uniform(np.array([250, 251, 249, 250]))


def test_bucket_counts():
    counts = bucket_counts([0, 1, 1, 3], 5)
    assert counts.tolist() == [1, 2, 0, 1, 0]


def test_bucket_counts_out_of_range():
    with pytest.raises(ValueError):
        bucket_counts([0, 5], 5)


def test_sample_and_float_buckets():
    rng = PCG32.from_seed(7)
    values = sample(rng.next_float, 10000)
    assert values.shape == (10000,)
    counts = float_bucket_counts(values, 0.0, 1.0, 16)
    assert counts.sum() == 10000
    assert looks_uniform(counts)
