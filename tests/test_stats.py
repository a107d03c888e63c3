import random
import statistics

import pytest

from debugfire.stats import (
    chi_squared_is_close,
    poisson_is_close,
    poisson_sample,
)


def uniform(rng, n):
    return lambda: rng.randrange(n)


def test_chi_squared_accepts_fair_experiment():
    rng = random.Random(1)
    assert chi_squared_is_close([0.25] * 4, uniform(rng, 4), num_samples=20_000)


def test_chi_squared_rejects_biased_experiment():
    assert not chi_squared_is_close([0.5, 0.5], lambda: 0, num_samples=1_000)


def test_chi_squared_single_class_passes_without_running():
    calls = []
    assert chi_squared_is_close([1.0], lambda: calls.append(1) or 0)
    assert calls == []


def test_chi_squared_too_many_outcomes():
    with pytest.raises(ValueError):
        chi_squared_is_close([1 / 31] * 31, lambda: 0, num_samples=10)


@pytest.mark.parametrize("bad", [-1, 2])
def test_chi_squared_illegal_outcome(bad):
    with pytest.raises(ValueError):
        chi_squared_is_close([0.5, 0.5], lambda: bad, num_samples=10)


def test_poisson_sample_zero_mean():
    assert poisson_sample(0, random.Random(3)) == 0


def test_poisson_sample_negative_mean():
    with pytest.raises(ValueError):
        poisson_sample(-1, random.Random(3))


def test_poisson_sample_reproducible():
    first_rng = random.Random(8)
    second_rng = random.Random(8)
    first = [poisson_sample(40, first_rng) for _ in range(200)]
    second = [poisson_sample(40, second_rng) for _ in range(200)]
    assert first == second
    assert all(d >= 0 for d in first)
    assert abs(statistics.fmean(first) - 40) < 3


def test_poisson_sample_mean_is_close():
    rng = random.Random(11)
    draws = [poisson_sample(10, rng) for _ in range(4000)]
    assert abs(statistics.fmean(draws) - 10) < 0.5
    assert all(d >= 0 for d in draws)


def test_poisson_sample_large_mean_within_bounds():
    value = poisson_sample(100_000, random.Random(2))
    assert abs(value - 100_000) < 5 * 100_000 ** 0.5


def test_poisson_is_close_accepts_fair_experiment():
    rng = random.Random(4)
    assert poisson_is_close([1 / 3] * 3, uniform(rng, 3), mean_samples=10_000, rng=rng)


def test_poisson_is_close_rejects_biased_experiment():
    assert not poisson_is_close([0.5, 0.5], lambda: 1, mean_samples=2_000, rng=random.Random(5))


def test_poisson_is_close_zero_probability_outcome_seen():
    rng = random.Random(6)
    assert not poisson_is_close([1.0, 0.0], uniform(rng, 2), mean_samples=500, rng=rng)


def test_poisson_is_close_illegal_outcome():
    with pytest.raises(ValueError):
        poisson_is_close([1.0], lambda: 3, mean_samples=100, rng=random.Random(7))