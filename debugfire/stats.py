"""Statistical checks that a random experiment follows a distribution."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence

# Chi-squared thresholds for p = 1e-6, indexed by degrees of freedom.
_CHI_SQUARED_THRESHOLDS = (
    -1,
    23.9281, 27.6294, 31.2164, 33.3788, 35.8882, 38.2584, 40.522, 42.701,
    44.811, 46.8632, 48.8658, 50.8254, 52.7472, 54.6354, 56.4936, 58.3244,
    60.1308, 61.9144, 63.6772, 65.4208, 67.1466, 68.8558, 70.5496, 72.229,
    73.8947, 75.5474, 77.1882, 78.8176, 80.436, 82.0442,
)
MAX_OUTCOMES = 30

_POISSON_CHUNK = 500
_default_rng = random.Random(137)


def _histogram(experiment: Callable[[], int], outcomes: int, samples: int) -> list[int]:
    frequencies = [0] * outcomes
    for _ in range(samples):
        result = experiment()
        if not 0 <= result < outcomes:
            raise ValueError("Illegal experiment outcome.")
        frequencies[result] += 1
    return frequencies


def chi_squared_is_close(
    probabilities: Sequence[float],
    experiment: Callable[[], int],
    num_samples: int = 100_000,
) -> bool:
    """Whether the experiment's outcomes fit the given probabilities."""
    if len(probabilities) <= 1:
        return True
    if len(probabilities) > MAX_OUTCOMES:
        raise ValueError("Number of outcomes too large for chi squared testing.")

    frequencies = _histogram(experiment, len(probabilities), num_samples)
    chi_squared = 0.0
    for frequency, probability in zip(frequencies, probabilities):
        expected = probability * num_samples
        chi_squared += (frequency - expected) ** 2 / expected
    return chi_squared < _CHI_SQUARED_THRESHOLDS[len(probabilities) - 1]


def _knuth_poisson(mean: float, rng: random.Random) -> int:
    limit = math.exp(-mean)
    count = 0
    product = rng.random()
    while product > limit:
        count += 1
        product *= rng.random()
    return count


def poisson_sample(mean: float, rng: random.Random | None = None) -> int:
    """Draw a Poisson-distributed integer with the given mean."""
    if mean < 0:
        raise ValueError("Poisson mean must be non-negative.")
    rng = _default_rng if rng is None else rng
    total = 0
    remaining = float(mean)
    while remaining > 0:
        chunk = min(remaining, _POISSON_CHUNK)
        total += _knuth_poisson(chunk, rng)
        remaining -= chunk
    return total


def poisson_is_close(
    probabilities: Sequence[float],
    experiment: Callable[[], int],
    mean_samples: int = 100_000,
    stdev_max: float = 5.0,
    rng: random.Random | None = None,
) -> bool:
    """Whether each outcome count lies within stdev_max deviations of its mean."""
    samples = poisson_sample(mean_samples, rng)
    frequencies = _histogram(experiment, len(probabilities), samples)

    for frequency, probability in zip(frequencies, probabilities):
        lam = mean_samples * probability
        if lam == 0:
            if frequency != 0:
                return False
            continue
        if abs(lam - frequency) / math.sqrt(lam) > stdev_max:
            return False
    return True