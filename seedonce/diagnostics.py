"""Statistical checks for generator output.

These are quality checks, not proofs: a good generator fails a 0.999-level
chi-square test about once in a thousand runs with a random seed. The test
suite uses fixed seeds so results are stable.
"""

from collections.abc import Iterable, Sequence

import numpy as np

# Upper 0.999 quantiles of the chi-square distribution, by degrees of freedom.
CHI_SQUARE_CRITICAL_999 = {
    1: 10.828,
    2: 13.816,
    3: 16.266,
    4: 18.467,
    5: 20.515,
    6: 22.458,
    7: 24.322,
    8: 26.124,
    9: 27.877,
    10: 29.588,
}

# Standard normal quantile for 0.999, used past the end of the table.
_Z_999 = 3.090232


def histogram(values: Iterable[int], low: int, high: int) -> np.ndarray:
    """Count occurrences of each integer in ``[low, high]``.

    Raises:
        ValueError: If any value falls outside the range.
    """
    samples = np.fromiter(values, dtype=np.int64)
    if samples.size and (samples.min() < low or samples.max() > high):
        raise ValueError(f"Sample outside [{low}, {high}]")
    return np.bincount(samples - low, minlength=high - low + 1)


def chi_square(counts: Sequence[int] | np.ndarray) -> float:
    """Pearson's chi-square statistic of ``counts`` against a uniform expectation."""
    observed = np.asarray(counts, dtype=np.float64)
    if observed.size < 2:
        raise ValueError("Need at least two categories")
    expected = observed.sum() / observed.size
    if expected == 0:
        raise ValueError("No samples")
    return float(np.sum((observed - expected) ** 2) / expected)


def critical_value(degrees_of_freedom: int) -> float:
    """Upper 0.999 chi-square quantile.

    Exact table values up to 10 degrees of freedom, Wilson-Hilferty
    approximation above that.
    """
    if degrees_of_freedom < 1:
        raise ValueError("degrees_of_freedom must be at least 1")
    if degrees_of_freedom in CHI_SQUARE_CRITICAL_999:
        return CHI_SQUARE_CRITICAL_999[degrees_of_freedom]
    k = float(degrees_of_freedom)
    h = 2.0 / (9.0 * k)
    return float(k * (1.0 - h + _Z_999 * np.sqrt(h)) ** 3)


def is_uniform(counts: Sequence[int] | np.ndarray) -> bool:
    """Return True if ``counts`` passes a chi-square uniformity test at 0.999."""
    return chi_square(counts) < critical_value(len(counts) - 1)


def hamming_distance(words_a: Sequence[int], words_b: Sequence[int]) -> int:
    """Number of differing bits between two equal-length 32-bit word sequences."""
    if len(words_a) != len(words_b):
        raise ValueError("Word sequences must have the same length")
    a = np.asarray(words_a, dtype=np.uint32)
    b = np.asarray(words_b, dtype=np.uint32)
    return int(np.unpackbits((a ^ b).view(np.uint8)).sum())
