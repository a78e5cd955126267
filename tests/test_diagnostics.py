import numpy as np
import pytest

from seedonce.diagnostics import (
    chi_square,
    critical_value,
    hamming_distance,
    histogram,
    is_uniform,
)


class TestHistogram:
    def test_counts_each_value(self) -> None:
        counts = histogram([1, 2, 2, 6], 1, 6)
        assert counts.tolist() == [1, 2, 0, 0, 0, 1]

    def test_handles_negative_ranges(self) -> None:
        counts = histogram([-2, -2, 0], -2, 0)
        assert counts.tolist() == [2, 0, 1]

    def test_empty_input_gives_zero_counts(self) -> None:
        assert histogram([], 1, 3).tolist() == [0, 0, 0]

    def test_rejects_out_of_range_values(self) -> None:
        with pytest.raises(ValueError):
            histogram([0, 7], 1, 6)


class TestChiSquare:
    def test_perfectly_uniform_counts(self) -> None:
        assert chi_square([10, 10, 10]) == 0.0

    def test_known_statistic(self) -> None:
        # expected 10 per bin: (10**2 + 10**2) / 10
        assert chi_square(np.array([20, 0])) == pytest.approx(20.0)

    def test_needs_two_categories_and_samples(self) -> None:
        with pytest.raises(ValueError):
            chi_square([5])
        with pytest.raises(ValueError):
            chi_square([0, 0])

    def test_critical_values(self) -> None:
        assert critical_value(5) == 20.515
        # Wilson-Hilferty approximation above the table (exact: 45.315)
        assert critical_value(20) == pytest.approx(45.315, abs=0.5)
        with pytest.raises(ValueError):
            critical_value(0)

    def test_is_uniform(self) -> None:
        assert is_uniform([100] * 6)
        assert not is_uniform([600, 0, 0, 0, 0, 0])


class TestHammingDistance:
    def test_counts_differing_bits(self) -> None:
        assert hamming_distance([0], [0xFFFFFFFF]) == 32
        assert hamming_distance([1, 2], [0, 0]) == 2
        assert hamming_distance([5, 5], [5, 5]) == 0

    def test_rejects_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            hamming_distance([1], [1, 2])
