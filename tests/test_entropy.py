"""
Tests for Secure Index Sampling
===============================
Tests rejection sampling bounds, uniformity, and the Fisher-Yates shuffle
in passkit/generators/entropy.py.
"""

import pytest
import sys
from collections import Counter
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passkit.errors import InvalidBound
from passkit.generators.entropy import (
    SecureIndexSampler,
    SOURCE_RANGE,
    secure_index,
)


class ScriptedSource:
    """Returns pre-set 32-bit values in order and counts draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.values.pop(0)


class TestBounds:
    """Tests for invalid and extreme bounds."""

    @pytest.mark.parametrize("bound", [0, -1, -100])
    def test_non_positive_bound_raises(self, bound):
        """Bounds <= 0 are rejected."""
        with pytest.raises(InvalidBound):
            SecureIndexSampler().next_index(bound)

    def test_invalid_bound_is_value_error(self):
        """InvalidBound can be caught as ValueError."""
        with pytest.raises(ValueError):
            SecureIndexSampler().next_index(0)

    def test_bound_above_source_range_raises(self):
        """Bounds wider than a 32-bit draw are rejected."""
        with pytest.raises(InvalidBound):
            SecureIndexSampler().next_index(SOURCE_RANGE + 1)

    def test_bound_one_is_always_zero(self):
        """A single-value range always yields 0."""
        sampler = SecureIndexSampler()
        assert all(sampler.next_index(1) == 0 for _ in range(50))

    def test_full_range_bound_returns_draw(self):
        """With bound 2^32 every draw is accepted as-is."""
        sampler = SecureIndexSampler(ScriptedSource([SOURCE_RANGE - 1]))
        assert sampler.next_index(SOURCE_RANGE) == SOURCE_RANGE - 1

    def test_module_helper(self):
        """secure_index() uses the shared sampler."""
        assert 0 <= secure_index(5) < 5


class TestRejection:
    """Tests that biased draws are discarded."""

    def test_rejects_draw_at_limit(self):
        """For bound 3 the top value 2^32-1 lies past the limit."""
        source = ScriptedSource([SOURCE_RANGE - 1, 7])
        sampler = SecureIndexSampler(source)

        assert sampler.next_index(3) == 7 % 3
        assert source.calls == 2

    def test_rejects_large_draws_for_large_bound(self):
        """For bound 2^31 + 1 only draws below the bound are accepted."""
        bound = (1 << 31) + 1
        source = ScriptedSource([3_000_000_000, 4_000_000_000, 5])
        sampler = SecureIndexSampler(source)

        assert sampler.next_index(bound) == 5
        assert source.calls == 3

    def test_accepts_draw_below_limit(self):
        """Accepted draws are reduced modulo the bound."""
        source = ScriptedSource([1234])
        assert SecureIndexSampler(source).next_index(10) == 4
        assert source.calls == 1

    def test_source_out_of_range_raises(self):
        """A misbehaving source is reported, not silently reduced."""
        sampler = SecureIndexSampler(ScriptedSource([SOURCE_RANGE]))
        with pytest.raises(ValueError):
            sampler.next_index(10)


class TestDistribution:
    """Statistical tests over the real secure source."""

    @pytest.mark.parametrize("bound", [1, 2, 3, 7, 10, 17, 100, 1000, 65537])
    def test_values_stay_in_range(self, bound):
        """No value >= bound is ever produced."""
        sampler = SecureIndexSampler()
        for _ in range(2000):
            value = sampler.next_index(bound)
            assert 0 <= value < bound

    @pytest.mark.parametrize("bound", [2, 3, 6, 10, 13])
    def test_covers_full_range(self, bound):
        """Every value in [0, bound) shows up over many trials."""
        sampler = SecureIndexSampler()
        seen = {sampler.next_index(bound) for _ in range(300 * bound)}
        assert seen == set(range(bound))

    def test_chi_square_uniformity(self):
        """Digit draws pass a chi-square test (df=9)."""
        sampler = SecureIndexSampler()
        trials = 20000
        counts = Counter(sampler.next_index(10) for _ in range(trials))

        expected = trials / 10
        chi2 = sum((counts[i] - expected) ** 2 / expected for i in range(10))
        # Critical value for df=9 at p ~= 0.00002
        assert chi2 < 37.0


class TestShuffleAndChoice:
    """Tests for shuffle(), choice() and choices()."""

    def test_shuffle_is_permutation(self):
        """Shuffling keeps every element exactly once."""
        items = list(range(20))
        SecureIndexSampler().shuffle(items)
        assert sorted(items) == list(range(20))

    def test_shuffle_is_fisher_yates(self):
        """Swaps run from the last index down with bound i + 1."""
        source = ScriptedSource([0, 0])
        items = ["a", "b", "c"]
        SecureIndexSampler(source).shuffle(items)

        # i=2 swaps with 0 -> c b a; i=1 swaps with 0 -> b c a
        assert items == ["b", "c", "a"]
        assert source.calls == 2

    def test_shuffle_short_lists(self):
        """Empty and single-item lists draw nothing."""
        source = ScriptedSource([])
        sampler = SecureIndexSampler(source)
        empty, single = [], ["x"]
        sampler.shuffle(empty)
        sampler.shuffle(single)
        assert empty == [] and single == ["x"]
        assert source.calls == 0

    def test_choice_uses_index(self):
        """choice() picks the element at the sampled index."""
        sampler = SecureIndexSampler(ScriptedSource([2]))
        assert sampler.choice(["a", "b", "c"]) == "c"

    def test_choice_empty_raises(self):
        """Choosing from nothing is an invalid bound."""
        with pytest.raises(InvalidBound):
            SecureIndexSampler().choice([])

    def test_choices_with_replacement(self):
        """choices() may repeat elements."""
        sampler = SecureIndexSampler(ScriptedSource([1, 1, 1]))
        assert sampler.choices(["a", "b"], 3) == ["b", "b", "b"]

    def test_choices_zero(self):
        """Zero picks return an empty list."""
        assert SecureIndexSampler().choices(["a"], 0) == []
