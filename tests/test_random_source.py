"""
Tests for RandomSource and SeededRandomSource.
"""

from collections import Counter

import pytest

from marketplace_synth.random_source import RandomSource, SeededRandomSource


class ConstantSource(RandomSource):
    """Always returns the same draw."""

    def __init__(self, value: float) -> None:
        self.value = value

    def next(self) -> float:
        return self.value


class TestSeededRandomSource:
    """Determinism of the seeded source."""

    def test_same_seed_same_sequence(self):
        """Identical seeds give identical draws."""
        a = SeededRandomSource(seed=7)
        b = SeededRandomSource(seed=7)
        assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]

    def test_different_seeds_differ(self):
        """Different seeds give different draws."""
        a = SeededRandomSource(seed=1)
        b = SeededRandomSource(seed=2)
        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_reset(self):
        """reset() restarts the sequence."""
        source = SeededRandomSource(seed=3)
        first = [source.next() for _ in range(5)]
        source.reset()
        assert [source.next() for _ in range(5)] == first

    def test_next_in_unit_interval(self, source):
        """next() stays in [0, 1)."""
        assert all(0.0 <= source.next() < 1.0 for _ in range(1000))


class TestSelection:
    """Tests for derived selection helpers."""

    def test_randint_inclusive(self, source):
        """randint covers both ends of the closed range."""
        seen = {source.randint(1, 3) for _ in range(500)}
        assert seen == {1, 2, 3}

    def test_randint_empty_range(self, source):
        """high < low raises ValueError."""
        with pytest.raises(ValueError):
            source.randint(5, 4)

    def test_pick_empty(self, source):
        """pick() on an empty list raises ValueError."""
        with pytest.raises(ValueError):
            source.pick([])

    def test_pick_uses_next(self):
        """pick() maps the draw onto the candidate index."""
        assert ConstantSource(0.0).pick(["a", "b", "c"]) == "a"
        assert ConstantSource(0.999).pick(["a", "b", "c"]) == "c"

    def test_weighted_pick_length_mismatch(self, source):
        """Candidates and weights must have the same length."""
        with pytest.raises(ValueError):
            source.weighted_pick(["a", "b"], [1])

    def test_weighted_pick_zero_weight_never_chosen(self, source):
        """A zero-weight candidate is never returned."""
        picks = {source.weighted_pick(["a", "b"], [0, 1]) for _ in range(200)}
        assert picks == {"b"}

    def test_weighted_pick_negative_weight(self, source):
        """Negative weights are rejected."""
        with pytest.raises(ValueError):
            source.weighted_pick(["a", "b"], [-1, 2])

    def test_weighted_pick_proportions(self, source):
        """3:1:1 weights give roughly 60% for the first candidate."""
        counts = Counter(
            source.weighted_pick(["Active", "In Progress", "Closed"], [3, 1, 1])
            for _ in range(5000)
        )
        assert 0.55 < counts["Active"] / 5000 < 0.65

    def test_shuffled_is_permutation(self, source):
        """shuffled() returns a new permutation and leaves the input alone."""
        items = list(range(20))
        result = source.shuffled(items)
        assert sorted(result) == items
        assert items == list(range(20))

    def test_sample_prefix_clamped(self, source):
        """sample_prefix never returns more than the list holds."""
        for _ in range(50):
            prefix = source.sample_prefix(["a", "b", "c"], 2, 6)
            assert 2 <= len(prefix) <= 3
            assert prefix == ["a", "b", "c"][: len(prefix)]

    def test_digits_and_letters(self, source):
        """digits() and letters() produce the requested character classes."""
        digits = source.digits(7)
        letters = source.letters(5)
        assert len(digits) == 7 and digits.isdigit()
        assert len(letters) == 5 and letters.isalpha() and letters.isupper()
