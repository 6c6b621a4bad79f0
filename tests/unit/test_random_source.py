"""
Unit tests for the xorshift32 random stream.
"""

import pytest

from mazepath.core import MASK32, XorShiftRandom
from mazepath.utils.exceptions import DegenerateSeedError, InvalidConfigurationError


class TestXorShiftRandom:
    """Test the recurrence, seeding and determinism."""

    def test_known_first_value(self):
        """First draw from seed 12345 follows s^=s<<13; s^=s>>17; s^=s<<5."""
        rng = XorShiftRandom(12345)

        assert rng.next() == 3336926330
        assert rng.state == 3336926330

    def test_matches_reference_recurrence(self):
        """Stream matches a direct transcription of the recurrence."""
        rng = XorShiftRandom(987654321)
        s = 987654321
        for _ in range(100):
            s ^= (s << 13) & MASK32
            s ^= s >> 17
            s ^= (s << 5) & MASK32
            assert rng.next() == s

    def test_same_seed_same_stream(self):
        """Two generators with the same seed agree draw for draw."""
        a = XorShiftRandom(42)
        b = XorShiftRandom(42)

        assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_different_seeds_differ(self):
        a = XorShiftRandom(1)
        b = XorShiftRandom(2)

        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_values_are_nonzero_32_bit(self):
        rng = XorShiftRandom(7)
        for _ in range(1000):
            value = rng.next()
            assert 0 < value <= MASK32

    def test_reseed_restarts_stream(self):
        rng = XorShiftRandom(99)
        first = [rng.next() for _ in range(10)]

        rng.seed(99)

        assert [rng.next() for _ in range(10)] == first

    def test_seed_is_masked_to_32_bits(self):
        """Only the low 32 bits of the seed matter."""
        a = XorShiftRandom(5)
        b = XorShiftRandom(5 + (1 << 32))

        assert a.state == b.state
        assert a.next() == b.next()

    def test_time_derived_seed(self):
        """Omitting the seed yields a usable non-zero state."""
        rng = XorShiftRandom()

        assert 0 < rng.state <= MASK32
        assert rng.next() != 0

    @pytest.mark.parametrize("seed", [0, 1 << 32, 7 << 32])
    def test_degenerate_seed_rejected(self, seed):
        """Seeds that mask to zero would freeze the stream."""
        with pytest.raises(DegenerateSeedError):
            XorShiftRandom(seed)

    def test_degenerate_reseed_keeps_state(self):
        rng = XorShiftRandom(3)
        state = rng.state

        with pytest.raises(DegenerateSeedError):
            rng.seed(0)

        assert rng.state == state

    def test_degenerate_seed_is_value_error(self):
        with pytest.raises(ValueError):
            XorShiftRandom(0)


class TestRandrange:
    """Test bounded draws."""

    def test_randrange_bounds(self):
        rng = XorShiftRandom(11)
        draws = [rng.randrange(4) for _ in range(500)]

        assert set(draws) == {0, 1, 2, 3}

    def test_randrange_one(self):
        rng = XorShiftRandom(11)

        assert all(rng.randrange(1) == 0 for _ in range(20))

    def test_randrange_matches_modulo(self):
        a = XorShiftRandom(13)
        b = XorShiftRandom(13)

        assert [a.randrange(7) for _ in range(20)] == [b.next() % 7 for _ in range(20)]

    @pytest.mark.parametrize("n", [0, -3])
    def test_randrange_invalid(self, n):
        rng = XorShiftRandom(11)

        with pytest.raises(InvalidConfigurationError):
            rng.randrange(n)
