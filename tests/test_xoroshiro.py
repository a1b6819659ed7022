"""Tests for the xoroshiro128+ generator."""

from __future__ import annotations

import pytest
from hypothesis import given

from fortuna import InvalidArgumentError, Xoroshiro128Plus
from fortuna.xoroshiro import _splitmix64
from tests.strategies import seeds

MASK64 = (1 << 64) - 1


class TestSeeding:
    """Tests for seeding and reproducibility."""

    @given(seeds)
    def test_same_seed_same_stream(self, seed: int) -> None:
        a = Xoroshiro128Plus(seed)
        b = Xoroshiro128Plus(seed)
        assert [a.next_u64() for _ in range(5)] == [b.next_u64() for _ in range(5)]

    def test_different_seeds_differ(self) -> None:
        a = Xoroshiro128Plus(1)
        b = Xoroshiro128Plus(2)
        assert [a.next_u64() for _ in range(5)] != [b.next_u64() for _ in range(5)]

    def test_unseeded_instances_differ(self) -> None:
        assert Xoroshiro128Plus().state != Xoroshiro128Plus().state

    def test_negative_seed_is_masked(self) -> None:
        assert Xoroshiro128Plus(-1).state == Xoroshiro128Plus(MASK64).state

    def test_seed_is_recorded(self) -> None:
        assert Xoroshiro128Plus(77).seed == 77

    @pytest.mark.parametrize('seed', ['12', 1.5, True])
    def test_rejects_non_int_seed(self, seed: object) -> None:
        with pytest.raises(InvalidArgumentError):
            Xoroshiro128Plus(seed)  # type: ignore[arg-type]


class TestOutput:
    """Tests for raw and float output."""

    def test_output_is_sum_of_state_words(self) -> None:
        rng = Xoroshiro128Plus(12345)
        state = rng.state
        s0, s1 = int(state[:16], 16), int(state[16:], 16)
        assert rng.next_u64() == (s0 + s1) & MASK64

    @given(seeds)
    def test_random_in_unit_interval(self, seed: int) -> None:
        rng = Xoroshiro128Plus(seed)
        for _ in range(20):
            assert 0.0 <= rng.random() < 1.0

    def test_random_uses_top_53_bits(self) -> None:
        a = Xoroshiro128Plus(9)
        b = Xoroshiro128Plus(9)
        assert a.random() == (b.next_u64() >> 11) / 2**53


class TestKnownAnswers:
    """Reference values for splitmix64 seeding and the xoroshiro128+ step."""

    def test_splitmix64_from_zero(self) -> None:
        assert _splitmix64(0) == (0x9E3779B97F4A7C15, 0xE220A8397B1DCDAF)
        assert _splitmix64(0x9E3779B97F4A7C15)[1] == 0x6E789E6AA1B965F4

    def test_seed_zero_state(self) -> None:
        assert Xoroshiro128Plus(0).state == 'e220a8397b1dcdaf6e789e6aa1b965f4'

    def test_seed_zero_first_output(self) -> None:
        assert Xoroshiro128Plus(0).next_u64() == 0x509946A41CD733A3

    def test_single_bit_state_step(self) -> None:
        # s0 = 1, s1 = 0 isolates the rotate and shift constants (24, 16, 37).
        rng = Xoroshiro128Plus.from_state('0000000000000001' + '0' * 16)
        assert rng.next_u64() == 1
        assert rng.state == '0000000001010001' + '0000002000000000'
        assert rng.next_u64() == 0x2001010001


class TestState:
    """Tests for state capture and restore."""

    def test_state_is_32_hex_digits(self) -> None:
        state = Xoroshiro128Plus(5).state
        assert len(state) == 32
        int(state, 16)

    @given(seeds)
    def test_state_round_trip(self, seed: int) -> None:
        rng = Xoroshiro128Plus(seed)
        rng.random()
        saved = rng.state
        expected = [rng.random() for _ in range(5)]

        rng.state = saved
        assert [rng.random() for _ in range(5)] == expected

        clone = Xoroshiro128Plus.from_state(saved)
        assert [clone.random() for _ in range(5)] == expected
        assert clone.seed is None

    def test_uppercase_state_accepted(self) -> None:
        rng = Xoroshiro128Plus(5)
        saved = rng.state
        rng.state = saved.upper()
        assert rng.state == saved

    @pytest.mark.parametrize('state', ['', 'abc', 'g' * 32, '0' * 31, '0' * 33, 42])
    def test_malformed_state_rejected(self, state: object) -> None:
        rng = Xoroshiro128Plus(5)
        before = rng.state
        with pytest.raises(InvalidArgumentError):
            rng.state = state  # type: ignore[assignment]
        assert rng.state == before

    def test_zero_state_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match='zero'):
            Xoroshiro128Plus.from_state('0' * 32)


class TestJump:
    """Tests for jump()."""

    def test_jump_changes_stream(self) -> None:
        a = Xoroshiro128Plus(11)
        b = Xoroshiro128Plus(11)
        b.jump()
        assert a.state != b.state
        assert [a.next_u64() for _ in range(5)] != [b.next_u64() for _ in range(5)]

    def test_jump_is_deterministic(self) -> None:
        a = Xoroshiro128Plus(11)
        b = Xoroshiro128Plus(11)
        a.jump()
        b.jump()
        assert a.state == b.state

    def test_repr_shows_state(self) -> None:
        rng = Xoroshiro128Plus(1)
        assert repr(rng) == f"Xoroshiro128Plus(state='{rng.state}')"
