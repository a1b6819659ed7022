"""Seedable xoroshiro128+ uniform source.

The engine's native RNG object: a 128-bit xoroshiro128+ generator whose seed
is expanded through splitmix64 and whose state can be read and restored as a
hex string within the running process.
"""

from __future__ import annotations

import os
import re

from fortuna.errors import InvalidArgumentError

__all__ = ['Xoroshiro128Plus']

_MASK64 = (1 << 64) - 1
_STATE_RE = re.compile(r'[0-9a-fA-F]{32}')

# Jump polynomial for the (24, 16, 37) parameter set; equivalent to 2**64 calls.
_JUMP = (0xDF900294D8F554A5, 0x170865DF4B3201FC)


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


def _splitmix64(x: int) -> tuple[int, int]:
    """Advance a splitmix64 state, returning ``(new_state, output)``."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    z = x
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x, z ^ (z >> 31)


class Xoroshiro128Plus:
    """xoroshiro128+ generator producing floats in ``[0, 1)``.

    Satisfies :class:`fortuna.sources.UniformSource`.

    Example:
        ```python
        rng = Xoroshiro128Plus(812)
        saved = rng.state
        a = rng.random()
        rng.state = saved
        assert rng.random() == a
        ```
    """

    __slots__ = ('_s0', '_s1', 'seed')

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(8), 'little')
        elif isinstance(seed, bool) or not isinstance(seed, int):
            raise InvalidArgumentError('seed', f'must be an int, got {type(seed).__name__}')
        self.seed = seed
        x, self._s0 = _splitmix64(seed & _MASK64)
        _, self._s1 = _splitmix64(x)

    @classmethod
    def from_state(cls, state: str) -> Xoroshiro128Plus:
        """Create a generator positioned at a previously captured ``state``."""
        rng = cls(0)
        rng.seed = None
        rng.state = state
        return rng

    @property
    def state(self) -> str:
        """Current position as 32 lowercase hex digits."""
        return f'{self._s0:016x}{self._s1:016x}'

    @state.setter
    def state(self, value: str) -> None:
        if not isinstance(value, str) or _STATE_RE.fullmatch(value) is None:
            raise InvalidArgumentError('state', 'must be 32 hex digits')
        s0, s1 = int(value[:16], 16), int(value[16:], 16)
        if s0 == 0 and s1 == 0:
            raise InvalidArgumentError('state', 'must not be all zero')
        self._s0, self._s1 = s0, s1

    def next_u64(self) -> int:
        """Return the next raw 64-bit output."""
        s0, s1 = self._s0, self._s1
        result = (s0 + s1) & _MASK64
        s1 ^= s0
        self._s0 = _rotl(s0, 24) ^ s1 ^ ((s1 << 16) & _MASK64)
        self._s1 = _rotl(s1, 37)
        return result

    def random(self) -> float:
        """Return the next float in ``[0, 1)`` built from the top 53 bits."""
        return (self.next_u64() >> 11) * (1.0 / (1 << 53))

    def jump(self) -> None:
        """Advance the generator by 2**64 draws.

        Successive jumps hand out non-overlapping sub-streams.
        """
        s0 = s1 = 0
        for word in _JUMP:
            for bit in range(64):
                if word & (1 << bit):
                    s0 ^= self._s0
                    s1 ^= self._s1
                self.next_u64()
        self._s0, self._s1 = s0, s1

    def __repr__(self) -> str:
        return f'Xoroshiro128Plus(state={self.state!r})'
