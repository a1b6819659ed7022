"""Uniform sources: the ``[0, 1)`` primitive every sampler operation draws from."""

from __future__ import annotations

import random
from collections.abc import Iterable
from enum import Enum
from typing import Protocol, runtime_checkable

import numpy as np

from fortuna._logging import get_logger
from fortuna.errors import InvalidArgumentError, SourceExhaustedError
from fortuna.xoroshiro import Xoroshiro128Plus

__all__ = [
    'ScriptedSource',
    'SourceKind',
    'UniformSource',
    'make_source',
]

logger = get_logger(__name__)


@runtime_checkable
class UniformSource(Protocol):
    """Anything that returns a fresh float in ``[0, 1)`` from ``random()``.

    ``random.Random``, ``numpy.random.Generator`` and
    :class:`~fortuna.xoroshiro.Xoroshiro128Plus` all qualify.
    """

    def random(self) -> float: ...


class SourceKind(Enum):
    """Built-in uniform source implementations."""

    XOROSHIRO = 'xoroshiro'
    SYSTEM = 'system'
    NUMPY = 'numpy'


def make_source(kind: SourceKind | str = SourceKind.XOROSHIRO, seed: int | None = None) -> UniformSource:
    """Build a uniform source of the given kind.

    Args:
        kind: Source implementation, as a SourceKind or its string value.
        seed: Optional non-negative integer seed. None seeds from OS entropy.

    Returns:
        A fresh UniformSource.

    Raises:
        InvalidArgumentError: If ``seed`` is not a non-negative integer.
    """
    if isinstance(kind, str):
        kind = SourceKind(kind.lower())
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
        raise InvalidArgumentError('seed', f'must be a non-negative integer, got {seed!r}')

    logger.debug('source_created', kind=kind.value, seeded=seed is not None)
    if kind == SourceKind.SYSTEM:
        return random.Random(seed)
    if kind == SourceKind.NUMPY:
        return np.random.default_rng(seed)
    return Xoroshiro128Plus(seed)


class ScriptedSource:
    """Replays a fixed list of uniform values.

    Useful to pin the exact draws an operation sees. ``calls`` counts how many
    values have been handed out.

    Args:
        values: Values to replay, each in ``[0, 1)``.
        cycle: Restart from the first value instead of raising when exhausted.

    Raises:
        InvalidArgumentError: If the script is empty or a value is out of range.
    """

    def __init__(self, values: Iterable[float], *, cycle: bool = False) -> None:
        self._values = [float(v) for v in values]
        if not self._values:
            raise InvalidArgumentError('values', 'must not be empty')
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise InvalidArgumentError('values', f'{v!r} is outside [0, 1)')
        self._cycle = cycle
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self._values) and not self._cycle:
            raise SourceExhaustedError(self.calls)
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value

    @property
    def remaining(self) -> int | None:
        """Values left before exhaustion, or None for a cycling script."""
        if self._cycle:
            return None
        return len(self._values) - self.calls
