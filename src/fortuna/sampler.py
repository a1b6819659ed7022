"""Sampler: distribution-shaping operations over one uniform source.

A Sampler owns two things: the uniform source it draws from and a one-slot
cache for the second normal deviate of each Box-Muller pair. Every operation
validates its arguments before drawing, so a rejected call never advances the
source or disturbs the cache.
"""

from __future__ import annotations

import math
import threading
from collections.abc import Sequence
from contextlib import AbstractContextManager, nullcontext
from typing import Any, TypeVar

from fortuna._logging import get_logger
from fortuna._validate import require_finite, require_number, require_positive, require_sequence
from fortuna.sources import UniformSource
from fortuna.xoroshiro import Xoroshiro128Plus

T = TypeVar('T')

__all__ = ['CORPUS', 'Sampler']

CORPUS = '1234567890ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'

logger = get_logger(__name__)


class Sampler:
    """Pseudo-random sampling over an injectable uniform source.

    Not safe for concurrent use unless built with ``synchronized=True``, which
    holds one lock around the source and the deviate cache together.

    Args:
        source: Uniform source to draw from. Defaults to an OS-seeded
            :class:`~fortuna.xoroshiro.Xoroshiro128Plus`.
        synchronized: Serialize every operation behind a re-entrant lock.

    Example:
        ```python
        from fortuna import Sampler, Xoroshiro128Plus

        sampler = Sampler(Xoroshiro128Plus(seed=42))
        sampler.discrete_range(1, 6)      # a die roll
        sampler.normal_deviate(100, 15)   # first of a pair
        sampler.normal_deviate(100, 15)   # served from the cache
        ```
    """

    def __init__(self, source: UniformSource | None = None, *, synchronized: bool = False) -> None:
        self._source = source if source is not None else Xoroshiro128Plus()
        self._cached_deviate: float | None = None
        self._lock: AbstractContextManager[Any] = threading.RLock() if synchronized else nullcontext()
        self.synchronized = synchronized
        logger.debug(
            'sampler_created',
            source=type(self._source).__name__,
            synchronized=synchronized,
        )

    @property
    def source(self) -> UniformSource:
        """The uniform source this sampler draws from."""
        return self._source

    @property
    def has_cached_deviate(self) -> bool:
        """True if the next normal_deviate() call will be served from the cache."""
        return self._cached_deviate is not None

    def reset(self) -> None:
        """Drop any cached normal deviate."""
        with self._lock:
            self._cached_deviate = None

    def chance(self, probability: float) -> bool:
        """Return True with the given probability.

        ``probability`` is not clamped: anything above 1 always wins and
        anything at or below 0 always loses.
        """
        probability = require_number('probability', probability)
        with self._lock:
            return probability > self._source.random()

    def discrete_range(self, minimum: float, maximum: float) -> int:
        """Return a uniformly chosen integer from the inclusive range.

        Both bounds are truncated toward zero and may be given in either order.

        Raises:
            InvalidArgumentError: If a bound is not a finite number.
        """
        lo = math.trunc(require_finite('minimum', minimum))
        hi = math.trunc(require_finite('maximum', maximum))
        span = abs(hi - lo) + 1
        lo = min(lo, hi)
        with self._lock:
            offset = math.floor(self._source.random() * span)
        # u * span can round up to span once span exceeds 2**53.
        return lo + min(offset, span - 1)

    def normal_deviate(self, mean: float, sigma: float) -> float:
        """Return a normally distributed value using the polar Box-Muller method.

        Deviates are produced in pairs: one call returns the first and caches
        the second, the next call returns the cached one without drawing. Only
        the standard deviate is cached, so consecutive calls may use different
        ``mean`` and ``sigma``.
        """
        mean = require_number('mean', mean)
        sigma = require_number('sigma', sigma)
        with self._lock:
            if self._cached_deviate is not None:
                base = self._cached_deviate
                self._cached_deviate = None
            else:
                # Accepts with probability pi/4 per pass, so the loop
                # terminates with probability 1.
                while True:
                    u = 2.0 * self._source.random() - 1.0
                    v = 2.0 * self._source.random() - 1.0
                    w = u * u + v * v
                    if 0.0 < w < 1.0:
                        break
                w = math.sqrt(-2.0 * math.log(w) / w)
                base = u * w
                self._cached_deviate = v * w
            return mean + base * sigma

    def sample_from_sequence(self, items: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence.

        Raises:
            InvalidArgumentError: If ``items`` is empty or not a sequence.
        """
        items = require_sequence('items', items)
        with self._lock:
            return items[self.discrete_range(0, len(items) - 1)]

    def random_string(self, length: float = 10) -> str:
        """Return ``length`` characters drawn independently from CORPUS.

        ``length`` is truncated toward zero, so ``0.5`` yields ``''``.

        Raises:
            InvalidArgumentError: If ``length`` is not a number greater than 0.
        """
        count = math.trunc(require_positive('length', length))
        last = len(CORPUS) - 1
        with self._lock:
            return ''.join(CORPUS[self.discrete_range(0, last)] for _ in range(count))

    def uniform_with_error(self, mean: float, variance: float) -> float:
        """Return ``mean`` plus an error uniform in ``(-variance, variance]``.

        A draw of exactly 0.5 yields ``mean`` unchanged.
        """
        mean = require_number('mean', mean)
        variance = require_number('variance', variance)
        with self._lock:
            error = variance * 2.0 * (0.5 - self._source.random())
        return mean + error

    def __repr__(self) -> str:
        return (
            f'Sampler(source={type(self._source).__name__}, '
            f'synchronized={self.synchronized}, cached={self.has_cached_deviate})'
        )
