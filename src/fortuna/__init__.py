"""fortuna: pseudo-random sampling over an injectable uniform source.

Flat imports (preferred):
    from fortuna import Sampler, Xoroshiro128Plus, InvalidArgumentError
    from fortuna import chance, discrete_range, normal_deviate

Functions:
    chance(probability): True with the given probability.
    discrete_range(minimum, maximum): Integer from an inclusive range.
    normal_deviate(mean, sigma): Gaussian value (polar Box-Muller, pair-cached).
    sample_from_sequence(items): Element of a non-empty sequence.
    random_string(length=10): Alphanumeric string.
    uniform_with_error(mean, variance): mean plus uniform error in (-variance, variance].

The module-level functions share one default Sampler, built from the
environment on first use or explicitly with init().
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from fortuna._config import SamplerConfig, get_config, get_sampler, init, set_sampler
from fortuna._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook
from fortuna.errors import InvalidArgument, InvalidArgumentError, SourceExhausted, SourceExhaustedError
from fortuna.sampler import CORPUS, Sampler
from fortuna.sources import ScriptedSource, SourceKind, UniformSource, make_source
from fortuna.xoroshiro import Xoroshiro128Plus

T = TypeVar('T')

__all__ = [
    # Core
    'CORPUS',
    'Sampler',
    # Operations
    'chance',
    'discrete_range',
    'normal_deviate',
    'random_string',
    'sample_from_sequence',
    'uniform_with_error',
    # Sources
    'ScriptedSource',
    'SourceKind',
    'UniformSource',
    'Xoroshiro128Plus',
    'make_source',
    # Config
    'SamplerConfig',
    'get_config',
    'get_sampler',
    'init',
    'set_sampler',
    # Errors
    'InvalidArgument',
    'InvalidArgumentError',
    'SourceExhausted',
    'SourceExhaustedError',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]


def chance(probability: float) -> bool:
    """Return True with the given probability, using the default sampler."""
    return get_sampler().chance(probability)


def discrete_range(minimum: float, maximum: float) -> int:
    """Return an integer from the inclusive range, using the default sampler."""
    return get_sampler().discrete_range(minimum, maximum)


def normal_deviate(mean: float, sigma: float) -> float:
    """Return a normally distributed value, using the default sampler."""
    return get_sampler().normal_deviate(mean, sigma)


def sample_from_sequence(items: Sequence[T]) -> T:
    """Return an element of a non-empty sequence, using the default sampler."""
    return get_sampler().sample_from_sequence(items)


def random_string(length: float = 10) -> str:
    """Return an alphanumeric string, using the default sampler."""
    return get_sampler().random_string(length)


def uniform_with_error(mean: float, variance: float) -> float:
    """Return mean plus uniform error, using the default sampler."""
    return get_sampler().uniform_with_error(mean, variance)
