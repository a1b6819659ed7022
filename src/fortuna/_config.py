"""Sampler configuration: SamplerConfig, environment detection, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fortuna._logging import configure_logging, get_logger
from fortuna.sampler import Sampler
from fortuna.sources import SourceKind, make_source

__all__ = [
    'SamplerConfig',
    'SourceKind',
    'get_config',
    'get_sampler',
    'init',
    'set_sampler',
]

logger = get_logger(__name__)


@dataclass(frozen=True)
class SamplerConfig:
    """Configuration for the default sampler.

    Attributes:
        source: Uniform source implementation.
        seed: Integer seed for the source. None = OS entropy.
        synchronized: Lock every operation of the default sampler.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    source: SourceKind = SourceKind.XOROSHIRO
    seed: int | None = None
    synchronized: bool = False
    log_level: str | None = None


# Global configuration and default sampler (set by init())
_config: SamplerConfig | None = None
_sampler: Sampler | None = None


def _detect_source() -> SourceKind:
    """Detect the source kind from FORTUNA_SOURCE, defaulting to xoroshiro."""
    env_source = os.environ.get('FORTUNA_SOURCE', '').lower()
    if not env_source:
        return SourceKind.XOROSHIRO
    try:
        return SourceKind(env_source)
    except ValueError:
        logging.warning("Unknown FORTUNA_SOURCE value '%s', defaulting to xoroshiro", env_source)
        return SourceKind.XOROSHIRO


def _detect_seed() -> int | None:
    """Detect a non-negative integer seed from FORTUNA_SEED."""
    env_seed = os.environ.get('FORTUNA_SEED', '').strip()
    if not env_seed:
        return None
    try:
        seed = int(env_seed, 0)
    except ValueError:
        logging.warning("Ignoring non-integer FORTUNA_SEED value '%s'", env_seed)
        return None
    if seed < 0:
        logging.warning("Ignoring negative FORTUNA_SEED value '%s'", env_seed)
        return None
    return seed


def init(
    source: SourceKind | str | None = None,
    seed: int | None = None,
    synchronized: bool = False,
    log_level: str | None = None,
) -> SamplerConfig:
    """Initialize the default sampler with the specified configuration.

    Args:
        source: Uniform source kind. Detected from FORTUNA_SOURCE if None.
            Can be SourceKind enum or string ("xoroshiro", "system", "numpy").
        seed: Non-negative integer seed. Detected from FORTUNA_SEED if None.
        synchronized: Lock every operation of the default sampler.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.

    Returns:
        The SamplerConfig that was set.

    Raises:
        InvalidArgumentError: If the seed is negative or not an integer. The
            previous configuration and sampler stay in effect.

    Example:
        ```python
        import fortuna

        fortuna.init(source='numpy', seed=1234)
        fortuna.discrete_range(1, 6)
        ```
    """
    global _config, _sampler  # noqa: PLW0603

    if source is None:
        resolved_source = _detect_source()
    elif isinstance(source, str):
        resolved_source = SourceKind(source.lower())
    else:
        resolved_source = source

    resolved_seed = seed if seed is not None else _detect_seed()

    # Nothing is published until the source has been built.
    sampler = Sampler(make_source(resolved_source, resolved_seed), synchronized=synchronized)
    config = SamplerConfig(
        source=resolved_source,
        seed=resolved_seed,
        synchronized=synchronized,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    _config, _sampler = config, sampler
    logger.info('sampler_initialized', source=resolved_source.value, seeded=resolved_seed is not None)
    return _config


def get_config() -> SamplerConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'fortuna not initialized. Call fortuna.init() first.'
        raise RuntimeError(msg)
    return _config


def get_sampler() -> Sampler:
    """Get the default sampler, initializing from the environment on first use."""
    if _sampler is None:
        init()
    assert _sampler is not None
    return _sampler


def set_sampler(sampler: Sampler) -> None:
    """Replace the default sampler used by the module-level functions."""
    global _sampler  # noqa: PLW0603
    _sampler = sampler
