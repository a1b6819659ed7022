"""Argument checks shared by the sampler operations.

Every check runs before the first draw, so a rejected call leaves both the
uniform source and the normal-deviate cache untouched.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any, TypeVar

from fortuna._logging import get_logger
from fortuna.errors import InvalidArgumentError

T = TypeVar('T')

__all__ = [
    'require_finite',
    'require_number',
    'require_positive',
    'require_sequence',
]

logger = get_logger(__name__)


def _reject(argument: str, reason: str) -> InvalidArgumentError:
    logger.debug('argument_rejected', argument=argument, reason=reason)
    return InvalidArgumentError(argument, reason)


def require_number(argument: str, value: Any) -> float:
    """Return ``value`` if it is a real number, else raise.

    ``bool`` is refused even though it subclasses ``int``. Integers too large
    for a float are refused as well; the value itself is returned unconverted so
    integer bounds keep their precision.

    Raises:
        InvalidArgumentError: If ``value`` is not a real number in float range.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise _reject(argument, f'must be a number, got {type(value).__name__}')
    try:
        float(value)
    except OverflowError:
        raise _reject(argument, 'is out of float range') from None
    return value


def require_finite(argument: str, value: Any) -> float:
    """Like :func:`require_number`, but also refuse NaN and infinities."""
    number = require_number(argument, value)
    if not math.isfinite(number):
        raise _reject(argument, f'must be finite, got {number!r}')
    return number


def require_positive(argument: str, value: Any) -> float:
    """Like :func:`require_finite`, but the value must be strictly above zero."""
    number = require_finite(argument, value)
    if number <= 0:
        raise _reject(argument, f'must be > 0, got {number!r}')
    return number


def require_sequence(argument: str, value: Sequence[T] | Any) -> Sequence[T]:
    """Return ``value`` if it is a non-empty sequence, else raise."""
    if not isinstance(value, Sequence):
        raise _reject(argument, f'must be a sequence, got {type(value).__name__}')
    if len(value) == 0:
        raise _reject(argument, 'must not be empty')
    return value
