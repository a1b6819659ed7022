"""Sampler error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidArgument',
    'InvalidArgumentError',
    'SourceExhausted',
    'SourceExhaustedError',
]


# --- Argument Errors ---


class InvalidArgument(msgspec.Struct, frozen=True, gc=False):
    """Argument has the wrong type or shape - struct variant."""

    argument: str
    reason: str

    def to_exception(self) -> InvalidArgumentError:
        """Convert to exception for raise-based code."""
        return InvalidArgumentError(self.argument, self.reason)


class InvalidArgumentError(ValueError):
    """Argument has the wrong type or shape - exception variant."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f'{argument}: {reason}')

    def to_struct(self) -> InvalidArgument:
        """Convert to struct for value-based code."""
        return InvalidArgument(self.argument, self.reason)


# --- Source Errors ---


class SourceExhausted(msgspec.Struct, frozen=True, gc=False):
    """Scripted source has no values left - struct variant."""

    draws: int

    def to_exception(self) -> SourceExhaustedError:
        """Convert to exception for raise-based code."""
        return SourceExhaustedError(self.draws)


class SourceExhaustedError(Exception):
    """Scripted source has no values left - exception variant."""

    def __init__(self, draws: int) -> None:
        self.draws = draws
        super().__init__(f'Source exhausted after {draws} draws')

    def to_struct(self) -> SourceExhausted:
        """Convert to struct for value-based code."""
        return SourceExhausted(self.draws)
