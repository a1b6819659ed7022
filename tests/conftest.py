"""Pytest configuration and shared fixtures for fortuna tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Iterable

import pytest
import structlog

from fortuna import Sampler, ScriptedSource, _config, clear_log_hooks


def _reset() -> None:
    _config._config = None
    _config._sampler = None
    clear_log_hooks()


@pytest.fixture
def fresh_globals() -> Generator[None]:
    """Reset the default sampler, config, log hooks and root handlers around a test.

    Not autouse: hypothesis refuses function-scoped fixtures on @given tests.
    """
    root = logging.getLogger()
    level = root.level
    _reset()
    yield
    _reset()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def scripted() -> Callable[..., tuple[Sampler, ScriptedSource]]:
    """Factory for a Sampler driven by a ScriptedSource."""

    def make(values: Iterable[float], *, cycle: bool = False) -> tuple[Sampler, ScriptedSource]:
        source = ScriptedSource(values, cycle=cycle)
        return Sampler(source), source

    return make
