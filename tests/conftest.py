"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

import digitnum.config
from digitnum import ArithmeticConfig, MultiplyStrategy, set_default_config

REPEATED_ADDITION = ArithmeticConfig(multiply_strategy=MultiplyStrategy.REPEATED_ADDITION)
LONG = ArithmeticConfig(multiply_strategy=MultiplyStrategy.LONG)


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Restore the default arithmetic config and structlog setup after each test.

    The config is restored by monkeypatch rather than set_default_config(),
    so teardown emits no log events.
    """
    monkeypatch.setattr(digitnum.config, "_default_config", digitnum.config.get_default_config())
    yield
    structlog.reset_defaults()


@pytest.fixture
def captured_logs() -> Iterator[list[dict[str, Any]]]:
    """Collect structlog events emitted during the test."""
    with capture_logs() as logs:
        yield logs


def events_named(logs: list[dict[str, Any]], event: str) -> list[dict[str, Any]]:
    """Return the captured entries for one event name."""
    return [entry for entry in logs if entry["event"] == event]


@pytest.fixture(params=[REPEATED_ADDITION, LONG], ids=lambda c: c.multiply_strategy.value)
def multiply_config(request: pytest.FixtureRequest) -> ArithmeticConfig:
    """Each multiplication strategy in turn."""
    return request.param


@pytest.fixture
def long_multiply() -> ArithmeticConfig:
    """Install grade-school multiplication as the process-wide default."""
    set_default_config(LONG)
    return LONG
