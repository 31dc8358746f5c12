"""Pytest configuration and shared fixtures for railway tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from hypothesis import HealthCheck, settings

# fresh_config is function-scoped and autouse; resetting it once per test
# (rather than per example) is enough for property tests.
settings.register_profile('railway', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('railway')


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate each test from the environment and from earlier init() calls."""
    from railway._config import reset

    monkeypatch.delenv('RAILWAY_LOG_LEVEL', raising=False)
    monkeypatch.delenv('RAILWAY_LOG_FORMAT', raising=False)
    reset()
    yield
    reset()


@pytest.fixture
def log_events() -> Generator[list[dict]]:
    """Enable logging and capture every emitted event dict."""
    from railway import init
    from railway._logging import add_log_hook, clear_log_hooks

    events: list[dict] = []
    init(log_level='DEBUG', json_output=True)
    clear_log_hooks()
    add_log_hook(events.append)
    yield events
    clear_log_hooks()


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from railway import Option

    return Option.of_some('hello')


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from railway import Result

    return Result.of_value(42)


@pytest.fixture
def sample_error():
    """Sample Error value for testing."""
    from railway import Result

    return Result.of_error(ValueError('test error'))
