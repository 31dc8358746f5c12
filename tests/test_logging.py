"""Tests for logging configuration and hooks."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import pytest
from railway._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_hooks() -> Generator[None]:
    clear_log_hooks()
    yield
    clear_log_hooks()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_root_level(self) -> None:
        """The root logger level follows the argument."""
        configure_logging('ERROR')
        assert logging.getLogger().level == logging.ERROR

    def test_installs_single_handler(self) -> None:
        """Reconfiguring replaces the handler instead of stacking."""
        configure_logging('INFO')
        configure_logging('INFO', json_output=False)
        assert len(logging.getLogger().handlers) == 1


class TestLogHooks:
    """Tests for log hooks."""

    def test_hook_receives_events(self) -> None:
        """A hook sees each event with its bound fields."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('railway.test').info('hello', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'hello']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_remove_hook(self) -> None:
        """A removed hook stops receiving events."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        logger = get_logger('railway.test')
        logger.info('first')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('second')
        assert len(calls) == 1

    def test_remove_unknown_hook_is_ignored(self) -> None:
        """Removing a hook that was never added is a no-op."""
        remove_log_hook(lambda _: None)

    def test_hook_exception_does_not_break_logging(self) -> None:
        """A failing hook does not stop the other hooks."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failed')

        configure_logging(level='DEBUG')
        add_log_hook(bad_hook)
        add_log_hook(lambda _: calls.append('good'))

        get_logger('railway.test').info('message')
        assert calls == ['good']

    def test_hook_receives_copy(self) -> None:
        """Each hook gets its own copy of the event."""

        def mutate(event_dict: dict[str, Any]) -> None:
            event_dict['event'] = 'mutated'

        seen: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(mutate)
        add_log_hook(seen.append)

        get_logger('railway.test').info('original')
        assert seen[-1]['event'] == 'original'
