"""Tests for library configuration and initialization."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from railway import RailwayConfig, get_config, init
from railway._config import _detect_json_output, _detect_log_level


class TestRailwayConfig:
    """Tests for the RailwayConfig dataclass."""

    def test_default_values(self) -> None:
        """A default config is silent and renders JSON."""
        config = RailwayConfig()
        assert config.log_level is None
        assert config.json_output is True
        assert config.logging_enabled is False

    def test_logging_enabled(self) -> None:
        """Setting a level enables logging."""
        assert RailwayConfig(log_level='WARNING').logging_enabled is True

    def test_config_is_frozen(self) -> None:
        """RailwayConfig cannot be mutated."""
        config = RailwayConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for _detect_log_level()."""

    def test_unset_is_silent(self) -> None:
        """No variable means no logging."""
        assert _detect_log_level() is None

    def test_env_value(self) -> None:
        """The level is read case-insensitively."""
        with patch.dict(os.environ, {'RAILWAY_LOG_LEVEL': 'info'}):
            assert _detect_log_level() == 'INFO'

    def test_blank_is_silent(self) -> None:
        """A blank variable counts as unset."""
        with patch.dict(os.environ, {'RAILWAY_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None

    def test_unknown_defaults_to_warning(self) -> None:
        """An unknown level falls back to WARNING."""
        with patch.dict(os.environ, {'RAILWAY_LOG_LEVEL': 'LOUD'}):
            assert _detect_log_level() == 'WARNING'


class TestDetectJsonOutput:
    """Tests for _detect_json_output()."""

    def test_default_is_json(self) -> None:
        """JSON is the default format."""
        assert _detect_json_output() is True

    def test_console(self) -> None:
        """'console' selects the console renderer."""
        with patch.dict(os.environ, {'RAILWAY_LOG_FORMAT': 'Console'}):
            assert _detect_json_output() is False

    def test_unknown_falls_back_to_json(self) -> None:
        """An unknown format falls back to JSON."""
        with patch.dict(os.environ, {'RAILWAY_LOG_FORMAT': 'xml'}):
            assert _detect_json_output() is True


class TestInit:
    """Tests for init() and get_config()."""

    def test_init_explicit(self) -> None:
        """Explicit arguments are stored and returned."""
        config = init(log_level='debug', json_output=False)
        assert config == RailwayConfig(log_level='DEBUG', json_output=False)
        assert get_config() is config

    def test_init_from_env(self) -> None:
        """Missing arguments are read from the environment."""
        with patch.dict(os.environ, {'RAILWAY_LOG_LEVEL': 'ERROR', 'RAILWAY_LOG_FORMAT': 'console'}):
            config = init()
        assert config.log_level == 'ERROR'
        assert config.json_output is False

    def test_explicit_overrides_env(self) -> None:
        """Arguments win over the environment."""
        with patch.dict(os.environ, {'RAILWAY_LOG_LEVEL': 'ERROR'}):
            assert init(log_level='INFO').log_level == 'INFO'

    def test_get_config_initializes_lazily(self) -> None:
        """get_config builds and caches a config on first use."""
        config = get_config()
        assert config.log_level is None
        assert get_config() is config

    def test_get_config_never_configures_logging(self) -> None:
        """get_config reads the level from the environment without installing a handler."""
        with (
            patch.dict(os.environ, {'RAILWAY_LOG_LEVEL': 'DEBUG'}),
            patch('railway._config.configure_logging') as configure,
        ):
            config = get_config()
        assert config.log_level == 'DEBUG'
        configure.assert_not_called()

    def test_silent_init_leaves_logging_alone(self) -> None:
        """init without a level does not touch logging."""
        with patch('railway._config.configure_logging') as configure:
            init()
        configure.assert_not_called()

    def test_init_with_level_configures_logging(self) -> None:
        """init with a level installs the log handler."""
        with patch('railway._config.configure_logging') as configure:
            init(log_level='WARNING', json_output=True)
        configure.assert_called_once_with('WARNING', json_output=True)
