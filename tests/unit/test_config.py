"""Tests for arithmetic configuration."""

import dataclasses

import pytest

import digitnum.config
from digitnum import ArithmeticConfig, MultiplyStrategy, get_default_config, set_default_config
from digitnum.config import MULTIPLY_STRATEGY_ENV, WARN_LIMIT_ENV


class TestArithmeticConfig:
    """Tests for ArithmeticConfig defaults and immutability."""

    def test_defaults(self):
        """Repeated addition is the default strategy."""
        config = ArithmeticConfig()
        assert config.multiply_strategy is MultiplyStrategy.REPEATED_ADDITION
        assert config.repeated_addition_warn_limit == 100_000

    def test_frozen(self):
        """Configs cannot be mutated."""
        config = ArithmeticConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.multiply_strategy = MultiplyStrategy.LONG  # type: ignore[misc]

    def test_strategy_values(self):
        """Strategies parse from their string values."""
        assert MultiplyStrategy("long") is MultiplyStrategy.LONG
        assert MultiplyStrategy("repeated_addition") is MultiplyStrategy.REPEATED_ADDITION


class TestFromEnv:
    """Tests for ArithmeticConfig.from_env()."""

    def test_empty_environment(self):
        """Unset variables fall back to defaults."""
        assert ArithmeticConfig.from_env({}) == ArithmeticConfig()

    def test_strategy(self):
        """The strategy variable is case-insensitive and stripped."""
        config = ArithmeticConfig.from_env({MULTIPLY_STRATEGY_ENV: " LONG "})
        assert config.multiply_strategy is MultiplyStrategy.LONG

    def test_invalid_strategy_raises(self):
        """Unknown strategies name the variable in the error."""
        with pytest.raises(ValueError) as exc_info:
            ArithmeticConfig.from_env({MULTIPLY_STRATEGY_ENV: "karatsuba"})
        assert MULTIPLY_STRATEGY_ENV in str(exc_info.value)
        assert "karatsuba" in str(exc_info.value)

    def test_warn_limit(self):
        """The warning limit is parsed as an int."""
        config = ArithmeticConfig.from_env({WARN_LIMIT_ENV: "500"})
        assert config.repeated_addition_warn_limit == 500

    @pytest.mark.parametrize("value", ["abc", "1.5", "-1"])
    def test_invalid_warn_limit_raises(self, value):
        """Non-integer or negative limits are rejected."""
        with pytest.raises(ValueError) as exc_info:
            ArithmeticConfig.from_env({WARN_LIMIT_ENV: value})
        assert WARN_LIMIT_ENV in str(exc_info.value)

    def test_reads_os_environ(self, monkeypatch):
        """Without a mapping, os.environ is used."""
        monkeypatch.setenv(MULTIPLY_STRATEGY_ENV, "long")
        monkeypatch.setenv(WARN_LIMIT_ENV, "42")
        config = ArithmeticConfig.from_env()
        assert config.multiply_strategy is MultiplyStrategy.LONG
        assert config.repeated_addition_warn_limit == 42


class TestDefaultConfig:
    """Tests for the process-wide default config."""

    def test_set_and_get(self):
        """set_default_config() replaces the default."""
        config = ArithmeticConfig(multiply_strategy=MultiplyStrategy.LONG)
        set_default_config(config)
        assert get_default_config() is config

    def test_set_logs_event(self, captured_logs):
        """Changing the default is logged."""
        set_default_config(ArithmeticConfig(repeated_addition_warn_limit=7))
        assert captured_logs == [
            {
                "event": "default_config_set",
                "log_level": "info",
                "multiply_strategy": "repeated_addition",
                "repeated_addition_warn_limit": 7,
            }
        ]

    def test_monkeypatch_restore_is_silent(self, captured_logs):
        """Restoring the default through monkeypatch logs nothing."""
        original = get_default_config()
        with pytest.MonkeyPatch.context() as patch:
            patch.setattr(digitnum.config, "_default_config", original)
            set_default_config(ArithmeticConfig(multiply_strategy=MultiplyStrategy.LONG))
            captured_logs.clear()
        assert get_default_config() is original
        assert captured_logs == []
