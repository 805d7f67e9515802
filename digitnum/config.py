"""Arithmetic configuration for BigDecimal.

Configuration is a frozen dataclass so it can be shared freely and swapped
in tests. The process-wide default is read from environment variables at
import time and can be replaced with set_default_config().

Environment variables:
- DIGITNUM_MULTIPLY_STRATEGY: "repeated_addition" (default) or "long"
- DIGITNUM_REPEATED_ADDITION_WARN_LIMIT: counter magnitude above which
  repeated-addition multiplication logs a warning (default: 100000)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

import structlog

logger = structlog.get_logger()

MULTIPLY_STRATEGY_ENV = "DIGITNUM_MULTIPLY_STRATEGY"
WARN_LIMIT_ENV = "DIGITNUM_REPEATED_ADDITION_WARN_LIMIT"


class MultiplyStrategy(str, Enum):
    """Algorithm used by BigDecimal multiplication.

    REPEATED_ADDITION adds the larger operand to a running sum once per
    unit of the smaller one. Its cost grows with the numeric magnitude of
    the smaller operand, not its digit count, so it is only practical for
    small multipliers.

    LONG is grade-school digit-wise multiplication, quadratic in the digit
    counts.
    """

    REPEATED_ADDITION = "repeated_addition"
    LONG = "long"


@dataclass(frozen=True)
class ArithmeticConfig:
    """Configuration for BigDecimal arithmetic.

    Attributes:
        multiply_strategy: Multiplication algorithm (default: repeated addition)
        repeated_addition_warn_limit: Counter value above which repeated
            addition logs a warning (default: 100,000)
    """

    multiply_strategy: MultiplyStrategy = MultiplyStrategy.REPEATED_ADDITION
    repeated_addition_warn_limit: int = 100_000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ArithmeticConfig:
        """Build a config from environment variables.

        Unset variables fall back to the dataclass defaults.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            ValueError: If a variable is set to an invalid value
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        strategy = env.get(MULTIPLY_STRATEGY_ENV)
        if strategy:
            try:
                kwargs["multiply_strategy"] = MultiplyStrategy(strategy.strip().lower())
            except ValueError as err:
                choices = ", ".join(s.value for s in MultiplyStrategy)
                raise ValueError(
                    f"{MULTIPLY_STRATEGY_ENV} must be one of {choices}, got {strategy!r}"
                ) from err

        limit = env.get(WARN_LIMIT_ENV)
        if limit:
            try:
                limit_value = int(limit)
            except ValueError as err:
                raise ValueError(f"{WARN_LIMIT_ENV} must be an integer, got {limit!r}") from err
            if limit_value < 0:
                raise ValueError(f"{WARN_LIMIT_ENV} cannot be negative, got {limit_value}")
            kwargs["repeated_addition_warn_limit"] = limit_value

        return cls(**kwargs)  # type: ignore[arg-type]


# Default configuration instance
DEFAULT_CONFIG = ArithmeticConfig.from_env()

_default_config = DEFAULT_CONFIG


def get_default_config() -> ArithmeticConfig:
    """Return the process-wide default configuration."""
    return _default_config


def set_default_config(config: ArithmeticConfig) -> None:
    """Replace the process-wide default configuration."""
    global _default_config
    _default_config = config
    logger.info(
        "default_config_set",
        multiply_strategy=config.multiply_strategy.value,
        repeated_addition_warn_limit=config.repeated_addition_warn_limit,
    )
