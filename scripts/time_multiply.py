#!/usr/bin/env python3
"""Time BigDecimal multiplication under both strategies.

Repeated addition grows with the numeric value of the smaller operand,
long multiplication with the digit counts. This script makes the gap
visible for a range of multiplier sizes.

Usage:
    python scripts/time_multiply.py [--digits 40] [--max-multiplier-digits 5]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import structlog

sys.path.insert(0, str(Path(__file__).parent.parent))

from digitnum import ArithmeticConfig, BigDecimal, MultiplyStrategy


def time_product(lhs: BigDecimal, rhs: BigDecimal, config: ArithmeticConfig) -> float:
    """Return the wall time of lhs * rhs in milliseconds."""
    start = time.perf_counter()
    lhs.copy().multiply(rhs, config)
    return (time.perf_counter() - start) * 1000


def main() -> int:
    parser = argparse.ArgumentParser(description="Compare BigDecimal multiplication strategies")
    parser.add_argument("--digits", type=int, default=40, help="Digits in the multiplicand")
    parser.add_argument(
        "--max-multiplier-digits",
        type=int,
        default=5,
        help="Largest multiplier size to try (repeated addition gets slow past 6)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    multiplicand = BigDecimal("7" * args.digits)
    # Warnings are expected here; silence them by raising the limit
    repeated = ArithmeticConfig(
        multiply_strategy=MultiplyStrategy.REPEATED_ADDITION,
        repeated_addition_warn_limit=10**args.max_multiplier_digits,
    )
    long = ArithmeticConfig(multiply_strategy=MultiplyStrategy.LONG)

    print(f"Multiplicand: {args.digits} digits")
    print(f"{'multiplier':>12} {'repeated (ms)':>14} {'long (ms)':>10}")
    for size in range(1, args.max_multiplier_digits + 1):
        multiplier = BigDecimal("9" * size)
        repeated_ms = time_product(multiplicand, multiplier, repeated)
        long_ms = time_product(multiplicand, multiplier, long)
        print(f"{str(multiplier):>12} {repeated_ms:>14.2f} {long_ms:>10.2f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
