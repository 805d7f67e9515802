#!/usr/bin/env python3
"""Walk through the BigDecimal API, printing each intermediate value.

Usage:
    python scripts/demo.py [--strategy {repeated_addition,long}]

Prints, one per line: 1, 2, 3, 99900, 10, 20, 40, 0,
999999999999999999999999999999 and 1000000000000000000000000000000.
"""

import argparse
import logging
import sys
from pathlib import Path

import structlog

sys.path.insert(0, str(Path(__file__).parent.parent))

from digitnum import ArithmeticConfig, BigDecimal, MultiplyStrategy, set_default_config


def run_demo(out=None) -> None:
    """Print the demonstration sequence to out (default: sys.stdout)."""
    a = BigDecimal(1)
    a.println(out)
    b = BigDecimal(2)
    b.println(out)

    a += b
    a.println(out)

    a.assign(100)
    b.assign(999)
    a *= b
    a.println(out)

    a.assign(30)
    b.assign(20)
    a -= b
    a.println(out)

    a.assign(30)
    b.assign(10)
    (a - b).println(out)
    ((a - b) * BigDecimal(2)).println(out)

    a.clear()
    a.println(out)

    a.assign("999999999999999999999999999999")
    a.println(out)
    a += 1
    a.println(out)


def main() -> int:
    parser = argparse.ArgumentParser(description="BigDecimal demonstration")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in MultiplyStrategy],
        default=None,
        help="Multiplication strategy (default: from environment)",
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

    if args.strategy:
        set_default_config(ArithmeticConfig(multiply_strategy=MultiplyStrategy(args.strategy)))

    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
