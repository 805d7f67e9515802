"""digitnum - arbitrary-precision non-negative decimal integers."""

from digitnum.big_decimal import BigDecimal
from digitnum.config import (
    ArithmeticConfig,
    MultiplyStrategy,
    get_default_config,
    set_default_config,
)
from digitnum.errors import BigDecimalError, MalformedDigits, NegativeValue, Underflow
from digitnum.types import DigitString, validate_digit_string

__version__ = "0.1.0"
__all__ = [
    # Value type
    "BigDecimal",
    # Configuration
    "ArithmeticConfig",
    "MultiplyStrategy",
    "get_default_config",
    "set_default_config",
    # Validation
    "DigitString",
    "validate_digit_string",
    # Errors
    "BigDecimalError",
    "Underflow",
    "MalformedDigits",
    "NegativeValue",
    "__version__",
]
