"""Digit-string validation shared by BigDecimal and pydantic models.

validate_digit_string() is the single entry point used by every
construction and assignment path of BigDecimal. DigitString wraps the same
check for use as a pydantic field type.
"""

from typing import Annotated, Any

import structlog
from pydantic import BeforeValidator

from digitnum.errors import MalformedDigits, NegativeValue

logger = structlog.get_logger()

DIGIT_CHARS = "0123456789"


def validate_digit_string(text: str) -> str:
    """Check that every symbol of text is an ASCII decimal digit.

    The empty string is accepted and denotes zero.

    Args:
        text: Candidate digit string

    Returns:
        text, unchanged

    Raises:
        MalformedDigits: If any symbol is outside '0'..'9'
    """
    for position, ch in enumerate(text):
        if ch not in DIGIT_CHARS:
            logger.debug(
                "big_decimal_malformed_digits",
                position=position,
                symbol=ch,
                length=len(text),
            )
            raise MalformedDigits(text, position)
    return text


def _coerce_digit_string(value: Any) -> str:
    """Normalize pydantic input to a validated digit string."""
    # bool is an int subclass but never a meaningful magnitude
    if isinstance(value, bool):
        raise ValueError("DigitString does not accept booleans")

    if isinstance(value, int):
        if value < 0:
            raise NegativeValue(f"DigitString cannot be negative: {value}")
        return str(value)

    if not isinstance(value, str):
        raise ValueError(f"DigitString must be string or int, got {type(value).__name__}")

    return validate_digit_string(value)


# Non-negative decimal integer as text (validated, not trimmed)
DigitString = Annotated[str, BeforeValidator(_coerce_digit_string)]
