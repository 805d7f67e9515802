"""Error taxonomy for BigDecimal arithmetic.

All errors raised by the library derive from BigDecimalError, so callers
can catch everything with a single except clause. Each concrete error also
derives from the matching built-in (ArithmeticError or ValueError) so code
written against the built-ins keeps working.
"""

from __future__ import annotations


class BigDecimalError(Exception):
    """Base class for BigDecimal errors."""

    pass


class Underflow(BigDecimalError, ArithmeticError):
    """Operation would produce a negative result.

    Raised when decrementing zero or subtracting a larger value from a
    smaller one.
    """

    pass


class MalformedDigits(BigDecimalError, ValueError):
    """Digit string contains a symbol other than '0'..'9'."""

    def __init__(self, text: str, position: int) -> None:
        super().__init__(text, position)
        self.text = text
        self.position = position

    def __str__(self) -> str:
        return (
            f"Malformed digit string {self.text!r}: "
            f"invalid symbol {self.text[self.position]!r} at position {self.position}"
        )


class NegativeValue(BigDecimalError, ValueError):
    """Integer source is negative."""

    pass
